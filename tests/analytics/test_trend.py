import math

import pytest

from fantasy_football_manager.analytics.models import RiskCategory, Trend, TrendSettings
from fantasy_football_manager.analytics.trend import (
    analyze_roster,
    analyze_trend,
    categorize_risk,
    classify_trend,
    consistency_score,
)
from tests.fakes.players import make_player


class TestAnalyzeTrend:
    def test_empty_history_is_all_zero_and_steady(self) -> None:
        m = analyze_trend([])
        assert m.season_average == 0.0
        assert m.last_n_average == 0.0
        assert m.variance == 0.0
        assert m.std_dev == 0.0
        assert m.trend is Trend.STEADY
        assert m.games_played == 0

    def test_single_week_has_zero_variance(self) -> None:
        m = analyze_trend([18.0])
        assert m.variance == 0.0
        assert not math.isnan(m.std_dev)
        assert m.season_average == 18.0

    def test_population_variance(self) -> None:
        m = analyze_trend([10.0, 20.0])
        assert m.season_average == pytest.approx(15.0)
        assert m.variance == pytest.approx(25.0)
        assert m.std_dev == pytest.approx(5.0)

    def test_last_n_uses_final_weeks(self) -> None:
        m = analyze_trend([1.0, 2.0, 3.0, 4.0, 5.0])
        assert m.last_n_average == pytest.approx(4.0)

    def test_last_n_with_short_history(self) -> None:
        m = analyze_trend([6.0, 8.0])
        assert m.last_n_average == pytest.approx(7.0)

    def test_custom_window(self) -> None:
        m = analyze_trend([1.0, 2.0, 3.0, 4.0, 5.0], TrendSettings(window=2))
        assert m.last_n_average == pytest.approx(4.5)
        assert m.window == 2

    def test_deterministic(self) -> None:
        weeks = [12.0, 3.5, 22.0, 18.0, 9.0]
        assert analyze_trend(weeks) == analyze_trend(list(weeks))

    def test_hot(self) -> None:
        assert analyze_trend([8.0, 8.0, 8.0, 20.0, 22.0, 24.0]).trend is Trend.HOT

    def test_cold(self) -> None:
        assert analyze_trend([20.0, 20.0, 20.0, 5.0, 5.0, 5.0]).trend is Trend.COLD


class TestClassifyTrend:
    def test_low_usage_spike_is_not_hot(self) -> None:
        # 2 -> 6 is a big relative jump but below the absolute floor
        assert classify_trend(2.0, 6.0, TrendSettings()) is Trend.STEADY

    def test_low_average_drop_is_not_cold(self) -> None:
        assert classify_trend(8.0, 1.0, TrendSettings()) is Trend.STEADY

    def test_hot_requires_relative_margin(self) -> None:
        assert classify_trend(15.0, 16.0, TrendSettings()) is Trend.STEADY


class TestAnalyzeRoster:
    def test_keyed_by_player_id(self) -> None:
        players = [make_player("a", weekly=(10.0, 12.0)), make_player("b")]
        metrics = analyze_roster(players)
        assert set(metrics) == {"a", "b"}
        assert metrics["a"].player_id == "a"
        assert metrics["b"].games_played == 0


class TestConsistencyAndRisk:
    def test_perfectly_consistent(self) -> None:
        assert consistency_score(analyze_trend([10.0, 10.0, 10.0])) == pytest.approx(1.0)

    def test_zero_average_is_zero_consistency(self) -> None:
        assert consistency_score(analyze_trend([])) == 0.0

    def test_never_negative(self) -> None:
        assert consistency_score(analyze_trend([0.0, 0.0, 30.0])) >= 0.0

    @pytest.mark.parametrize(
        ("std", "expected"),
        [(0.0, RiskCategory.LOW), (3.9, RiskCategory.LOW), (4.0, RiskCategory.MEDIUM), (8.0, RiskCategory.HIGH)],
    )
    def test_categorize_risk(self, std: float, expected: RiskCategory) -> None:
        assert categorize_risk(std) is expected
