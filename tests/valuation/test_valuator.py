import pytest

from fantasy_football_manager.analytics.trend import analyze_trend
from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.domain.scoring import ScoringConfig, ScoringFormat
from fantasy_football_manager.valuation.age import DynastyAgePolicy
from fantasy_football_manager.valuation.cache import ValuationCache
from fantasy_football_manager.valuation.valuator import PlayerValuator
from tests.fakes.players import make_player

PPR = ScoringConfig(scoring_format=ScoringFormat.PPR)
STANDARD = ScoringConfig(scoring_format=ScoringFormat.STANDARD)


class TestPlayerValuator:
    def test_blends_current_and_projected(self) -> None:
        result = PlayerValuator().value(make_player(position=Position.WR, projected=20.0, current=10.0), PPR)
        assert result.base_value == pytest.approx(16.0)
        assert result.final_value == pytest.approx(16.0 * 1.15)

    def test_scarcity_applied_to_base(self) -> None:
        result = PlayerValuator().value(make_player(position=Position.RB, projected=10.0), PPR)
        assert result.scarcity_multiplier == pytest.approx(1.2)
        assert result.base_value == pytest.approx(12.0)
        assert result.final_value == pytest.approx(12.6)

    def test_format_changes_value(self) -> None:
        rb = make_player(position=Position.RB, projected=10.0)
        assert PlayerValuator().value(rb, STANDARD).final_value == pytest.approx(13.2)

    def test_never_negative(self) -> None:
        result = PlayerValuator().value(make_player(projected=-5.0), PPR)
        assert result.final_value == 0.0

    def test_monotonic_in_projection(self) -> None:
        valuator = PlayerValuator()
        low = valuator.value(make_player(projected=10.0, current=8.0), PPR)
        high = valuator.value(make_player(projected=12.0, current=8.0), PPR)
        assert high.final_value > low.final_value

    def test_hot_streak_raises_value(self) -> None:
        flat = make_player(position=Position.WR, projected=15.0, weekly=(15.0, 15.0, 15.0, 15.0))
        hot = make_player(position=Position.WR, projected=15.0, weekly=(10.0, 10.0, 10.0, 20.0, 20.0, 20.0))
        valuator = PlayerValuator()
        assert valuator.value(hot, PPR).trend_multiplier > 1.0
        assert valuator.value(hot, PPR).final_value > valuator.value(flat, PPR).final_value

    def test_explicit_metrics_used(self) -> None:
        player = make_player(position=Position.WR, projected=15.0)
        metrics = analyze_trend([30.0, 30.0, 30.0, 0.0, 0.0, 0.0])
        assert PlayerValuator().value(player, PPR, metrics).trend_multiplier == pytest.approx(0.85)

    def test_dynasty_age_policy(self) -> None:
        young = make_player(position=Position.RB, projected=10.0, age=23)
        result = PlayerValuator(age_policy=DynastyAgePolicy()).value(young, PPR)
        assert result.age_multiplier == pytest.approx(1.12)
        assert result.final_value == pytest.approx(12.6 * 1.12)

    def test_redraft_ignores_age(self) -> None:
        old = make_player(position=Position.RB, projected=10.0, age=34)
        assert PlayerValuator().value(old, PPR).age_multiplier == 1.0

    def test_total_value(self) -> None:
        players = [make_player("a", Position.RB, 10.0), make_player("b", Position.RB, 10.0)]
        assert PlayerValuator().total_value(players, PPR) == pytest.approx(25.2)


class TestValuatorCaching:
    def test_repeat_lookup_hits_cache(self) -> None:
        cache = ValuationCache()
        valuator = PlayerValuator(cache=cache)
        player = make_player()
        first = valuator.value(player, PPR)
        second = valuator.value(player, PPR)
        assert first is second
        assert cache.hits == 1
        assert cache.misses == 1

    def test_scoring_change_misses(self) -> None:
        cache = ValuationCache()
        valuator = PlayerValuator(cache=cache)
        player = make_player()
        valuator.value(player, PPR)
        valuator.value(player, STANDARD)
        assert cache.hits == 0
        assert len(cache) == 2

    def test_week_change_does_not_affect_key(self) -> None:
        cache = ValuationCache()
        valuator = PlayerValuator(cache=cache)
        player = make_player()
        valuator.value(player, ScoringConfig(current_week=3))
        valuator.value(player, ScoringConfig(current_week=4))
        assert cache.hits == 1

    def test_age_policy_part_of_key(self) -> None:
        cache = ValuationCache()
        player = make_player(age=23)
        PlayerValuator(cache=cache).value(player, PPR)
        result = PlayerValuator(cache=cache, age_policy=DynastyAgePolicy()).value(player, PPR)
        assert result.age_multiplier == pytest.approx(1.12)
        assert cache.hits == 0
