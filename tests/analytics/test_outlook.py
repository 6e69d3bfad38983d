import pytest

from fantasy_football_manager.analytics.models import PlayerOutlook, RiskCategory
from fantasy_football_manager.analytics.outlook import build_outlook, performance_rating, suggest_swaps
from fantasy_football_manager.domain.player import InjuryStatus, Position
from tests.fakes.players import make_player


class TestPerformanceRating:
    def test_baseline(self) -> None:
        assert performance_rating(0.0, 0.0, 0.0) == pytest.approx(50.0)

    def test_projection_hit_is_capped(self) -> None:
        assert performance_rating(100.0, 10.0, 0.0) == pytest.approx(65.0)

    def test_rank_bonus(self) -> None:
        assert performance_rating(0.0, 0.0, 0.0, position_rank=10) == pytest.approx(70.0)

    def test_clamped_to_range(self) -> None:
        assert 0.0 <= performance_rating(0.0, 20.0, 0.0) <= 100.0
        assert performance_rating(40.0, 10.0, 1.0, position_rank=1) == 100.0


class TestBuildOutlook:
    def test_hot_player_recommendation(self) -> None:
        p = make_player("h", Position.WR, projected=15.0, weekly=(8.0, 8.0, 8.0, 20.0, 22.0, 24.0))
        outlook = build_outlook(p)
        assert outlook.is_hot
        assert "Hot streak - start with confidence" in outlook.recommendations

    def test_cold_high_average_is_buy_low(self) -> None:
        p = make_player("c", Position.RB, projected=15.0, weekly=(20.0, 20.0, 20.0, 5.0, 5.0, 5.0))
        outlook = build_outlook(p)
        assert outlook.is_cold
        assert outlook.should_buy
        assert "Buy-low opportunity" in outlook.recommendations

    def test_injured_player_never_should_start(self) -> None:
        p = make_player("i", projected=10.0, current=30.0, weekly=(10.0, 10.0, 10.0), injury=InjuryStatus.QUESTIONABLE)
        outlook = build_outlook(p, position_rank=1)
        assert not outlook.should_start
        assert "Injury concern: questionable" in outlook.recommendations

    def test_boom_bust(self) -> None:
        outlook = build_outlook(make_player("b", weekly=(0.0, 30.0, 0.0, 30.0)))
        assert outlook.is_boom_bust
        assert outlook.risk is RiskCategory.HIGH

    def test_empty_history(self) -> None:
        outlook = build_outlook(make_player("e"))
        assert outlook.metrics.games_played == 0
        assert outlook.consistency == 0.0
        assert not outlook.is_boom_bust


class TestSuggestSwaps:
    def _cold_starter(self, pid: str, position: Position) -> PlayerOutlook:
        return build_outlook(
            make_player(pid, position, projected=20.0, current=5.0, weekly=(20.0, 20.0, 20.0, 5.0, 5.0, 5.0))
        )

    def _hot_bench(self, pid: str, position: Position) -> PlayerOutlook:
        return build_outlook(
            make_player(pid, position, projected=10.0, current=20.0, weekly=(10.0, 10.0, 10.0, 20.0, 22.0, 24.0))
        )

    def test_same_position_swap(self) -> None:
        starter = self._cold_starter("s", Position.RB)
        bench = self._hot_bench("b", Position.RB)
        swaps = suggest_swaps([starter], [bench])
        assert len(swaps) == 1
        assert swaps[0].bench_player.player_id == "b"
        assert swaps[0].starter.player_id == "s"

    def test_flex_family_swap(self) -> None:
        swaps = suggest_swaps([self._cold_starter("s", Position.WR)], [self._hot_bench("b", Position.TE)])
        assert len(swaps) == 1

    def test_no_swap_across_families(self) -> None:
        swaps = suggest_swaps([self._cold_starter("s", Position.QB)], [self._hot_bench("b", Position.RB)])
        assert swaps == []

    def test_bench_player_used_once(self) -> None:
        starters = [self._cold_starter("s1", Position.RB), self._cold_starter("s2", Position.RB)]
        swaps = suggest_swaps(starters, [self._hot_bench("b", Position.RB)])
        assert len(swaps) == 1
