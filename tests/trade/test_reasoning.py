from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.trade.models import SeasonImpact
from fantasy_football_manager.trade.reasoning import build_reasoning


def _season(playoff: float = 0.0, playoff_schedule: float = 0.0) -> SeasonImpact:
    return SeasonImpact(
        playoff_probability_delta=playoff,
        championship_probability_delta=0.0,
        schedule_strength_delta=0.0,
        playoff_schedule_delta=playoff_schedule,
    )


class TestBuildReasoning:
    def test_favorable_trade(self) -> None:
        reasoning = build_reasoning(
            100.0,
            150.0,
            {Position.WR: 0.33, Position.RB: -0.2},
            5.0,
            _season(playoff=6.0, playoff_schedule=0.2),
            "Maintains reasonable depth",
        )
        assert reasoning.pros == (
            "Getting 50% more value",
            "Improves WR position(s)",
            "Better playoff schedule",
            "+5.0 projected points per week",
            "+6% playoff probability",
        )
        assert reasoning.cons == ("Weakens RB position(s)",)
        assert reasoning.key_factors == ("Impact on depth: Maintains reasonable depth",)
        assert reasoning.factor_count == 6

    def test_unfavorable_trade(self) -> None:
        reasoning = build_reasoning(150.0, 100.0, {}, -4.0, _season(playoff=-8.0, playoff_schedule=-0.3), "x")
        assert reasoning.pros == ()
        assert reasoning.cons == (
            "Giving up 50% more value",
            "Worse playoff schedule",
            "-4.0 projected points per week",
            "-8% playoff probability",
        )

    def test_even_trade(self) -> None:
        reasoning = build_reasoning(100.0, 105.0, {}, 0.0, _season(), "Maintains reasonable depth")
        assert reasoning.key_factors[0] == "Trade is relatively even in value"
        assert reasoning.factor_count == 0

    def test_nothing_received(self) -> None:
        reasoning = build_reasoning(10.0, 0.0, {}, 0.0, _season(), "x")
        assert reasoning.cons == ("Giving up 100% more value",)
