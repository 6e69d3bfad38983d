from __future__ import annotations

from typing import TYPE_CHECKING

from fantasy_football_manager.trade.models import ReasoningThresholds, TradeReasoning

if TYPE_CHECKING:
    from collections.abc import Mapping

    from fantasy_football_manager.domain.player import Position
    from fantasy_football_manager.trade.models import SeasonImpact


def _percent_more(larger: float, smaller: float) -> int:
    if smaller <= 0:
        return 100
    return round((larger / smaller - 1.0) * 100)


def build_reasoning(
    sending_value: float,
    receiving_value: float,
    positions: Mapping[Position, float],
    weekly_change: float,
    season: SeasonImpact,
    depth: str,
    thresholds: ReasoningThresholds | None = None,
) -> TradeReasoning:
    """Pros, cons and key factors derived only from computed deltas, so identical inputs read identically."""
    if thresholds is None:
        thresholds = ReasoningThresholds()
    pros: list[str] = []
    cons: list[str] = []
    key_factors: list[str] = []

    margin = 1.0 + thresholds.value_ratio
    if receiving_value > sending_value * margin:
        pros.append(f"Getting {_percent_more(receiving_value, sending_value)}% more value")
    elif sending_value > receiving_value * margin:
        cons.append(f"Giving up {_percent_more(sending_value, receiving_value)}% more value")
    else:
        key_factors.append("Trade is relatively even in value")

    improved = [str(pos) for pos, delta in positions.items() if delta > thresholds.position_impact]
    if improved:
        pros.append(f"Improves {', '.join(improved)} position(s)")
    weakened = [str(pos) for pos, delta in positions.items() if delta < -thresholds.position_impact]
    if weakened:
        cons.append(f"Weakens {', '.join(weakened)} position(s)")

    if season.playoff_schedule_delta > thresholds.playoff_schedule:
        pros.append("Better playoff schedule")
    elif season.playoff_schedule_delta < -thresholds.playoff_schedule:
        cons.append("Worse playoff schedule")

    if weekly_change > thresholds.weekly_points:
        pros.append(f"+{weekly_change:.1f} projected points per week")
    elif weekly_change < -thresholds.weekly_points:
        cons.append(f"{weekly_change:.1f} projected points per week")

    playoff = season.playoff_probability_delta
    if playoff > thresholds.playoff_probability:
        pros.append(f"+{playoff:.0f}% playoff probability")
    elif playoff < -thresholds.playoff_probability:
        cons.append(f"{playoff:.0f}% playoff probability")

    key_factors.append(f"Impact on depth: {depth}")
    return TradeReasoning(pros=tuple(pros), cons=tuple(cons), key_factors=tuple(key_factors))
