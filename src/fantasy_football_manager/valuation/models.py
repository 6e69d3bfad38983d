from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from fantasy_football_manager.analytics.models import TrendMetrics
    from fantasy_football_manager.domain.player import Player
    from fantasy_football_manager.domain.scoring import ScoringConfig


@dataclass(frozen=True)
class ValuationResult:
    """Trade value of one player.

    ``base_value`` already includes the scarcity multiplier, so
    ``final_value == base_value * format_multiplier * trend_multiplier * age_multiplier``
    (floored at zero).
    """

    player: Player
    base_value: float
    scarcity_multiplier: float
    format_multiplier: float
    trend_multiplier: float
    age_multiplier: float
    final_value: float


class Valuator(Protocol):
    def value(
        self,
        player: Player,
        scoring_config: ScoringConfig,
        trend_metrics: TrendMetrics | None = None,
    ) -> ValuationResult: ...
