"""Multiplicative adjustments applied on top of a player's scarcity-weighted base value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.domain.scoring import ScoringFormat

if TYPE_CHECKING:
    from fantasy_football_manager.analytics.models import TrendMetrics

_PPR_MULTIPLIERS: dict[Position, float] = {
    Position.WR: 1.15,
    Position.TE: 1.15,
    Position.RB: 1.05,
}

_STANDARD_MULTIPLIERS: dict[Position, float] = {
    Position.RB: 1.1,
}


def format_multiplier(position: Position, scoring_format: ScoringFormat) -> float:
    """Reception-weighted formats favour pass catchers; standard favours touchdown-dependent backs.

    Half-PPR sits halfway between the PPR and standard multiplier for each position.
    """
    ppr = _PPR_MULTIPLIERS.get(position, 1.0)
    standard = _STANDARD_MULTIPLIERS.get(position, 1.0)
    if scoring_format is ScoringFormat.PPR:
        return ppr
    if scoring_format is ScoringFormat.STANDARD:
        return standard
    return (ppr + standard) / 2.0


@dataclass(frozen=True)
class TrendAdjustment:
    """Recent-form factor, bounded so a short hot or cold stretch cannot whipsaw a value."""

    sensitivity: float = 0.5
    max_adjustment: float = 0.15
    min_games: int = 2

    def multiplier(self, metrics: TrendMetrics) -> float:
        if metrics.games_played < self.min_games or metrics.season_average <= 0.0:
            return 1.0
        raw = 1.0 + self.sensitivity * (metrics.last_n_average / metrics.season_average - 1.0)
        return min(1.0 + self.max_adjustment, max(1.0 - self.max_adjustment, raw))
