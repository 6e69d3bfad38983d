from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.domain.slots import DEFAULT_SLOT_SCHEMA, SlotSchema


class ScoringFormat(StrEnum):
    PPR = "ppr"
    HALF_PPR = "half_ppr"
    STANDARD = "standard"


DEFAULT_SCARCITY: dict[Position, float] = {
    Position.QB: 0.8,
    Position.RB: 1.2,
    Position.WR: 1.0,
    Position.TE: 1.1,
    Position.K: 0.3,
    Position.DEF: 0.4,
}

_RECEPTION_POINTS: dict[ScoringFormat, float] = {
    ScoringFormat.PPR: 1.0,
    ScoringFormat.HALF_PPR: 0.5,
    ScoringFormat.STANDARD: 0.0,
}

_BASE_STAT_POINTS: dict[str, float] = {
    "pass_yd": 0.04,
    "pass_td": 4.0,
    "pass_int": -2.0,
    "rush_yd": 0.1,
    "rush_td": 6.0,
    "rec_yd": 0.1,
    "rec_td": 6.0,
    "fum_lost": -2.0,
    "two_pt": 2.0,
    "fg": 3.0,
    "xp": 1.0,
}


def default_stat_points(scoring_format: ScoringFormat) -> dict[str, float]:
    points = dict(_BASE_STAT_POINTS)
    points["rec"] = _RECEPTION_POINTS[scoring_format]
    return points


@dataclass(frozen=True)
class PositionScarcityTable:
    multipliers: dict[Position, float] = field(default_factory=lambda: dict(DEFAULT_SCARCITY))
    default: float = 1.0

    def multiplier(self, position: Position) -> float:
        return self.multipliers.get(position, self.default)

    def cache_key(self) -> tuple[object, ...]:
        return (tuple(sorted((str(p), m) for p, m in self.multipliers.items())), self.default)


@dataclass(frozen=True)
class ScoringConfig:
    scoring_format: ScoringFormat = ScoringFormat.PPR
    league_size: int = 12
    scarcity: PositionScarcityTable = field(default_factory=PositionScarcityTable)
    slot_schema: SlotSchema = DEFAULT_SLOT_SCHEMA
    stat_points: dict[str, float] | None = None
    current_week: int = 1
    regular_season_weeks: int = 14
    playoff_weeks: tuple[int, ...] = (15, 16, 17)
    playoff_win_threshold: float = 7.0

    def points_table(self) -> dict[str, float]:
        if self.stat_points is not None:
            return dict(self.stat_points)
        return default_stat_points(self.scoring_format)

    def cache_key(self) -> tuple[object, ...]:
        """Hashable fingerprint of everything that influences a player's value."""
        return (
            str(self.scoring_format),
            self.league_size,
            self.scarcity.cache_key(),
            tuple(sorted(self.points_table().items())),
        )
