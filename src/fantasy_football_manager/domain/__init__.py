from fantasy_football_manager.domain.player import InjuryStatus, Player, Position
from fantasy_football_manager.domain.scoring import (
    DEFAULT_SCARCITY,
    PositionScarcityTable,
    ScoringConfig,
    ScoringFormat,
    default_stat_points,
)
from fantasy_football_manager.domain.slots import DEFAULT_SLOT_SCHEMA, FLEX_POSITIONS, RosterSlot, SlotSchema
from fantasy_football_manager.domain.team import Team, TeamRecord

__all__ = [
    "DEFAULT_SCARCITY",
    "DEFAULT_SLOT_SCHEMA",
    "FLEX_POSITIONS",
    "InjuryStatus",
    "Player",
    "Position",
    "PositionScarcityTable",
    "RosterSlot",
    "ScoringConfig",
    "ScoringFormat",
    "SlotSchema",
    "Team",
    "TeamRecord",
    "default_stat_points",
]
