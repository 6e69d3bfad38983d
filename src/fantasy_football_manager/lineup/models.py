from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from fantasy_football_manager.exceptions import InsufficientDataError

if TYPE_CHECKING:
    from fantasy_football_manager.domain.player import Player


class RiskMode(StrEnum):
    SAFE = "safe"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"


@dataclass(frozen=True)
class LineupSlot:
    slot: str
    player: Player | None
    utility: float | None = None


@dataclass(frozen=True)
class LineupChange:
    player_in: Player
    player_out: Player
    reason: str


@dataclass(frozen=True)
class RosterAdvice:
    starters: tuple[LineupSlot, ...]
    bench: tuple[Player, ...]
    changes: tuple[LineupChange, ...]
    risk_mode: RiskMode
    unfilled_slots: tuple[str, ...] = ()

    @property
    def starting_players(self) -> list[Player]:
        return [s.player for s in self.starters if s.player is not None]

    @property
    def is_complete(self) -> bool:
        return not self.unfilled_slots

    def raise_for_gaps(self) -> RosterAdvice:
        if self.unfilled_slots:
            raise InsufficientDataError(self.unfilled_slots)
        return self
