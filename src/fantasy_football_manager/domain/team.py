from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fantasy_football_manager.domain.player import Player, Position


@dataclass(frozen=True)
class TeamRecord:
    wins: int = 0
    losses: int = 0
    ties: int = 0
    points_for: float = 0.0

    @property
    def games_played(self) -> int:
        return self.wins + self.losses + self.ties

    @property
    def win_rate(self) -> float:
        """Fraction of decided games won; 0.5 before any game is decided."""
        decided = self.wins + self.losses
        if decided == 0:
            return 0.5
        return self.wins / decided


@dataclass(frozen=True)
class Team:
    team_id: str
    name: str
    players: tuple[Player, ...]
    record: TeamRecord | None = None

    def players_at(self, position: Position) -> list[Player]:
        return [p for p in self.players if p.position == position]

    def find_player(self, player_id: str) -> Player | None:
        return next((p for p in self.players if p.player_id == player_id), None)
