from dataclasses import dataclass
from enum import StrEnum


class Position(StrEnum):
    QB = "QB"
    RB = "RB"
    WR = "WR"
    TE = "TE"
    K = "K"
    DEF = "DEF"
    DL = "DL"
    LB = "LB"
    DB = "DB"


class InjuryStatus(StrEnum):
    PROBABLE = "probable"
    QUESTIONABLE = "questionable"
    DOUBTFUL = "doubtful"
    OUT = "out"
    IR = "ir"


_INACTIVE_STATUSES: frozenset[InjuryStatus] = frozenset({InjuryStatus.OUT, InjuryStatus.IR})


@dataclass(frozen=True)
class Player:
    player_id: str
    name: str
    position: Position
    team: str = ""
    fantasy_points: float = 0.0
    projected_points: float = 0.0
    weekly_points: tuple[float, ...] = ()
    injury_status: InjuryStatus | None = None
    age: int | None = None
    volatility: float | None = None
    opponent: str | None = None

    @property
    def is_active(self) -> bool:
        return self.injury_status not in _INACTIVE_STATUSES

    @property
    def games_played(self) -> int:
        return len(self.weekly_points)
