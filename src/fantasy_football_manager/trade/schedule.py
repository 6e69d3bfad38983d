from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping

NEUTRAL_FAVORABILITY: float = 0.5


class ScheduleSource(Protocol):
    def favorability(self, nfl_team: str, week: int) -> float:
        """How easy the matchup is for ``nfl_team`` in ``week``; higher is easier."""
        ...


class NeutralScheduleSource:
    """Every matchup is average."""

    def favorability(self, nfl_team: str, week: int) -> float:
        return NEUTRAL_FAVORABILITY


class StaticScheduleSource:
    """Favorability table keyed by NFL team then week, with a fallback for gaps."""

    def __init__(self, table: Mapping[str, Mapping[int, float]], default: float = NEUTRAL_FAVORABILITY) -> None:
        self._table = {team.upper(): dict(weeks) for team, weeks in table.items()}
        self._default = default

    def favorability(self, nfl_team: str, week: int) -> float:
        return self._table.get(nfl_team.upper(), {}).get(week, self._default)
