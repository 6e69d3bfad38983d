"""Sub-calculations behind a trade analysis: position strength, schedule and season outlook."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fantasy_football_manager.domain.player import Position
from fantasy_football_manager.trade.models import (
    TRACKED_POSITIONS,
    ScheduleImpact,
    SeasonImpact,
    WeeklyScheduleDelta,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping, Sequence

    from fantasy_football_manager.domain.player import Player
    from fantasy_football_manager.domain.scoring import ScoringConfig
    from fantasy_football_manager.domain.team import Team
    from fantasy_football_manager.trade.models import TradeProposal
    from fantasy_football_manager.trade.schedule import ScheduleSource

DEPTH_EXEMPT_POSITIONS: frozenset[Position] = frozenset({Position.QB, Position.K, Position.DEF})
THIN_DEPTH: int = 2
STRONG_DEPTH: int = 4


def position_impact(
    my_team: Team,
    proposal: TradeProposal,
    value_of: Callable[[Player], float],
    positions: Sequence[Position] = TRACKED_POSITIONS,
) -> dict[Position, float]:
    """Net value change at each position, relative to what the team already has there."""
    impact: dict[Position, float] = {}
    for pos in positions:
        current = sum(value_of(p) for p in my_team.players_at(pos))
        sent = sum(value_of(p) for p in proposal.sending if p.position == pos)
        received = sum(value_of(p) for p in proposal.receiving if p.position == pos)
        impact[pos] = (received - sent) / max(current, 1.0)
    return impact


def depth_impact(my_team: Team, proposal: TradeProposal) -> str:
    counts: Counter[Position] = Counter(p.position for p in my_team.players)
    counts.subtract(p.position for p in proposal.sending)
    counts.update(p.position for p in proposal.receiving)

    thin = [str(pos) for pos, n in counts.items() if n < THIN_DEPTH and pos not in DEPTH_EXEMPT_POSITIONS]
    if thin:
        return f"Dangerously thin at {', '.join(thin)}"
    strong = [str(pos) for pos, n in counts.items() if n > STRONG_DEPTH]
    if strong:
        return f"Strong depth at {', '.join(strong)}"
    return "Maintains reasonable depth"


def _side_favorability(players: Sequence[Player], week: int, schedule: ScheduleSource) -> float:
    if not players:
        return 0.0
    return sum(schedule.favorability(p.team, week) for p in players) / len(players)


def _window_average(players: Sequence[Player], weeks: Sequence[int], schedule: ScheduleSource) -> float:
    if not weeks:
        return 0.0
    return sum(_side_favorability(players, w, schedule) for w in weeks) / len(weeks)


def schedule_impact(
    proposal: TradeProposal,
    scoring_config: ScoringConfig,
    schedule: ScheduleSource,
) -> ScheduleImpact:
    remaining = list(range(scoring_config.current_week, scoring_config.regular_season_weeks + 1))
    playoffs = list(scoring_config.playoff_weeks)

    weekly = tuple(
        WeeklyScheduleDelta(
            week=w,
            sending=_side_favorability(proposal.sending, w, schedule),
            receiving=_side_favorability(proposal.receiving, w, schedule),
        )
        for w in remaining
    )
    remaining_delta = _window_average(proposal.receiving, remaining, schedule) - _window_average(
        proposal.sending, remaining, schedule
    )
    playoff_delta = _window_average(proposal.receiving, playoffs, schedule) - _window_average(
        proposal.sending, playoffs, schedule
    )
    return ScheduleImpact(remaining_delta=remaining_delta, playoff_delta=playoff_delta, weekly=weekly)


@dataclass(frozen=True)
class PerformanceModel:
    """Linear record-based outlook.

    A weekly point gain of ``points_per_win_rate`` lifts the win rate by 1.0,
    and playoff odds scale linearly with projected wins up to the threshold.
    """

    points_per_win_rate: float = 100.0
    playoff_weight: float = 0.3
    playoff_schedule_weight: float = 0.2
    position_weight: float = 0.1


def weekly_point_differential(proposal: TradeProposal) -> float:
    received = sum(p.projected_points for p in proposal.receiving)
    sent = sum(p.projected_points for p in proposal.sending)
    return received - sent


def _playoff_probability(wins: float, threshold: float) -> float:
    if threshold <= 0:
        return 1.0
    return min(1.0, max(0.0, wins / threshold))


def season_impact(
    my_team: Team,
    weekly_change: float,
    positions: Mapping[Position, float],
    schedule: ScheduleImpact,
    scoring_config: ScoringConfig,
    model: PerformanceModel | None = None,
) -> SeasonImpact:
    if model is None:
        model = PerformanceModel()
    record = my_team.record
    wins = record.wins if record is not None else 0
    played = record.games_played if record is not None else 0
    win_rate = record.win_rate if record is not None else 0.5

    adjusted_rate = min(1.0, max(0.0, win_rate + weekly_change / model.points_per_win_rate))
    remaining = max(0, scoring_config.regular_season_weeks - played)

    threshold = scoring_config.playoff_win_threshold
    baseline = _playoff_probability(wins + win_rate * remaining, threshold)
    traded = _playoff_probability(wins + adjusted_rate * remaining, threshold)
    playoff_delta = 100.0 * (traded - baseline)

    championship_delta = (
        model.playoff_weight * playoff_delta
        + model.playoff_schedule_weight * schedule.playoff_delta
        + model.position_weight * sum(positions.values())
    )
    return SeasonImpact(
        playoff_probability_delta=playoff_delta,
        championship_probability_delta=championship_delta,
        schedule_strength_delta=schedule.remaining_delta,
        playoff_schedule_delta=schedule.playoff_delta,
        weekly_schedule=schedule.weekly,
    )
