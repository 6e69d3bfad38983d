from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from fantasy_football_manager.domain.player import Position

if TYPE_CHECKING:
    from fantasy_football_manager.domain.player import Player
    from fantasy_football_manager.domain.team import Team


class Recommendation(StrEnum):
    ACCEPT = "accept"
    REJECT = "reject"
    COUNTER = "counter"
    CONSIDER = "consider"


TRACKED_POSITIONS: tuple[Position, ...] = (Position.QB, Position.RB, Position.WR, Position.TE)


@dataclass(frozen=True)
class TradeProposal:
    sending: tuple[Player, ...]
    receiving: tuple[Player, ...]
    partner_team: Team | None = None
    notes: tuple[str, ...] = ()

    @property
    def is_empty_side(self) -> bool:
        return not self.sending or not self.receiving

    def player_ids(self) -> set[str]:
        return {p.player_id for p in self.sending} | {p.player_id for p in self.receiving}

    def overlapping_ids(self) -> set[str]:
        return {p.player_id for p in self.sending} & {p.player_id for p in self.receiving}


@dataclass(frozen=True)
class FairnessWeights:
    value_differential: float = 50.0
    position_impact: float = 10.0
    schedule: float = 5.0
    playoff_schedule: float = 10.0


@dataclass(frozen=True)
class RecommendationThresholds:
    """Decision table cut-offs; rules are evaluated in order and the first match wins."""

    accept_fairness: float = 30.0
    accept_min_playoff_delta: float = 0.0
    reject_fairness: float = -30.0
    reject_playoff_delta: float = -10.0
    counter_upper_fairness: float = -10.0


@dataclass(frozen=True)
class ReasoningThresholds:
    value_ratio: float = 0.10
    position_impact: float = 0.1
    playoff_schedule: float = 0.1
    weekly_points: float = 3.0
    playoff_probability: float = 5.0


@dataclass(frozen=True)
class ImmediateImpact:
    weekly_point_differential: float
    position_strength: dict[Position, float]
    depth_impact: str


@dataclass(frozen=True)
class WeeklyScheduleDelta:
    week: int
    sending: float
    receiving: float

    @property
    def delta(self) -> float:
        return self.receiving - self.sending


@dataclass(frozen=True)
class ScheduleImpact:
    remaining_delta: float
    playoff_delta: float
    weekly: tuple[WeeklyScheduleDelta, ...] = ()


@dataclass(frozen=True)
class SeasonImpact:
    """Heuristic season outlook shift.

    Probabilities are linear approximations of the team's record, expressed
    in percentage points; they are not simulated win probabilities.
    """

    playoff_probability_delta: float
    championship_probability_delta: float
    schedule_strength_delta: float
    playoff_schedule_delta: float
    weekly_schedule: tuple[WeeklyScheduleDelta, ...] = ()


@dataclass(frozen=True)
class TradeReasoning:
    pros: tuple[str, ...]
    cons: tuple[str, ...]
    key_factors: tuple[str, ...]

    @property
    def factor_count(self) -> int:
        return len(self.pros) + len(self.cons)


@dataclass(frozen=True)
class HistoricalTrade:
    trade_id: str
    sent_positions: tuple[Position, ...]
    received_positions: tuple[Position, ...]
    outcome: str = ""


@dataclass(frozen=True)
class SimilarTrade:
    trade: HistoricalTrade
    similarity: float


@dataclass(frozen=True)
class TradeAnalysis:
    """Result of analyzing one proposal.

    ``confidence`` is an advisory score in [0, 0.95] reflecting how much
    supporting evidence was found, not a statistical probability.
    """

    proposal: TradeProposal
    recommendation: Recommendation
    fairness_score: float
    confidence: float
    sending_value: float
    receiving_value: float
    immediate_impact: ImmediateImpact
    season_impact: SeasonImpact
    reasoning: TradeReasoning
    counter_proposal: TradeProposal | None = None
    similar_trades: tuple[SimilarTrade, ...] = ()


@dataclass(frozen=True)
class TradeTarget:
    player: Player
    owner: Team
    targetability: float
    value: float
    suggested_offer: tuple[Player, ...] = field(default=())
    reasoning: str = ""
