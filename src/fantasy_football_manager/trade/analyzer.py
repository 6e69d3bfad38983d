"""Trade fairness scoring and recommendation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fantasy_football_manager.exceptions import InvalidProposalError
from fantasy_football_manager.trade.counter import CounterProposalGenerator
from fantasy_football_manager.trade.impact import (
    PerformanceModel,
    depth_impact,
    position_impact,
    schedule_impact,
    season_impact,
    weekly_point_differential,
)
from fantasy_football_manager.trade.models import (
    FairnessWeights,
    ImmediateImpact,
    ReasoningThresholds,
    Recommendation,
    RecommendationThresholds,
    TradeAnalysis,
)
from fantasy_football_manager.trade.reasoning import build_reasoning
from fantasy_football_manager.trade.schedule import NeutralScheduleSource
from fantasy_football_manager.valuation.valuator import PlayerValuator

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from fantasy_football_manager.domain.player import Player, Position
    from fantasy_football_manager.domain.scoring import ScoringConfig
    from fantasy_football_manager.domain.team import Team
    from fantasy_football_manager.trade.history import TradeHistorySource
    from fantasy_football_manager.trade.models import (
        ScheduleImpact,
        SimilarTrade,
        TradeProposal,
        TradeReasoning,
    )
    from fantasy_football_manager.trade.schedule import ScheduleSource
    from fantasy_football_manager.valuation.models import Valuator

logger = logging.getLogger(__name__)

BASE_CONFIDENCE: float = 0.5
HISTORY_CONFIDENCE_WEIGHT: float = 0.2
REASON_COUNT_BONUS: float = 0.1
REASON_COUNT_MIN: int = 3
MAX_CONFIDENCE: float = 0.95


def validate_proposal(proposal: TradeProposal) -> None:
    """Reject proposals with an empty side; must run before any valuation."""
    if not proposal.sending:
        raise InvalidProposalError("Trade proposal must send at least one player")
    if not proposal.receiving:
        raise InvalidProposalError("Trade proposal must receive at least one player")


def fairness_score(
    sending_value: float,
    receiving_value: float,
    positions: Mapping[Position, float],
    schedule: ScheduleImpact,
    weights: FairnessWeights | None = None,
) -> float:
    """Signed score in [-100, 100]; positive favors the team doing the analysis."""
    if weights is None:
        weights = FairnessWeights()
    largest = max(sending_value, receiving_value)
    value_term = (receiving_value - sending_value) / largest if largest > 0 else 0.0
    score = (
        weights.value_differential * value_term
        + weights.position_impact * sum(positions.values())
        + weights.schedule * schedule.remaining_delta
        + weights.playoff_schedule * schedule.playoff_delta
    )
    return max(-100.0, min(100.0, score))


def recommend(
    fairness: float,
    playoff_delta: float,
    thresholds: RecommendationThresholds | None = None,
) -> Recommendation:
    if thresholds is None:
        thresholds = RecommendationThresholds()
    if fairness > thresholds.accept_fairness and playoff_delta >= thresholds.accept_min_playoff_delta:
        return Recommendation.ACCEPT
    if fairness < thresholds.reject_fairness or playoff_delta < thresholds.reject_playoff_delta:
        return Recommendation.REJECT
    if thresholds.reject_fairness < fairness < thresholds.counter_upper_fairness:
        return Recommendation.COUNTER
    return Recommendation.CONSIDER


def confidence_score(similar: Sequence[SimilarTrade], reasoning: TradeReasoning) -> float:
    confidence = BASE_CONFIDENCE
    if similar:
        confidence += max(s.similarity for s in similar) * HISTORY_CONFIDENCE_WEIGHT
    if reasoning.factor_count > REASON_COUNT_MIN:
        confidence += REASON_COUNT_BONUS
    return min(MAX_CONFIDENCE, confidence)


class TradeAnalyzer:
    def __init__(
        self,
        valuator: Valuator | None = None,
        schedule: ScheduleSource | None = None,
        history: TradeHistorySource | None = None,
        counter_generator: CounterProposalGenerator | None = None,
        weights: FairnessWeights | None = None,
        thresholds: RecommendationThresholds | None = None,
        reasoning_thresholds: ReasoningThresholds | None = None,
        performance_model: PerformanceModel | None = None,
    ) -> None:
        self._valuator: Valuator = valuator or PlayerValuator()
        self._schedule: ScheduleSource = schedule or NeutralScheduleSource()
        self._history = history
        self._counter = counter_generator or CounterProposalGenerator(self._valuator)
        self._weights = weights or FairnessWeights()
        self._thresholds = thresholds or RecommendationThresholds()
        self._reasoning_thresholds = reasoning_thresholds or ReasoningThresholds()
        self._performance_model = performance_model or PerformanceModel()

    def analyze_trade(self, proposal: TradeProposal, my_team: Team, scoring_config: ScoringConfig) -> TradeAnalysis:
        validate_proposal(proposal)
        overlap = proposal.overlapping_ids()
        if overlap:
            logger.warning("Trade sends and receives the same player(s): %s", ", ".join(sorted(overlap)))

        values: dict[Player, float] = {}

        def value_of(player: Player) -> float:
            if player not in values:
                values[player] = self._valuator.value(player, scoring_config).final_value
            return values[player]

        sending_value = sum(value_of(p) for p in proposal.sending)
        receiving_value = sum(value_of(p) for p in proposal.receiving)

        positions = position_impact(my_team, proposal, value_of)
        schedule = schedule_impact(proposal, scoring_config, self._schedule)
        weekly_change = weekly_point_differential(proposal)
        season = season_impact(my_team, weekly_change, positions, schedule, scoring_config, self._performance_model)

        fairness = fairness_score(sending_value, receiving_value, positions, schedule, self._weights)
        recommendation = recommend(fairness, season.playoff_probability_delta, self._thresholds)

        depth = depth_impact(my_team, proposal)
        reasoning = build_reasoning(
            sending_value,
            receiving_value,
            positions,
            weekly_change,
            season,
            depth,
            self._reasoning_thresholds,
        )
        similar = self._history.similar_trades(proposal) if self._history is not None else []
        confidence = confidence_score(similar, reasoning)

        counter = None
        if recommendation is Recommendation.COUNTER:
            counter = self._counter.counter(proposal, my_team, fairness, scoring_config)

        logger.debug(
            "Trade %s -> %s: sent=%.1f received=%.1f fairness=%.1f playoff=%+.1f => %s",
            [p.player_id for p in proposal.sending],
            [p.player_id for p in proposal.receiving],
            sending_value,
            receiving_value,
            fairness,
            season.playoff_probability_delta,
            recommendation,
        )
        return TradeAnalysis(
            proposal=proposal,
            recommendation=recommendation,
            fairness_score=fairness,
            confidence=confidence,
            sending_value=sending_value,
            receiving_value=receiving_value,
            immediate_impact=ImmediateImpact(
                weekly_point_differential=weekly_change,
                position_strength=positions,
                depth_impact=depth,
            ),
            season_impact=season,
            reasoning=reasoning,
            counter_proposal=counter,
            similar_trades=tuple(similar),
        )


def analyze_trade(proposal: TradeProposal, my_team: Team, scoring_config: ScoringConfig) -> TradeAnalysis:
    """Analyze with default collaborators: redraft valuation, neutral schedule, no history."""
    return TradeAnalyzer().analyze_trade(proposal, my_team, scoring_config)
