"""Constructed entry point that ties valuation, trade analysis and lineup advice to one session."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from fantasy_football_manager.analytics.models import TrendSettings
from fantasy_football_manager.analytics.trend import analyze_trend
from fantasy_football_manager.lineup.models import RiskMode
from fantasy_football_manager.lineup.optimizer import optimize_lineup
from fantasy_football_manager.trade.analyzer import TradeAnalyzer
from fantasy_football_manager.trade.counter import CounterProposalGenerator
from fantasy_football_manager.trade.models import RecommendationThresholds
from fantasy_football_manager.trade.targets import MAX_TARGETS, TradeTargetFinder
from fantasy_football_manager.valuation.adjustments import TrendAdjustment
from fantasy_football_manager.valuation.cache import ValuationCache
from fantasy_football_manager.valuation.valuator import PlayerValuator

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from fantasy_football_manager.analytics.models import TrendMetrics
    from fantasy_football_manager.domain.player import Player, Position
    from fantasy_football_manager.domain.scoring import ScoringConfig
    from fantasy_football_manager.domain.slots import SlotSchema
    from fantasy_football_manager.domain.team import Team
    from fantasy_football_manager.lineup.models import RosterAdvice
    from fantasy_football_manager.trade.history import TradeHistorySource
    from fantasy_football_manager.trade.models import TradeAnalysis, TradeProposal, TradeTarget
    from fantasy_football_manager.trade.schedule import ScheduleSource
    from fantasy_football_manager.valuation.age import AgePolicy
    from fantasy_football_manager.valuation.models import ValuationResult

logger = logging.getLogger(__name__)


class DecisionEngine:
    """Session object owning the valuation cache.

    Safe to share across threads: every call reads immutable snapshots and the
    cache is lock-protected. Call :meth:`set_week` when the analysis week
    changes so cached valuations from the previous week are dropped.
    """

    def __init__(
        self,
        scoring_config: ScoringConfig,
        schedule: ScheduleSource | None = None,
        history: TradeHistorySource | None = None,
        age_policy: AgePolicy | None = None,
        trend_settings: TrendSettings | None = None,
        thresholds: RecommendationThresholds | None = None,
        max_counter_candidates: int = 50,
    ) -> None:
        self._scoring_config = scoring_config
        self._trend_settings = trend_settings or TrendSettings()
        self._cache = ValuationCache(context=scoring_config.current_week)
        self._valuator = PlayerValuator(
            trend_adjustment=TrendAdjustment(),
            age_policy=age_policy,
            cache=self._cache,
            trend_settings=self._trend_settings,
        )
        self._analyzer = TradeAnalyzer(
            valuator=self._valuator,
            schedule=schedule,
            history=history,
            counter_generator=CounterProposalGenerator(self._valuator, max_candidates=max_counter_candidates),
            thresholds=thresholds or RecommendationThresholds(),
        )
        self._targets = TradeTargetFinder(self._valuator)

    @property
    def scoring_config(self) -> ScoringConfig:
        return self._scoring_config

    @property
    def cache(self) -> ValuationCache:
        return self._cache

    def set_week(self, week: int) -> None:
        if week == self._scoring_config.current_week:
            return
        logger.debug("Advancing session from week %d to %d", self._scoring_config.current_week, week)
        self._scoring_config = replace(self._scoring_config, current_week=week)
        self._cache.set_context(week)

    def trend(self, player: Player) -> TrendMetrics:
        return analyze_trend(player.weekly_points, self._trend_settings, player_id=player.player_id)

    def value_player(self, player: Player) -> ValuationResult:
        return self._valuator.value(player, self._scoring_config)

    def value_players(self, players: Iterable[Player]) -> list[ValuationResult]:
        results = [self.value_player(p) for p in players]
        return sorted(results, key=lambda r: r.final_value, reverse=True)

    def analyze_trade(self, proposal: TradeProposal, my_team: Team) -> TradeAnalysis:
        return self._analyzer.analyze_trade(proposal, my_team, self._scoring_config)

    def find_trade_targets(
        self,
        my_team: Team,
        league_teams: Iterable[Team],
        position: Position,
        limit: int = MAX_TARGETS,
    ) -> list[TradeTarget]:
        return self._targets.find(my_team, league_teams, position, self._scoring_config, limit)

    def optimize_lineup(
        self,
        roster: Sequence[Player],
        risk_mode: RiskMode = RiskMode.BALANCED,
        slot_schema: SlotSchema | None = None,
    ) -> RosterAdvice:
        if slot_schema is None:
            slot_schema = self._scoring_config.slot_schema
        return optimize_lineup(roster, risk_mode, slot_schema)
