"""Player valuation: blended production weighted by scarcity, format, trend and age."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fantasy_football_manager.analytics.trend import analyze_player
from fantasy_football_manager.valuation.adjustments import TrendAdjustment, format_multiplier
from fantasy_football_manager.valuation.age import RedraftAgePolicy
from fantasy_football_manager.valuation.models import ValuationResult

if TYPE_CHECKING:
    from collections.abc import Iterable

    from fantasy_football_manager.analytics.models import TrendMetrics, TrendSettings
    from fantasy_football_manager.domain.player import Player
    from fantasy_football_manager.domain.scoring import ScoringConfig
    from fantasy_football_manager.valuation.age import AgePolicy
    from fantasy_football_manager.valuation.cache import ValuationStore

logger = logging.getLogger(__name__)

CURRENT_WEIGHT: float = 0.4
PROJECTED_WEIGHT: float = 0.6


class PlayerValuator:
    def __init__(
        self,
        trend_adjustment: TrendAdjustment | None = None,
        age_policy: AgePolicy | None = None,
        cache: ValuationStore | None = None,
        trend_settings: TrendSettings | None = None,
    ) -> None:
        self._trend_adjustment = trend_adjustment or TrendAdjustment()
        self._age_policy: AgePolicy = age_policy or RedraftAgePolicy()
        self._cache = cache
        self._trend_settings = trend_settings

    @property
    def age_policy(self) -> AgePolicy:
        return self._age_policy

    def value(
        self,
        player: Player,
        scoring_config: ScoringConfig,
        trend_metrics: TrendMetrics | None = None,
    ) -> ValuationResult:
        if trend_metrics is None:
            trend_metrics = analyze_player(player, self._trend_settings)

        key = (player, scoring_config.cache_key(), trend_metrics, self._age_policy.cache_key())
        if self._cache is not None:
            cached = self._cache.get(key)
            if cached is not None:
                return cached

        result = self._compute(player, scoring_config, trend_metrics)
        if self._cache is not None:
            self._cache.put(key, result)
        return result

    def total_value(self, players: Iterable[Player], scoring_config: ScoringConfig) -> float:
        return sum(self.value(p, scoring_config).final_value for p in players)

    def _compute(self, player: Player, scoring_config: ScoringConfig, metrics: TrendMetrics) -> ValuationResult:
        scarcity = scoring_config.scarcity.multiplier(player.position)
        blended = CURRENT_WEIGHT * player.fantasy_points + PROJECTED_WEIGHT * player.projected_points
        base = blended * scarcity
        fmt = format_multiplier(player.position, scoring_config.scoring_format)
        trend = self._trend_adjustment.multiplier(metrics)
        age = self._age_policy.multiplier(player)
        final = max(0.0, base * fmt * trend * age)

        logger.debug(
            "Valued %s (%s): base=%.2f scarcity=%.2f format=%.2f trend=%.3f age=%.3f -> %.2f",
            player.player_id,
            player.position,
            base,
            scarcity,
            fmt,
            trend,
            age,
            final,
        )
        return ValuationResult(
            player=player,
            base_value=base,
            scarcity_multiplier=scarcity,
            format_multiplier=fmt,
            trend_multiplier=trend,
            age_multiplier=age,
            final_value=final,
        )
