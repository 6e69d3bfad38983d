"""Trend and consistency metrics over weekly fantasy point sequences."""

from __future__ import annotations

import statistics
from typing import TYPE_CHECKING

from fantasy_football_manager.analytics.models import RiskCategory, Trend, TrendMetrics, TrendSettings

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from fantasy_football_manager.domain.player import Player

HIGH_RISK_STD: float = 8.0
MEDIUM_RISK_STD: float = 4.0


def _mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return statistics.fmean(values)


def classify_trend(season_average: float, last_n_average: float, settings: TrendSettings) -> Trend:
    if last_n_average >= settings.hot_floor and last_n_average > season_average * settings.hot_ratio:
        return Trend.HOT
    if season_average >= settings.cold_floor and last_n_average < season_average * settings.cold_ratio:
        return Trend.COLD
    return Trend.STEADY


def analyze_trend(
    weekly_points: Sequence[float],
    settings: TrendSettings | None = None,
    player_id: str | None = None,
) -> TrendMetrics:
    """Summarize a chronological sequence of weekly points.

    An empty sequence is a normal early-season state and yields all-zero
    metrics with a steady trend. Variance is the population variance around
    the season average, so a single week has zero variance.
    """
    if settings is None:
        settings = TrendSettings()
    points = [float(p) for p in weekly_points]

    season_average = _mean(points)
    recent = points[-settings.window :] if settings.window > 0 else []
    last_n_average = _mean(recent)
    variance = statistics.pvariance(points, mu=season_average) if len(points) > 1 else 0.0

    return TrendMetrics(
        season_average=season_average,
        last_n_average=last_n_average,
        variance=variance,
        std_dev=variance**0.5,
        trend=classify_trend(season_average, last_n_average, settings),
        games_played=len(points),
        window=settings.window,
        player_id=player_id,
    )


def analyze_player(player: Player, settings: TrendSettings | None = None) -> TrendMetrics:
    return analyze_trend(player.weekly_points, settings, player_id=player.player_id)


def analyze_roster(players: Iterable[Player], settings: TrendSettings | None = None) -> dict[str, TrendMetrics]:
    return {p.player_id: analyze_player(p, settings) for p in players}


def consistency_score(metrics: TrendMetrics) -> float:
    """1.0 for a perfectly steady scorer, falling toward 0 as spread approaches the average."""
    if metrics.season_average <= 0.0:
        return 0.0
    return max(0.0, 1.0 - metrics.std_dev / metrics.season_average)


def categorize_risk(std_dev: float) -> RiskCategory:
    if std_dev >= HIGH_RISK_STD:
        return RiskCategory.HIGH
    if std_dev >= MEDIUM_RISK_STD:
        return RiskCategory.MEDIUM
    return RiskCategory.LOW
