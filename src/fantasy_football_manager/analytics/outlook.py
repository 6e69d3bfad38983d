from __future__ import annotations

from typing import TYPE_CHECKING

from fantasy_football_manager.analytics.models import LineupSwap, PlayerOutlook, Trend
from fantasy_football_manager.analytics.trend import analyze_player, categorize_risk, consistency_score
from fantasy_football_manager.domain.slots import FLEX_POSITIONS

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fantasy_football_manager.analytics.models import TrendMetrics, TrendSettings
    from fantasy_football_manager.domain.player import Player, Position

BOOM_BUST_RATIO: float = 0.5
BUY_LOW_MIN_AVERAGE: float = 10.0
SELL_HIGH_MIN_RATING: float = 80.0
START_MIN_RATING: float = 60.0
SWAP_MAX_STARTER_RATING: float = 50.0
SWAP_MIN_BENCH_RATING: float = 60.0


def performance_rating(
    actual_points: float,
    projected_points: float,
    consistency: float,
    position_rank: int | None = None,
) -> float:
    """0-100 rating: 50 baseline, then projection hit rate, positional rank and consistency."""
    rating = 50.0
    if projected_points > 0:
        projection_score = actual_points / projected_points * 30.0
        rating += min(projection_score - 30.0, 15.0)
    if position_rank is not None:
        rating += max(0.0, 30.0 - position_rank)
    rating += consistency * 20.0
    return min(100.0, max(0.0, rating))


def build_outlook(
    player: Player,
    metrics: TrendMetrics | None = None,
    settings: TrendSettings | None = None,
    position_rank: int | None = None,
) -> PlayerOutlook:
    if metrics is None:
        metrics = analyze_player(player, settings)
    consistency = consistency_score(metrics)
    rating = performance_rating(player.fantasy_points, player.projected_points, consistency, position_rank)

    is_hot = metrics.trend is Trend.HOT
    is_cold = metrics.trend is Trend.COLD
    is_boom_bust = metrics.std_dev > metrics.season_average * BOOM_BUST_RATIO
    should_buy = is_cold and metrics.season_average > BUY_LOW_MIN_AVERAGE
    should_sell = is_hot and rating > SELL_HIGH_MIN_RATING

    recs: list[str] = []
    if is_hot:
        recs.append("Hot streak - start with confidence")
    if is_cold:
        recs.append("Cold streak - consider benching")
    if is_boom_bust:
        recs.append("Boom/bust player - high risk, high reward")
    if should_sell:
        recs.append("Sell-high candidate")
    if should_buy:
        recs.append("Buy-low opportunity")
    if player.injury_status is not None:
        recs.append(f"Injury concern: {player.injury_status}")

    return PlayerOutlook(
        player=player,
        metrics=metrics,
        performance_rating=rating,
        consistency=consistency,
        risk=categorize_risk(metrics.std_dev),
        is_boom_bust=is_boom_bust,
        should_start=rating > START_MIN_RATING and player.injury_status is None,
        should_buy=should_buy,
        should_sell=should_sell,
        recommendations=tuple(recs),
    )


def _can_replace(bench: Position, starter: Position, flex_positions: frozenset[Position]) -> bool:
    return bench == starter or (bench in flex_positions and starter in flex_positions)


def suggest_swaps(
    starters: Sequence[PlayerOutlook],
    bench: Sequence[PlayerOutlook],
    flex_positions: frozenset[Position] = FLEX_POSITIONS,
) -> list[LineupSwap]:
    """Pair cold, underperforming starters with hot bench players who can fill the same slot."""
    cold_starters = [s for s in starters if s.is_cold and s.performance_rating < SWAP_MAX_STARTER_RATING]
    hot_bench = [b for b in bench if b.is_hot and b.performance_rating > SWAP_MIN_BENCH_RATING]

    swaps: list[LineupSwap] = []
    used: set[str] = set()
    for starter in cold_starters:
        replacement = next(
            (
                b
                for b in hot_bench
                if b.player.player_id not in used
                and _can_replace(b.player.position, starter.player.position, flex_positions)
            ),
            None,
        )
        if replacement is None:
            continue
        used.add(replacement.player.player_id)
        swaps.append(
            LineupSwap(
                bench_player=replacement.player,
                starter=starter.player,
                reason=(
                    f"{replacement.player.name} is hot ({replacement.metrics.last_n_average:.1f} ppg) "
                    f"while {starter.player.name} is cold ({starter.metrics.last_n_average:.1f} ppg)"
                ),
            )
        )
    return swaps
