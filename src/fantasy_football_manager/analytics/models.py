from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fantasy_football_manager.domain.player import Player


class Trend(StrEnum):
    HOT = "hot"
    COLD = "cold"
    STEADY = "steady"


class RiskCategory(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass(frozen=True)
class TrendSettings:
    """Thresholds for hot/cold classification.

    The absolute floors keep low-usage players from being labelled hot or
    cold on noise: a 2 -> 4 point jump is a 100% increase but not a streak.
    """

    window: int = 3
    hot_floor: float = 15.0
    hot_ratio: float = 1.3
    cold_floor: float = 10.0
    cold_ratio: float = 0.6


@dataclass(frozen=True)
class TrendMetrics:
    season_average: float
    last_n_average: float
    variance: float
    std_dev: float
    trend: Trend
    games_played: int
    window: int = 3
    player_id: str | None = None


@dataclass(frozen=True)
class PlayerOutlook:
    player: Player
    metrics: TrendMetrics
    performance_rating: float
    consistency: float
    risk: RiskCategory
    is_boom_bust: bool
    should_start: bool
    should_buy: bool
    should_sell: bool
    recommendations: tuple[str, ...]

    @property
    def is_hot(self) -> bool:
        return self.metrics.trend is Trend.HOT

    @property
    def is_cold(self) -> bool:
        return self.metrics.trend is Trend.COLD


@dataclass(frozen=True)
class LineupSwap:
    bench_player: Player
    starter: Player
    reason: str
