from fantasy_football_manager.analytics.models import (
    LineupSwap,
    PlayerOutlook,
    RiskCategory,
    Trend,
    TrendMetrics,
    TrendSettings,
)
from fantasy_football_manager.analytics.outlook import build_outlook, performance_rating, suggest_swaps
from fantasy_football_manager.analytics.trend import (
    analyze_player,
    analyze_roster,
    analyze_trend,
    categorize_risk,
    classify_trend,
    consistency_score,
)

__all__ = [
    "LineupSwap",
    "PlayerOutlook",
    "RiskCategory",
    "Trend",
    "TrendMetrics",
    "TrendSettings",
    "analyze_player",
    "analyze_roster",
    "analyze_trend",
    "build_outlook",
    "categorize_risk",
    "classify_trend",
    "consistency_score",
    "performance_rating",
    "suggest_swaps",
]
