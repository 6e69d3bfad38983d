from fantasy_football_manager.lineup.models import LineupChange, LineupSlot, RiskMode, RosterAdvice
from fantasy_football_manager.lineup.optimizer import (
    build_median_lineup,
    diff_lineups,
    fill_lineup,
    optimize_lineup,
    player_volatility,
    utility_score,
)
from fantasy_football_manager.lineup.presets import RISK_PRESETS, RiskPreset

__all__ = [
    "RISK_PRESETS",
    "LineupChange",
    "LineupSlot",
    "RiskMode",
    "RiskPreset",
    "RosterAdvice",
    "build_median_lineup",
    "diff_lineups",
    "fill_lineup",
    "optimize_lineup",
    "player_volatility",
    "utility_score",
]
