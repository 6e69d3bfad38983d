from fantasy_football_manager.valuation.adjustments import TrendAdjustment, format_multiplier
from fantasy_football_manager.valuation.age import AgePolicy, DynastyAgePolicy, RedraftAgePolicy
from fantasy_football_manager.valuation.cache import ValuationCache
from fantasy_football_manager.valuation.models import ValuationResult, Valuator
from fantasy_football_manager.valuation.points import points_from_stats
from fantasy_football_manager.valuation.valuator import PlayerValuator

__all__ = [
    "AgePolicy",
    "DynastyAgePolicy",
    "PlayerValuator",
    "RedraftAgePolicy",
    "TrendAdjustment",
    "ValuationCache",
    "ValuationResult",
    "Valuator",
    "format_multiplier",
    "points_from_stats",
]
