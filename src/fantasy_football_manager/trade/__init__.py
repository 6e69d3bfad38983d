from fantasy_football_manager.trade.analyzer import TradeAnalyzer, analyze_trade
from fantasy_football_manager.trade.counter import CounterProposalGenerator
from fantasy_football_manager.trade.history import InMemoryTradeHistory, TradeHistorySource
from fantasy_football_manager.trade.models import (
    FairnessWeights,
    HistoricalTrade,
    ImmediateImpact,
    Recommendation,
    RecommendationThresholds,
    SeasonImpact,
    TradeAnalysis,
    TradeProposal,
    TradeReasoning,
    TradeTarget,
)
from fantasy_football_manager.trade.schedule import NeutralScheduleSource, ScheduleSource, StaticScheduleSource
from fantasy_football_manager.trade.targets import find_trade_targets

__all__ = [
    "CounterProposalGenerator",
    "FairnessWeights",
    "HistoricalTrade",
    "ImmediateImpact",
    "InMemoryTradeHistory",
    "NeutralScheduleSource",
    "Recommendation",
    "RecommendationThresholds",
    "ScheduleSource",
    "SeasonImpact",
    "StaticScheduleSource",
    "TradeAnalysis",
    "TradeAnalyzer",
    "TradeHistorySource",
    "TradeProposal",
    "TradeReasoning",
    "TradeTarget",
    "analyze_trade",
    "find_trade_targets",
]
