from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Protocol

from fantasy_football_manager.trade.models import HistoricalTrade, SimilarTrade

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from fantasy_football_manager.domain.player import Position
    from fantasy_football_manager.trade.models import TradeProposal

SIMILARITY_CUTOFF: float = 0.5


class TradeHistorySource(Protocol):
    def similar_trades(self, proposal: TradeProposal) -> list[SimilarTrade]: ...


def position_similarity(a: Sequence[Position], b: Sequence[Position]) -> float:
    """Jaccard similarity of two position multisets (1.0 when both are empty)."""
    ca, cb = Counter(a), Counter(b)
    union = sum((ca | cb).values())
    if union == 0:
        return 1.0
    return sum((ca & cb).values()) / union


def trade_similarity(proposal: TradeProposal, trade: HistoricalTrade) -> float:
    sent = position_similarity([p.position for p in proposal.sending], trade.sent_positions)
    received = position_similarity([p.position for p in proposal.receiving], trade.received_positions)
    return (sent + received) / 2.0


class InMemoryTradeHistory:
    def __init__(self, trades: Iterable[HistoricalTrade] = (), cutoff: float = SIMILARITY_CUTOFF) -> None:
        self._trades = list(trades)
        self._cutoff = cutoff

    def add(self, trade: HistoricalTrade) -> None:
        self._trades.append(trade)

    def similar_trades(self, proposal: TradeProposal) -> list[SimilarTrade]:
        scored = [SimilarTrade(trade=t, similarity=trade_similarity(proposal, t)) for t in self._trades]
        matches = [s for s in scored if s.similarity >= self._cutoff]
        return sorted(matches, key=lambda s: s.similarity, reverse=True)
