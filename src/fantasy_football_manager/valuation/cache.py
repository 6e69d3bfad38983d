from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Hashable

    from fantasy_football_manager.valuation.models import ValuationResult

logger = logging.getLogger(__name__)


class ValuationStore(Protocol):
    def get(self, key: Hashable) -> ValuationResult | None: ...

    def put(self, key: Hashable, value: ValuationResult) -> None: ...

    def invalidate(self) -> None: ...


class ValuationCache:
    """Session-scoped memo of valuation results.

    Entries are only valid for one analysis context (the current week).
    Moving to a different context drops everything.
    """

    def __init__(self, context: int | None = None) -> None:
        self._lock = threading.Lock()
        self._entries: dict[Hashable, ValuationResult] = {}
        self._context = context
        self.hits = 0
        self.misses = 0

    @property
    def context(self) -> int | None:
        return self._context

    def set_context(self, context: int | None) -> None:
        with self._lock:
            if context == self._context:
                return
            logger.debug("Valuation context %s -> %s, dropping %d entries", self._context, context, len(self._entries))
            self._context = context
            self._entries.clear()

    def get(self, key: Hashable) -> ValuationResult | None:
        with self._lock:
            result = self._entries.get(key)
            if result is None:
                self.misses += 1
                logger.debug("Valuation cache miss (%d entries)", len(self._entries))
            else:
                self.hits += 1
                logger.debug("Valuation cache hit for %s", result.player.player_id)
            return result

    def put(self, key: Hashable, value: ValuationResult) -> None:
        with self._lock:
            self._entries[key] = value

    def invalidate(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
