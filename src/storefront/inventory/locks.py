"""Per-product locks around stock check-and-decrement regions.

Order placement reads stock levels, validates them and writes the decrements
back in one Unit of Work. Holding the product locks for the whole command
(including the commit) keeps two checkouts from selling the same last unit.
The locks are process-local.
"""

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager


class StockLocks:
    """Registry of one lock per product identity."""

    def __init__(self) -> None:
        self._registry_lock = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    def _lock_for(self, product_id: str) -> threading.Lock:
        with self._registry_lock:
            return self._locks.setdefault(product_id, threading.Lock())

    @contextmanager
    def hold(self, product_ids: Iterable) -> Iterator[None]:
        """Acquire the locks of ``product_ids`` in a stable order."""
        ordered = sorted({str(pid) for pid in product_ids})
        acquired = []
        try:
            for product_id in ordered:
                lock = self._lock_for(product_id)
                lock.acquire()
                acquired.append(lock)
            yield
        finally:
            for lock in reversed(acquired):
                lock.release()


stock_locks = StockLocks()
