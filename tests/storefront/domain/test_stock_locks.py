"""Tests for per-product stock locks."""

import threading

from storefront.inventory.locks import StockLocks


class TestStockLocks:
    def test_locks_released_after_block(self):
        locks = StockLocks()
        with locks.hold(["b", "a"]):
            pass
        with locks.hold(["a", "b"]):
            pass

    def test_locks_released_on_error(self):
        locks = StockLocks()
        try:
            with locks.hold(["a"]):
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert locks._lock_for("a").acquire(blocking=False)

    def test_same_product_is_exclusive(self):
        locks = StockLocks()
        entered = threading.Event()
        release = threading.Event()
        second_acquired = []

        def holder():
            with locks.hold(["p-1"]):
                entered.set()
                release.wait(timeout=5)

        def contender():
            with locks.hold(["p-1"]):
                second_acquired.append(True)

        first = threading.Thread(target=holder)
        first.start()
        entered.wait(timeout=5)

        second = threading.Thread(target=contender)
        second.start()
        second.join(timeout=0.2)
        assert second_acquired == []

        release.set()
        first.join(timeout=5)
        second.join(timeout=5)
        assert second_acquired == [True]

    def test_distinct_products_do_not_block(self):
        locks = StockLocks()
        with locks.hold(["p-1"]):
            acquired = []

            def other():
                with locks.hold(["p-2"]):
                    acquired.append(True)

            thread = threading.Thread(target=other)
            thread.start()
            thread.join(timeout=5)
        assert acquired == [True]
