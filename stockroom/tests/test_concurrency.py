"""
Concurrency tests: row locks serialize reservations on the same product.

Need a backend with SELECT ... FOR UPDATE (PostgreSQL). Run with
STOCKROOM_TEST_DB_ENGINE=postgresql.
"""

import threading

import pytest
from django.db import connection

from stockroom import OutOfStockError, inventory
from stockroom.models import Product


pytestmark = [
    pytest.mark.django_db(transaction=True),
    pytest.mark.skipif(
        not connection.features.has_select_for_update,
        reason='backend has no row-level locking',
    ),
]


def run_concurrently(*calls):
    """Start every call at once in its own thread; return outcomes in order."""
    barrier = threading.Barrier(len(calls))
    outcomes = [None] * len(calls)

    def worker(index, call):
        try:
            barrier.wait()
            call()
            outcomes[index] = 'ok'
        except Exception as exc:
            outcomes[index] = exc
        finally:
            connection.close()

    threads = [
        threading.Thread(target=worker, args=(i, call))
        for i, call in enumerate(calls)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=30)
    return outcomes


class TestConcurrentReserve:
    """Two batches racing for the same rows."""

    def test_last_unit_is_sold_once(self, make_product):
        """Exactly one reservation wins; the other sees OUT_OF_STOCK."""
        product = make_product('LAST', 1)

        outcomes = run_concurrently(
            lambda: inventory.reserve(['LAST']),
            lambda: inventory.reserve(['LAST']),
        )

        assert outcomes.count('ok') == 1
        assert sum(isinstance(o, OutOfStockError) for o in outcomes) == 1
        product.refresh_from_db()
        assert product.quantity == 0

    def test_no_lost_updates(self, make_product):
        product = make_product('MANY', 20)

        outcomes = run_concurrently(*[lambda: inventory.reserve(['MANY'])] * 8)

        assert outcomes == ['ok'] * 8
        product.refresh_from_db()
        assert product.quantity == 12

    def test_opposite_lock_order_does_not_deadlock(self, make_product):
        """[A, B] and [B, A] lock rows in the same canonical order."""
        a = make_product('A', 10)
        b = make_product('B', 10)

        for _ in range(5):
            outcomes = run_concurrently(
                lambda: inventory.reserve(['A', 'B']),
                lambda: inventory.reserve(['B', 'A']),
            )
            assert outcomes == ['ok', 'ok']

        assert {p.code: p.quantity for p in Product.objects.filter(pk__in=[a.pk, b.pk])} == {
            'A': 0, 'B': 0,
        }

    def test_release_serializes_with_reserve(self, make_product):
        product = make_product('SWAP', 1)

        outcomes = run_concurrently(
            lambda: inventory.reserve(['SWAP']),
            lambda: inventory.release(['SWAP']),
        )

        assert outcomes == ['ok', 'ok']
        product.refresh_from_db()
        assert product.quantity == 1
