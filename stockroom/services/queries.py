"""
Stock queries — read-only operations.

No locking: results are a snapshot and may lag behind a reservation
that is still in flight.
"""

from stockroom.db import get_alias, storage_errors
from stockroom.models.product import Product


class InventoryQueries:
    """Read-only inventory query methods."""

    @classmethod
    def remaining(cls, warehouse_id: int, using=None) -> list[dict]:
        """
        Remaining stock per product of a warehouse.

        Returns:
            [{'code': str, 'quantity': int}, ...] in storage order.
            Empty list when the warehouse has no products (or does not exist).
        """
        alias = get_alias(using)
        with storage_errors('remaining', warehouse_id=warehouse_id):
            return list(
                Product.objects.using(alias)
                .in_warehouse(warehouse_id)
                .values('code', 'quantity')
            )

