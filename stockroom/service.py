"""
Inventory Service — The single public interface for all inventory operations.

Usage:
    from stockroom import inventory, InventoryError

    warehouse_id = inventory.create_warehouse('Main', is_available=True)
    inventory.create_product('Tee', 'M', 'SKU1', 10, warehouse_id)
    inventory.reserve(['SKU1'])
    inventory.release(['SKU1'])
    inventory.remaining(warehouse_id)  # [{'code': 'SKU1', 'quantity': 10}]
"""

from stockroom.services import InventoryCatalog, InventoryQueries, InventoryReservations


class Inventory(InventoryCatalog, InventoryReservations, InventoryQueries):
    """
    Single interface for all inventory operations.

    IMPORTANT: reserve() and release() are the only methods that change
    Product.quantity. Each batch is one atomic transaction with row locks.
    See each method's docstring.

    Every method takes an optional `using` database alias; the default
    comes from STOCKROOM['DATABASE_ALIAS'].
    """
