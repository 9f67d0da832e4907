"""
Inventory services — modular organization of inventory operations.

Re-exports all public classes:
    from stockroom.services import InventoryCatalog, InventoryReservations, InventoryQueries
"""

from stockroom.services.catalog import InventoryCatalog
from stockroom.services.queries import InventoryQueries
from stockroom.services.reservations import InventoryReservations

__all__ = [
    'InventoryCatalog',
    'InventoryQueries',
    'InventoryReservations',
]
