"""
Stockroom — warehouse inventory with all-or-nothing stock reservations.

Usage:
    from stockroom import inventory, InventoryError

    inventory.reserve(['SKU1', 'SKU2'])
    inventory.release(['SKU1'])
    inventory.remaining(warehouse_id)
"""


def __getattr__(name):
    """Lazy import to avoid circular imports during app loading."""
    if name == 'inventory':
        from stockroom.service import Inventory
        return Inventory
    elif name in ('InventoryError', 'ValidationError', 'NotFoundError',
                  'OutOfStockError', 'StorageError'):
        from stockroom import exceptions
        return getattr(exceptions, name)
    elif name == 'Warehouse':
        from stockroom.models.warehouse import Warehouse
        return Warehouse
    elif name == 'Product':
        from stockroom.models.product import Product
        return Product
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'inventory',
    'InventoryError',
    'ValidationError',
    'NotFoundError',
    'OutOfStockError',
    'StorageError',
    'Warehouse',
    'Product',
]

__version__ = '0.1.0'
