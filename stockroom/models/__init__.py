"""
Stockroom Models.

Core models for warehouse inventory:
- Warehouse: Where stock is kept
- Product: Stock count for a code, owned by a warehouse
"""

from stockroom.models.product import Product
from stockroom.models.warehouse import Warehouse

__all__ = [
    'Warehouse',
    'Product',
]
