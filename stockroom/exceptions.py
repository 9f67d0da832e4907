"""
Exceptions for Stockroom.

All errors are InventoryError with a structured code for programmatic handling.
The subclass tells the caller which kind of failure happened; the code narrows it.
"""

from typing import Any


class BaseError(Exception):
    """
    Exception with a machine-readable code, a human message and context data.

    Subclasses provide `_default_messages` keyed by code and a `default_code`
    used when the error is raised without one.
    """

    default_code = 'ERROR'
    _default_messages: dict[str, str] = {}

    def __init__(self, code: str | None = None, message: str | None = None, **data: Any):
        self.code = code or self.default_code
        self.message = message or self._default_messages.get(self.code, self.code)
        self.data = data
        super().__init__(f"[{self.code}] {self.message}")


class InventoryError(BaseError):
    """
    Structured exception for inventory operations.

    Usage:
        try:
            inventory.reserve(['SKU1', 'SKU2'])
        except OutOfStockError as e:
            print(f"{e.product_code} is sold out")
        except InventoryError as e:
            return JsonResponse(e.as_dict(), status=500)

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    default_code = 'INVENTORY_ERROR'

    _default_messages = {
        'INVENTORY_ERROR': 'inventory operation failed',
        'EMPTY_PRODUCT_CODES': 'empty product codes',
        'INVALID_PRODUCT_CODE': 'invalid product code',
        'INVALID_QUANTITY': 'quantity must be a non-negative integer',
        'INVALID_REQUEST': 'invalid request format',
        'NAME_REQUIRED': 'name is required',
        'PRODUCT_NOT_FOUND': 'product not found',
        'WAREHOUSE_NOT_FOUND': 'warehouse not found',
        'OUT_OF_STOCK': 'product is out of stock',
        'STORAGE_ERROR': 'storage operation failed',
        'DATABASE_UNAVAILABLE': 'database is unavailable',
    }

    @property
    def product_code(self) -> str | None:
        """Shortcut for data['product_code']."""
        return self.data.get('product_code')

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': {k: v if isinstance(v, (int, bool)) or v is None else str(v)
                     for k, v in self.data.items()},
        }


class ValidationError(InventoryError):
    """Input rejected before any storage access."""

    default_code = 'INVALID_REQUEST'


class NotFoundError(InventoryError):
    """A product code or id does not resolve to a row."""

    default_code = 'PRODUCT_NOT_FOUND'


class OutOfStockError(InventoryError):
    """Reservation hit a product whose quantity is below 1."""

    default_code = 'OUT_OF_STOCK'


class StorageError(InventoryError):
    """Connection, statement or commit failure. Never carries SQL or DSNs."""

    default_code = 'STORAGE_ERROR'
