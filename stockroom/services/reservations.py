"""
Stock reservations — all-or-nothing batch adjustments (reserve, release).

Both methods run the whole batch under one transaction.atomic() and lock
every row they touch with select_for_update() before reading its quantity.
"""

import logging
from collections import Counter

from django.db import transaction
from django.db.models import F

from stockroom.db import get_alias, storage_errors
from stockroom.exceptions import (
    InventoryError,
    NotFoundError,
    OutOfStockError,
    ValidationError,
)
from stockroom.models.product import Product

logger = logging.getLogger('stockroom')


def _validate_codes(codes) -> list[str]:
    """Materialize a batch of product codes, rejecting empty or malformed input."""
    if isinstance(codes, (str, bytes)):
        raise ValidationError('INVALID_PRODUCT_CODE', product_code=codes)

    try:
        batch = list(codes or ())
    except TypeError:
        raise ValidationError('INVALID_PRODUCT_CODE', product_code=codes) from None
    if not batch:
        raise ValidationError('EMPTY_PRODUCT_CODES')

    for code in batch:
        if not isinstance(code, str) or not code.strip():
            raise ValidationError('INVALID_PRODUCT_CODE', product_code=code)
    return batch


def _locking_query(codes: list[str], using: str):
    """
    SELECT ... FOR UPDATE over every row matching `codes`, ordered by
    (code, id), so any two batches acquire their locks in the same order
    and cannot deadlock each other.
    """
    return (
        Product.objects.using(using)
        .select_for_update()
        .with_codes(codes)
        .only('id', 'code', 'quantity')
    )


def _lock_products(codes: list[str], using: str) -> dict[str, Product]:
    """Lock every row matching `codes` and return the first row per code."""
    locked: dict[str, Product] = {}
    for product in _locking_query(codes, using):
        locked.setdefault(product.code, product)
    return locked


class InventoryReservations:
    """Batch reservation methods."""

    @classmethod
    def reserve(cls, codes, using=None):
        """
        Take one unit of stock for every code in the batch.

        A code listed twice takes two units. Either every unit is taken
        or nothing changes.

        Raises:
            ValidationError('EMPTY_PRODUCT_CODES'): Empty batch (no query issued)
            NotFoundError('PRODUCT_NOT_FOUND'): A code matches no product
            OutOfStockError('OUT_OF_STOCK'): A product has quantity < 1
            StorageError: Database or commit failure

        Concurrency:
            - Runs under transaction.atomic()
            - Locks all rows with select_for_update() before checking stock
            - A concurrent reserve of the same code waits for this one to
              finish and then sees the decremented quantity
        """
        cls._adjust('reserve', _validate_codes(codes), delta=-1, using=using)

    @classmethod
    def release(cls, codes, using=None):
        """
        Return one unit of stock for every code in the batch.

        Release is unconditional: it does not check that a matching
        reservation happened.

        Raises:
            ValidationError('EMPTY_PRODUCT_CODES'): Empty batch (no query issued)
            NotFoundError('PRODUCT_NOT_FOUND'): A code matches no product
            StorageError: Database or commit failure

        Concurrency:
            - Same locked read as reserve(), so release and reserve on one
              code are serialized
        """
        cls._adjust('release', _validate_codes(codes), delta=1, using=using)

    @classmethod
    def _adjust(cls, operation: str, codes: list[str], delta: int, using=None):
        alias = get_alias(using)

        try:
            with storage_errors(operation, batch_size=len(codes)):
                with transaction.atomic(using=alias):
                    locked = _lock_products(codes, alias)
                    units = Counter()

                    for code in codes:
                        product = locked.get(code)
                        if product is None:
                            raise NotFoundError('PRODUCT_NOT_FOUND', product_code=code)

                        # Stock floor only applies when taking units
                        if delta < 0 and product.quantity - units[code] < 1:
                            raise OutOfStockError(
                                product_code=code,
                                available=product.quantity - units[code],
                            )
                        units[code] += 1

                    for code, count in units.items():
                        Product.objects.using(alias).filter(pk=locked[code].pk).update(
                            quantity=F('quantity') + delta * count
                        )
        except InventoryError as exc:
            logger.warning(
                f"inventory.{operation}_failed",
                extra={
                    "error_code": exc.code,
                    "product_code": exc.product_code,
                    "batch_size": len(codes),
                },
            )
            raise

        logger.info(
            f"inventory.{operation}d",
            extra={"codes": codes, "batch_size": len(codes)},
        )
