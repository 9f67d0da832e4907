"""
Catalog — single-statement warehouse and product maintenance.
"""

import logging

from stockroom.db import get_alias, storage_errors
from stockroom.exceptions import NotFoundError, ValidationError
from stockroom.models.product import Product
from stockroom.models.warehouse import Warehouse

logger = logging.getLogger('stockroom')


class InventoryCatalog:
    """Create/delete methods for warehouses and products."""

    @classmethod
    def create_warehouse(cls, name: str, is_available: bool = True, using=None) -> int:
        """Create a warehouse and return its id."""
        if not isinstance(name, str) or not name.strip():
            raise ValidationError('NAME_REQUIRED', field='name')

        alias = get_alias(using)
        with storage_errors('create_warehouse'):
            warehouse = Warehouse.objects.using(alias).create(
                name=name,
                is_available=bool(is_available),
            )

        logger.info(
            "inventory.warehouse.created",
            extra={"warehouse_id": warehouse.pk, "warehouse_name": name},
        )
        return warehouse.pk

    @classmethod
    def create_product(cls, name: str, size: str, code: str, quantity: int,
                       warehouse_id: int, using=None) -> int:
        """
        Create a product in a warehouse and return its id.

        Raises:
            ValidationError: Blank code or negative/non-integer quantity
            NotFoundError('WAREHOUSE_NOT_FOUND'): Unknown warehouse_id
        """
        if not isinstance(code, str) or not code.strip():
            raise ValidationError('INVALID_PRODUCT_CODE', product_code=code)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 0:
            raise ValidationError('INVALID_QUANTITY', requested=quantity)

        alias = get_alias(using)
        with storage_errors('create_product', product_code=code):
            if not Warehouse.objects.using(alias).filter(pk=warehouse_id).exists():
                raise NotFoundError('WAREHOUSE_NOT_FOUND', warehouse_id=warehouse_id)

            product = Product.objects.using(alias).create(
                name=name or '',
                size=size or '',
                code=code,
                quantity=quantity,
                warehouse_id=warehouse_id,
            )

        logger.info(
            "inventory.product.created",
            extra={
                "product_id": product.pk,
                "product_code": code,
                "qty": quantity,
                "warehouse_id": warehouse_id,
            },
        )
        return product.pk

    @classmethod
    def delete_product(cls, product_id: int, using=None):
        """
        Delete a product by id, whatever its stock.

        Raises:
            NotFoundError('PRODUCT_NOT_FOUND'): No product with that id
        """
        alias = get_alias(using)
        with storage_errors('delete_product', product_id=product_id):
            deleted, _ = Product.objects.using(alias).filter(pk=product_id).delete()

        if not deleted:
            raise NotFoundError('PRODUCT_NOT_FOUND', product_id=product_id)

        logger.info(
            "inventory.product.deleted",
            extra={"product_id": product_id},
        )
