"""
Product model — Stock count for a code in a warehouse.
"""

from django.db import models
from django.db.models import Q
from django.utils.translation import gettext_lazy as _


class ProductQuerySet(models.QuerySet):
    """QuerySet with helpers for inventory lookups."""

    def with_codes(self, codes):
        """Rows matching any of `codes`, in canonical lock order."""
        return self.filter(code__in=set(codes)).order_by('code', 'id')

    def in_warehouse(self, warehouse_id):
        return self.filter(warehouse_id=warehouse_id)


class Product(models.Model):
    """
    Stock of one product in one warehouse.

    Rules:
    - `code` is the business key used by reserve/release
    - `quantity` NEVER goes below zero
    - `quantity` only changes through the inventory service
    """

    id = models.AutoField(primary_key=True)
    name = models.CharField(
        max_length=255,
        verbose_name=_('Name'),
    )
    size = models.CharField(
        max_length=50,
        blank=True,
        default='',
        verbose_name=_('Size'),
    )
    code = models.CharField(
        max_length=100,
        db_index=True,
        verbose_name=_('Code'),
        help_text=_('Business key used to reserve and release stock.'),
    )
    quantity = models.IntegerField(
        default=0,
        verbose_name=_('Quantity'),
    )
    warehouse = models.ForeignKey(
        'stockroom.Warehouse',
        on_delete=models.CASCADE,
        related_name='products',
        verbose_name=_('Warehouse'),
    )

    objects = ProductQuerySet.as_manager()

    class Meta:
        db_table = 'products'
        verbose_name = _('Product')
        verbose_name_plural = _('Products')
        constraints = [
            models.CheckConstraint(
                condition=Q(quantity__gte=0),
                name='products_quantity_non_negative',
            ),
        ]

    def __str__(self) -> str:
        return f"{self.code} ({self.quantity})"
