"""
Warehouse model — Where products are stocked.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Warehouse(models.Model):
    """
    A storage location that owns products.

    Warehouses are created once and never changed or deleted by the service.
    """

    id = models.AutoField(primary_key=True)
    name = models.CharField(
        max_length=255,
        verbose_name=_('Name'),
    )
    is_available = models.BooleanField(
        default=True,
        verbose_name=_('Available'),
    )

    class Meta:
        db_table = 'warehouse'
        verbose_name = _('Warehouse')
        verbose_name_plural = _('Warehouses')

    def __str__(self) -> str:
        return self.name
