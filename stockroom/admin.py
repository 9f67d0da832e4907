"""
Stockroom Admin.

- Warehouse: list + edit
- Product: quantity is read-only after creation (stock only changes via
  inventory.reserve() / inventory.release())
"""

from django.contrib import admin
from django.utils.translation import gettext_lazy as _

from stockroom.models import Product, Warehouse


class ProductInline(admin.TabularInline):
    model = Product
    fields = ['code', 'name', 'size', 'quantity']
    readonly_fields = ['quantity']
    extra = 0
    show_change_link = True


@admin.register(Warehouse)
class WarehouseAdmin(admin.ModelAdmin):
    """Warehouse admin — editable."""

    list_display = ['id', 'name', 'is_available', 'product_count']
    list_filter = ['is_available']
    search_fields = ['name']
    inlines = [ProductInline]

    @admin.display(description=_('Products'))
    def product_count(self, obj):
        return obj.products.count()


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    """Product admin. Stock only changes via the inventory service."""

    list_display = ['code', 'name', 'size', 'quantity', 'warehouse']
    list_filter = ['warehouse']
    search_fields = ['code', 'name']
    list_select_related = ['warehouse']

    def get_readonly_fields(self, request, obj=None):
        if obj is not None:
            return ['quantity']
        return []
