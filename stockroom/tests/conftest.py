"""
Pytest fixtures for Stockroom tests.
"""

import pytest

from stockroom.models import Product, Warehouse


@pytest.fixture
def warehouse(db):
    """Create an available warehouse."""
    return Warehouse.objects.create(name='Main Depot', is_available=True)


@pytest.fixture
def other_warehouse(db):
    """Create a second warehouse."""
    return Warehouse.objects.create(name='Overflow', is_available=False)


@pytest.fixture
def make_product(warehouse):
    """Factory: create a product in `warehouse` (or another one)."""
    def _make(code, quantity, name='T-Shirt', size='M', warehouse=warehouse):
        return Product.objects.create(
            name=name,
            size=size,
            code=code,
            quantity=quantity,
            warehouse=warehouse,
        )
    return _make


@pytest.fixture
def sku1(make_product):
    """Single unit of SKU1."""
    return make_product('SKU1', 1)


@pytest.fixture
def stocked(make_product):
    """Three products with plenty of stock."""
    return [
        make_product('SKU-A', 5),
        make_product('SKU-B', 3),
        make_product('SKU-C', 1),
    ]
