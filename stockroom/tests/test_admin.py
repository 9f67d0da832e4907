"""
Tests for Stockroom admin registrations.
"""

import pytest
from django.contrib import admin

from stockroom.admin import ProductAdmin
from stockroom.models import Product, Warehouse


class TestAdmin:

    def test_models_are_registered(self):
        assert admin.site.is_registered(Warehouse)
        assert admin.site.is_registered(Product)

    def test_quantity_is_read_only_after_creation(self, rf):
        model_admin = ProductAdmin(Product, admin.site)
        request = rf.get('/')

        assert model_admin.get_readonly_fields(request) == []
        assert model_admin.get_readonly_fields(request, Product(code='SKU1')) == ['quantity']

    @pytest.mark.django_db
    def test_product_count(self, warehouse, stocked):
        model_admin = admin.site._registry[Warehouse]

        assert model_admin.product_count(warehouse) == 3
