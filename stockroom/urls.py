"""
URL routes for the inventory API.

Usage in the project urls.py:
    path('api/v1/', include('stockroom.urls')),
"""

from django.urls import path

from stockroom import views

app_name = 'stockroom'

urlpatterns = [
    path('create-warehouse', views.create_warehouse, name='create-warehouse'),
    path('create-product', views.create_product, name='create-product'),
    path('delete-product/<int:product_id>', views.delete_product, name='delete-product'),
    path('reserve-products', views.reserve_products, name='reserve-products'),
    path('release-products', views.release_products, name='release-products'),
    path('remaining-products/<int:warehouse_id>', views.remaining_products, name='remaining-products'),
]
