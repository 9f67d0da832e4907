"""
Initial migration for Stockroom models.
"""

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):
    """Create Stockroom models: Warehouse, Product."""

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Warehouse',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('is_available', models.BooleanField(default=True, verbose_name='Available')),
            ],
            options={
                'verbose_name': 'Warehouse',
                'verbose_name_plural': 'Warehouses',
                'db_table': 'warehouse',
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('size', models.CharField(blank=True, default='', max_length=50, verbose_name='Size')),
                ('code', models.CharField(db_index=True, help_text='Business key used to reserve and release stock.', max_length=100, verbose_name='Code')),
                ('quantity', models.IntegerField(default=0, verbose_name='Quantity')),
                ('warehouse', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='products', to='stockroom.warehouse', verbose_name='Warehouse')),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'db_table': 'products',
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('quantity__gte', 0)), name='products_quantity_non_negative'),
                ],
            },
        ),
    ]
