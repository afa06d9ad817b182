from decimal import Decimal

import django.core.validators
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("inventory", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Delivery",
            fields=[
                (
                    "id",
                    models.UUIDField(
                        default=uuid6.uuid7,
                        editable=False,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("product_id", models.CharField(db_index=True, max_length=64)),
                ("product_name", models.CharField(max_length=255)),
                ("color", models.CharField(blank=True, default="", max_length=64)),
                ("size", models.CharField(blank=True, default="", max_length=32)),
                (
                    "image_url",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                ("supplier_name", models.CharField(max_length=255)),
                (
                    "supplier_price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0.00"))
                        ],
                    ),
                ),
                (
                    "shop_price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0.00"))
                        ],
                    ),
                ),
                (
                    "quantity",
                    models.PositiveIntegerField(
                        validators=[django.core.validators.MinValueValidator(1)]
                    ),
                ),
                ("total_cost", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "staff_username",
                    models.CharField(blank=True, default="", max_length=150),
                ),
                ("delivered_at", models.DateTimeField(blank=True, null=True)),
                (
                    "delivered_by",
                    models.CharField(blank=True, default="", max_length=150),
                ),
            ],
            options={
                "db_table": "deliveries",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(
                        fields=["delivered_at"], name="deliveries_delivered_idx"
                    )
                ],
            },
        ),
    ]
