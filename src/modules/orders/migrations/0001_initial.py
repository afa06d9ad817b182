from decimal import Decimal

import django.core.validators
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CartLine",
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
                ("username", models.CharField(db_index=True, max_length=150)),
                (
                    "staff_username",
                    models.CharField(blank=True, default="", max_length=150),
                ),
                ("product_id", models.CharField(max_length=64)),
                ("product_name", models.CharField(max_length=255)),
                ("color", models.CharField(blank=True, default="", max_length=64)),
                ("size", models.CharField(blank=True, default="", max_length=32)),
                (
                    "image_url",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                (
                    "unit_price",
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
                        default=1,
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
            ],
            options={
                "db_table": "cart_lines",
                "ordering": ["created_at", "id"],
            },
        ),
        migrations.CreateModel(
            name="PlacedLine",
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
                ("username", models.CharField(db_index=True, max_length=150)),
                (
                    "staff_username",
                    models.CharField(blank=True, default="", max_length=150),
                ),
                ("product_id", models.CharField(max_length=64)),
                ("product_name", models.CharField(max_length=255)),
                ("color", models.CharField(blank=True, default="", max_length=64)),
                ("size", models.CharField(blank=True, default="", max_length=32)),
                (
                    "image_url",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                (
                    "unit_price",
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
                        default=1,
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "order_group_id",
                    models.CharField(db_index=True, max_length=32),
                ),
                ("payment_method", models.CharField(max_length=64)),
                (
                    "shipping_option",
                    models.CharField(default="Standard", max_length=64),
                ),
                (
                    "shipping_price",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=10, null=True
                    ),
                ),
                ("placed_at", models.DateTimeField()),
                ("received_at", models.DateField(blank=True, null=True)),
                ("canceled_at", models.DateField(blank=True, null=True)),
                ("canceled_reason", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "placed_lines",
                "ordering": ["placed_at", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="ToReceiveLine",
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
                ("username", models.CharField(db_index=True, max_length=150)),
                (
                    "staff_username",
                    models.CharField(blank=True, default="", max_length=150),
                ),
                ("product_id", models.CharField(max_length=64)),
                ("product_name", models.CharField(max_length=255)),
                ("color", models.CharField(blank=True, default="", max_length=64)),
                ("size", models.CharField(blank=True, default="", max_length=32)),
                (
                    "image_url",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                (
                    "unit_price",
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
                        default=1,
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "order_group_id",
                    models.CharField(db_index=True, max_length=32),
                ),
                ("payment_method", models.CharField(max_length=64)),
                (
                    "shipping_option",
                    models.CharField(default="Standard", max_length=64),
                ),
                (
                    "shipping_price",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=10, null=True
                    ),
                ),
                ("placed_at", models.DateTimeField()),
                ("received_at", models.DateField(blank=True, null=True)),
                ("canceled_at", models.DateField(blank=True, null=True)),
                ("canceled_reason", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "to_receive_lines",
                "ordering": ["placed_at", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="ReceivedLine",
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
                ("username", models.CharField(db_index=True, max_length=150)),
                (
                    "staff_username",
                    models.CharField(blank=True, default="", max_length=150),
                ),
                ("product_id", models.CharField(max_length=64)),
                ("product_name", models.CharField(max_length=255)),
                ("color", models.CharField(blank=True, default="", max_length=64)),
                ("size", models.CharField(blank=True, default="", max_length=32)),
                (
                    "image_url",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                (
                    "unit_price",
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
                        default=1,
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "order_group_id",
                    models.CharField(db_index=True, max_length=32),
                ),
                ("payment_method", models.CharField(max_length=64)),
                (
                    "shipping_option",
                    models.CharField(default="Standard", max_length=64),
                ),
                (
                    "shipping_price",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=10, null=True
                    ),
                ),
                ("placed_at", models.DateTimeField()),
                ("received_at", models.DateField(blank=True, null=True)),
                ("canceled_at", models.DateField(blank=True, null=True)),
                ("canceled_reason", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "received_lines",
                "ordering": ["placed_at", "id"],
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="CanceledLine",
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
                ("username", models.CharField(db_index=True, max_length=150)),
                (
                    "staff_username",
                    models.CharField(blank=True, default="", max_length=150),
                ),
                ("product_id", models.CharField(max_length=64)),
                ("product_name", models.CharField(max_length=255)),
                ("color", models.CharField(blank=True, default="", max_length=64)),
                ("size", models.CharField(blank=True, default="", max_length=32)),
                (
                    "image_url",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                (
                    "unit_price",
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
                        default=1,
                        validators=[django.core.validators.MinValueValidator(1)],
                    ),
                ),
                (
                    "order_group_id",
                    models.CharField(db_index=True, max_length=32),
                ),
                ("payment_method", models.CharField(max_length=64)),
                (
                    "shipping_option",
                    models.CharField(default="Standard", max_length=64),
                ),
                (
                    "shipping_price",
                    models.DecimalField(
                        blank=True, decimal_places=2, max_digits=10, null=True
                    ),
                ),
                ("placed_at", models.DateTimeField()),
                ("received_at", models.DateField(blank=True, null=True)),
                ("canceled_at", models.DateField(blank=True, null=True)),
                ("canceled_reason", models.TextField(blank=True, default="")),
            ],
            options={
                "db_table": "canceled_lines",
                "ordering": ["placed_at", "id"],
                "abstract": False,
            },
        ),
    ]
