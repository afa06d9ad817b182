import django.core.validators
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ProductReview",
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
                ("line_id", models.UUIDField(unique=True)),
                (
                    "order_group_id",
                    models.CharField(blank=True, default="", max_length=32),
                ),
                ("username", models.CharField(db_index=True, max_length=150)),
                ("product_id", models.CharField(db_index=True, max_length=64)),
                ("product_name", models.CharField(max_length=255)),
                (
                    "rating",
                    models.PositiveSmallIntegerField(
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(5),
                        ]
                    ),
                ),
                ("review", models.TextField()),
                (
                    "image_url",
                    models.CharField(blank=True, default="", max_length=500),
                ),
                ("actor_snapshot", models.JSONField(blank=True, default=dict)),
            ],
            options={
                "db_table": "product_reviews",
                "ordering": ["-created_at"],
            },
        ),
    ]
