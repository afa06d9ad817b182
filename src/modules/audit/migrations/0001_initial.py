import django.utils.timezone
import uuid6
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="AuditEntry",
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
                (
                    "actor_username",
                    models.CharField(blank=True, default="", max_length=150),
                ),
                (
                    "actor_role",
                    models.CharField(
                        choices=[
                            ("Customer", "Customer"),
                            ("Staff", "Staff"),
                            ("Admin", "Admin"),
                        ],
                        max_length=20,
                    ),
                ),
                ("action", models.CharField(max_length=255)),
                (
                    "affected_id",
                    models.CharField(blank=True, max_length=64, null=True),
                ),
                ("actor_snapshot", models.JSONField(blank=True, default=dict)),
                (
                    "timestamp",
                    models.DateTimeField(
                        db_index=True, default=django.utils.timezone.now
                    ),
                ),
            ],
            options={
                "db_table": "audit_trail_logs",
                "ordering": ["-timestamp", "-id"],
                "indexes": [
                    models.Index(
                        fields=["actor_role", "-timestamp"],
                        name="audit_role_ts_idx",
                    )
                ],
            },
        ),
    ]
