import decimal
import uuid

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Condo",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("location", models.CharField(max_length=255)),
                ("description", models.TextField(blank=True)),
                ("amenities", models.TextField(blank=True, help_text="Free text or comma-separated list.")),
                (
                    "max_guests",
                    models.PositiveSmallIntegerField(
                        default=4,
                        validators=[
                            django.core.validators.MinValueValidator(1),
                            django.core.validators.MaxValueValidator(20),
                        ],
                    ),
                ),
                (
                    "price_per_night",
                    models.DecimalField(
                        decimal_places=2,
                        default=decimal.Decimal("0.00"),
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(decimal.Decimal("0.00"))],
                    ),
                ),
                ("image_url", models.TextField(blank=True)),
                ("unique_code", models.UUIDField(default=uuid.uuid4, editable=False, unique=True)),
                ("booking_link", models.URLField(blank=True, max_length=500)),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Available", "Available"),
                            ("Occupied", "Occupied"),
                            ("Maintenance", "Maintenance"),
                            ("Unavailable", "Unavailable"),
                        ],
                        default="Available",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("last_updated", models.DateTimeField(blank=True, null=True)),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="owned_condos",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "front_desk",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="front_desk_condo",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Condo",
                "verbose_name_plural": "Condos",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["owner", "status"], name="condo_owner_status_idx")],
                "constraints": [
                    models.UniqueConstraint(fields=("name", "location"), name="condo_unique_name_location"),
                    models.CheckConstraint(
                        condition=models.Q(("max_guests__gte", 1), ("max_guests__lte", 20)),
                        name="condo_max_guests_range",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("price_per_night__gte", 0)),
                        name="condo_price_non_negative",
                    ),
                ],
            },
        ),
    ]
