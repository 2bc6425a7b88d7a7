from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import apps.listings.models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Listing",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("description", models.TextField()),
                ("address", models.CharField(max_length=255)),
                ("city", models.CharField(max_length=100)),
                ("country", models.CharField(max_length=100)),
                (
                    "price_per_night",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=10,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("currency", models.CharField(default=apps.listings.models.default_currency, max_length=3)),
                (
                    "max_guests",
                    models.PositiveSmallIntegerField(validators=[django.core.validators.MinValueValidator(1)]),
                ),
                ("bedrooms", models.PositiveSmallIntegerField(default=0)),
                (
                    "bathrooms",
                    models.DecimalField(
                        decimal_places=1,
                        default=Decimal("0.0"),
                        max_digits=4,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.0"))],
                    ),
                ),
                ("images", models.JSONField(blank=True, default=list)),
                ("amenities", models.JSONField(blank=True, default=list)),
                ("rules", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "host",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="listings",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Listing",
                "verbose_name_plural": "Listings",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["host", "-created_at"], name="listing_host_created_idx"),
                    models.Index(fields=["city"], name="listing_city_idx"),
                    models.Index(fields=["price_per_night"], name="listing_price_idx"),
                ],
                "constraints": [
                    models.CheckConstraint(
                        condition=models.Q(("max_guests__gte", 1)),
                        name="listing_max_guests_positive",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("price_per_night__gte", 0)),
                        name="listing_price_non_negative",
                    ),
                ],
            },
        ),
    ]
