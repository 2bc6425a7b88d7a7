import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("listings", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="CohostPermission",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("can_edit_listing", models.BooleanField(default=False)),
                ("can_manage_bookings", models.BooleanField(default=False)),
                ("can_respond_messages", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "cohost",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cohost_grants",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "host",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="granted_cohost_permissions",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
                (
                    "listing",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="cohost_permissions",
                        to="listings.listing",
                    ),
                ),
            ],
            options={
                "verbose_name": "Co-host permission",
                "verbose_name_plural": "Co-host permissions",
                "ordering": ["-created_at", "-id"],
                "indexes": [
                    models.Index(fields=["cohost"], name="cohost_perm_cohost_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("listing", "cohost"),
                        name="cohost_permission_unique_listing_cohost",
                    ),
                    models.CheckConstraint(
                        condition=models.Q(("host", models.F("cohost")), _negated=True),
                        name="cohost_permission_not_self",
                    ),
                ],
            },
        ),
    ]
