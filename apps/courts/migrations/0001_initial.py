from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Court",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=50, unique=True)),
                (
                    "court_type",
                    models.CharField(
                        choices=[("indoor", "Indoor"), ("outdoor", "Outdoor")],
                        default="outdoor",
                        max_length=20,
                    ),
                ),
                ("is_covered", models.BooleanField(default=False)),
                (
                    "hourly_price",
                    models.DecimalField(
                        decimal_places=2,
                        help_text="Price per hour in EUR.",
                        max_digits=6,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("is_active", models.BooleanField(default=True)),
                ("description", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "verbose_name": "Court",
                "verbose_name_plural": "Courts",
                "ordering": ["hourly_price", "name"],
            },
        ),
    ]
