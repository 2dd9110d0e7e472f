from decimal import Decimal

import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Article",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("content", models.TextField()),
                ("image", models.CharField(blank=True, help_text="Image path or URL.", max_length=255)),
                ("author_id", models.PositiveIntegerField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Article",
                "verbose_name_plural": "Articles",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="Racket",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("brand", models.CharField(max_length=100)),
                ("model", models.CharField(max_length=150)),
                (
                    "price",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=7,
                        validators=[django.core.validators.MinValueValidator(Decimal("0.00"))],
                    ),
                ),
                ("weight", models.PositiveSmallIntegerField(help_text="Weight in grams.")),
                (
                    "balance",
                    models.CharField(
                        choices=[("low", "Low"), ("medium", "Medium"), ("high", "High")],
                        max_length=10,
                    ),
                ),
                (
                    "shape",
                    models.CharField(
                        choices=[("round", "Round"), ("teardrop", "Teardrop"), ("diamond", "Diamond")],
                        max_length=10,
                    ),
                ),
                ("description", models.TextField(blank=True)),
                ("image", models.CharField(blank=True, max_length=255)),
            ],
            options={
                "verbose_name": "Racket",
                "verbose_name_plural": "Rackets",
                "ordering": ["brand", "model"],
                "indexes": [
                    models.Index(fields=["brand"], name="catalog_racket_brand_idx"),
                    models.Index(fields=["price"], name="catalog_racket_price_idx"),
                ],
            },
        ),
    ]
