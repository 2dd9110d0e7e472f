"""Seed the three courts the club opened with."""

from decimal import Decimal

from django.db import migrations

COURTS = [
    {
        "name": "Central",
        "court_type": "indoor",
        "is_covered": True,
        "hourly_price": Decimal("25.00"),
        "description": "Main glass court with stands.",
    },
    {
        "name": "Norte",
        "court_type": "outdoor",
        "is_covered": True,
        "hourly_price": Decimal("20.00"),
        "description": "Covered outdoor court.",
    },
    {
        "name": "Sur",
        "court_type": "outdoor",
        "is_covered": False,
        "hourly_price": Decimal("15.00"),
        "description": "Open-air court.",
    },
]


def create_courts(apps, schema_editor):
    Court = apps.get_model("courts", "Court")
    for data in COURTS:
        Court.objects.get_or_create(name=data["name"], defaults=data)


def delete_courts(apps, schema_editor):
    Court = apps.get_model("courts", "Court")
    Court.objects.filter(name__in=[data["name"] for data in COURTS]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("courts", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_courts, delete_courts),
    ]
