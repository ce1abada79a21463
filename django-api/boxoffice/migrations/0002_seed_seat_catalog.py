from django.db import migrations

from boxoffice.layout import iter_layout_seats
from boxoffice.services.pricing import class_for_row


def seed_seats(apps, schema_editor):
    Seat = apps.get_model("boxoffice", "Seat")
    existing = set(Seat.objects.values_list("seat_id", flat=True))
    Seat.objects.bulk_create(
        [
            Seat(
                seat_id=f"{row}-{number}",
                row=row,
                number=number,
                class_label=class_for_row(row),
            )
            for row, number in iter_layout_seats()
            if f"{row}-{number}" not in existing
        ]
    )


def unseed_seats(apps, schema_editor):
    Seat = apps.get_model("boxoffice", "Seat")
    Seat.objects.all().delete()


class Migration(migrations.Migration):

    dependencies = [
        ("boxoffice", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed_seats, unseed_seats),
    ]
