import uuid

from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Booking",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("date", models.DateField()),
                ("show", models.CharField(choices=[("MORNING", "Morning"), ("MATINEE", "Matinee"), ("EVENING", "Evening"), ("NIGHT", "Night")], max_length=10)),
                ("screen", models.CharField(max_length=50)),
                ("movie", models.CharField(max_length=255)),
                ("movie_language", models.CharField(default="HINDI", max_length=50)),
                ("booked_seats", models.JSONField(default=list)),
                ("seat_count", models.PositiveIntegerField()),
                ("class_label", models.CharField(max_length=50)),
                ("price_per_seat", models.DecimalField(decimal_places=2, max_digits=10)),
                ("total_price", models.DecimalField(decimal_places=2, max_digits=12)),
                ("source", models.CharField(choices=[("LOCAL", "Local"), ("BMS", "BMS"), ("VIP", "VIP"), ("ONLINE", "Online")], default="LOCAL", max_length=10)),
                ("synced", models.BooleanField(default=False)),
                ("customer_name", models.CharField(blank=True, default="", max_length=100)),
                ("customer_phone", models.CharField(blank=True, default="", max_length=20)),
                ("notes", models.TextField(blank=True, default="")),
                ("total_income", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("local_income", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("bms_income", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("vip_income", models.DecimalField(decimal_places=2, default=0, max_digits=12)),
                ("booked_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("printed_at", models.DateTimeField(blank=True, null=True)),
            ],
            options={
                "ordering": ["-booked_at"],
                "indexes": [
                    models.Index(fields=["date", "show"], name="booking_date_show_idx"),
                    models.Index(fields=["class_label"], name="booking_class_label_idx"),
                    models.Index(fields=["-booked_at"], name="booking_booked_at_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="BmsBooking",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("seat_id", models.CharField(max_length=20)),
                ("date", models.DateField()),
                ("show", models.CharField(choices=[("MORNING", "Morning"), ("MATINEE", "Matinee"), ("EVENING", "Evening"), ("NIGHT", "Night")], max_length=10)),
                ("class_label", models.CharField(max_length=50)),
                ("status", models.CharField(default="BMS_BOOKED", max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["date", "show"], name="bms_date_show_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(fields=("seat_id", "date", "show"), name="unique_bms_seat_per_show"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Seat",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("seat_id", models.CharField(max_length=20, unique=True)),
                ("row", models.CharField(max_length=10)),
                ("number", models.PositiveIntegerField()),
                ("class_label", models.CharField(max_length=50)),
                ("status", models.CharField(choices=[("AVAILABLE", "Available"), ("BLOCKED", "Blocked")], default="AVAILABLE", max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "ordering": ["row", "number"],
                "indexes": [
                    models.Index(fields=["class_label"], name="seat_class_label_idx"),
                ],
            },
        ),
        migrations.CreateModel(
            name="TheaterSetting",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(max_length=100, unique=True)),
                ("value", models.JSONField(default=dict)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
        ),
        migrations.CreateModel(
            name="TicketCounter",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=50, unique=True)),
                ("current_value", models.PositiveIntegerField(default=0)),
                ("prefix", models.CharField(default="TKT", max_length=10)),
                ("padding", models.PositiveSmallIntegerField(default=6)),
            ],
        ),
        migrations.CreateModel(
            name="BookedSeat",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("seat_id", models.CharField(max_length=20)),
                ("date", models.DateField()),
                ("show", models.CharField(choices=[("MORNING", "Morning"), ("MATINEE", "Matinee"), ("EVENING", "Evening"), ("NIGHT", "Night")], max_length=10)),
                ("booking", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="seats", to="boxoffice.booking")),
            ],
            options={
                "constraints": [
                    models.UniqueConstraint(fields=("date", "show", "seat_id"), name="unique_booked_seat_per_show"),
                ],
            },
        ),
    ]
