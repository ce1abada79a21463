"""Report seats referenced by more than one booking of the same show."""

from django.core.management.base import BaseCommand, CommandError

from boxoffice import dependencies
from boxoffice.domain.errors import DomainError


class Command(BaseCommand):
    help = "List seats booked more than once for the same date and show."

    def add_arguments(self, parser):
        parser.add_argument("--date", help="Only check this date (YYYY-MM-DD).")
        parser.add_argument("--show", help="Only check this show.")

    def handle(self, *args, **options):
        try:
            conflicts = dependencies.booking_service().find_double_booked_seats(
                date=options["date"], show=options["show"]
            )
        except DomainError as exc:
            raise CommandError(exc.message) from exc

        if not conflicts:
            self.stdout.write(self.style.SUCCESS("No duplicate seats found."))
            return

        for conflict in conflicts:
            self.stdout.write(
                f"{conflict.date} {conflict.show.value} {conflict.seat_id}: "
                + ", ".join(str(booking_id) for booking_id in conflict.booking_ids)
            )
        raise CommandError(f"Found {len(conflicts)} duplicate seat(s).", returncode=1)
