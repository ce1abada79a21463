"""Delete bookings in bulk."""

from django.core.management.base import BaseCommand, CommandError

from boxoffice import dependencies
from boxoffice.domain.errors import DomainError


class Command(BaseCommand):
    help = "Delete all bookings, or the bookings of one date and optionally one show."

    def add_arguments(self, parser):
        scope = parser.add_mutually_exclusive_group(required=True)
        scope.add_argument("--all", action="store_true", help="Delete every booking.")
        scope.add_argument("--date", help="Delete bookings for this date (YYYY-MM-DD).")
        parser.add_argument("--show", help="With --date, only delete this show.")
        parser.add_argument(
            "--yes", action="store_true", help="Do not ask for confirmation."
        )

    def handle(self, *args, **options):
        if options["all"] and options["show"]:
            raise CommandError("--show can only be combined with --date.")

        scope = "ALL bookings" if options["all"] else f"bookings for {options['date']}"
        if options["show"]:
            scope += f" {options['show']}"
        if not options["yes"]:
            answer = input(f"Delete {scope}? [y/N] ")
            if answer.strip().lower() not in ("y", "yes"):
                self.stdout.write("Aborted.")
                return

        try:
            deleted = dependencies.booking_service().delete_bookings(
                date=options["date"], show=options["show"]
            )
        except DomainError as exc:
            raise CommandError(exc.message) from exc
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} booking(s)."))
