"""Django signals feeding the booking audit log."""

import logging

from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from boxoffice.models import Booking

audit = logging.getLogger("boxoffice.audit")


@receiver(post_save, sender=Booking)
def audit_booking_created(sender, instance, created, **kwargs):
    """Record every new booking."""
    if not created:
        return
    audit.info(
        "CREATE_BOOKING id=%s date=%s show=%s seats=%s total=%s source=%s",
        instance.id,
        instance.date,
        instance.show,
        ",".join(instance.booked_seats),
        instance.total_price,
        instance.source,
    )


@receiver(post_delete, sender=Booking)
def audit_booking_deleted(sender, instance, **kwargs):
    """Record every deleted booking."""
    audit.info(
        "DELETE_BOOKING id=%s date=%s show=%s seats=%s total=%s",
        instance.id,
        instance.date,
        instance.show,
        ",".join(instance.booked_seats),
        instance.total_price,
    )
