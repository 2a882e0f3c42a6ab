"""Guest list statistics for the admin console.

Derived from the guest rows on every call; nothing is stored.
"""

from typing import Iterable

from sqlmodel import Session

from rsvp_server.models.guest import Guest
from rsvp_server.services import rsvp
from rsvp_server.services.guest_service import find_all_guests


def compute_stats(guests: Iterable[Guest]) -> dict:
    """Counts by status plus the confirmed headcount.

    A confirmed guest whose attendance has no ``guests_count`` counts as 1.
    """
    stats = {"total": 0, "confirmed": 0, "declined": 0, "pending": 0, "total_guests": 0}
    for guest in guests:
        stats["total"] += 1
        if guest.status in rsvp.STATUSES:
            stats[guest.status] += 1
        if guest.status == rsvp.CONFIRMED:
            count = (guest.attendance or {}).get("guests_count")
            stats["total_guests"] += 1 if count is None else count
    return stats


def get_stats(session: Session) -> dict:
    return compute_stats(find_all_guests(session))
