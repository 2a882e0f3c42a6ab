"""RSVP state machine.

A guest starts ``pending`` with no attendance. Any submission moves the
guest to ``confirmed`` or ``declined`` and replaces the whole attendance
record; resubmitting is how a guest changes their answer. There is no
transition back to ``pending``.
"""

from datetime import datetime, timezone
from typing import Optional

from rsvp_server.services.errors import ValidationError

PENDING = "pending"
CONFIRMED = "confirmed"
DECLINED = "declined"

STATUSES = (PENDING, CONFIRMED, DECLINED)


def derive_status(attendance: Optional[dict]) -> str:
    """Status implied by an attendance record."""
    if attendance is None:
        return PENDING
    return CONFIRMED if attendance.get("attending") else DECLINED


def apply_rsvp(attending, guests_count=None, message: Optional[str] = None) -> tuple[str, dict]:
    """Validate a submission and build the new ``(status, attendance)`` pair.

    ``attending`` must be a real bool. Declines always record zero
    guests. Accepted submissions keep the count they were given; callers
    supply the default of 1 before calling.
    """
    if not isinstance(attending, bool):
        raise ValidationError("attending must be true or false")

    if attending:
        if guests_count is None:
            raise ValidationError("guestsCount is required when attending")
        if isinstance(guests_count, bool) or not isinstance(guests_count, int):
            raise ValidationError("guestsCount must be an integer")
        if guests_count < 0:
            raise ValidationError("guestsCount cannot be negative")
    else:
        guests_count = 0

    attendance = {
        "attending": attending,
        "guests_count": guests_count,
        "message": message or "",
        "submitted_at": datetime.now(timezone.utc).isoformat(),
    }
    return derive_status(attendance), attendance
