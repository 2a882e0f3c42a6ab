"""Guest list business logic: numbering, lookup, RSVP updates, deletion.

Every call re-reads from the database. Nothing here locks: two
concurrent creates can allocate the same guest number, and two devices
submitting for the same guest resolve as last-write-wins.
"""

import logging
import time
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Integer, cast
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, func, select

from rsvp_server.models.device import DeviceRegistration
from rsvp_server.models.guest import Guest
from rsvp_server.services import rsvp
from rsvp_server.services.errors import NotFound, StorageError, ValidationError

logger = logging.getLogger(__name__)

FIRST_GUEST_NUMBER = 1001


def _current_max_number(session: Session) -> Optional[int]:
    """Highest guest number assigned so far, compared as integers."""
    return session.exec(
        select(func.max(cast(Guest.guest_number, Integer)))
    ).one()


def _fallback_number() -> str:
    return str(int(time.time() * 1000))[-6:]


def generate_guest_number(session: Session) -> str:
    """Next guest number: current maximum + 1, or "1001" for an empty list.

    If the lookup fails, falls back to the low six digits of the current
    millisecond timestamp. That value is not guaranteed to be unique.
    """
    try:
        current = _current_max_number(session)
    except SQLAlchemyError as e:
        session.rollback()
        fallback = _fallback_number()
        logger.warning("Guest number lookup failed (%s), using fallback %s", e, fallback)
        return fallback

    if current is None:
        return str(FIRST_GUEST_NUMBER)
    return str(current + 1)


def create_guest(session: Session, profile: dict) -> Guest:
    """Create a pending guest with the next guest number."""
    name = (profile.get("name") or "").strip()
    if not name:
        raise ValidationError("Name is required")

    guest_number = generate_guest_number(session)
    guest = Guest(
        guest_number=guest_number,
        name=name,
        phone=profile.get("phone") or "",
        email=profile.get("email") or "",
        group=profile.get("group") or "General",
        created_by=profile.get("created_by") or "admin",
    )
    try:
        session.add(guest)
        session.commit()
        session.refresh(guest)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Failed to create guest %s: %s", name, e)
        raise StorageError(f"Failed to create guest: {e}") from e

    logger.info("Guest created: %s (%s)", guest.guest_number, guest.name)
    return guest


def create_guests_bulk(session: Session, names: list[str], group: str = "General") -> tuple[list[Guest], list[str]]:
    """Create one guest per non-blank name, in order.

    A failure for one name does not stop the rest. Returns
    ``(created, failed_names)``.
    """
    created = []
    failed = []
    for raw in names:
        name = raw.strip()
        if not name:
            continue
        try:
            created.append(create_guest(session, {"name": name, "group": group}))
        except StorageError:
            failed.append(name)
    return created, failed


def find_guest_by_number(session: Session, guest_number: str) -> Optional[Guest]:
    """Guest with this number, or None.

    If duplicates exist, the earliest-created one is returned.
    """
    try:
        return session.exec(
            select(Guest)
            .where(Guest.guest_number == guest_number)
            .order_by(col(Guest.created_at).asc(), col(Guest.id).asc())
        ).first()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Failed to look up guest %s: %s", guest_number, e)
        raise StorageError(f"Failed to find guest: {e}") from e


def find_all_guests(session: Session, status: Optional[str] = None) -> list[Guest]:
    """All guests, most recently created first. Optionally filtered by status."""
    if status is not None and status not in rsvp.STATUSES:
        raise ValidationError(f"Unknown status: {status}")

    query = select(Guest)
    if status is not None:
        query = query.where(Guest.status == status)
    query = query.order_by(
        col(Guest.created_at).desc(),
        cast(Guest.guest_number, Integer).desc(),
    )
    try:
        return list(session.exec(query).all())
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Failed to list guests: %s", e)
        raise StorageError(f"Failed to fetch guests: {e}") from e


def update_rsvp(session: Session, guest_number: str, payload: dict) -> Guest:
    """Submit or replace a guest's RSVP.

    ``status`` and ``attendance`` are written together in one commit; on
    failure the row is left as it was.
    """
    guest = find_guest_by_number(session, guest_number)
    if not guest:
        raise NotFound("Guest not found")

    status, attendance = rsvp.apply_rsvp(
        payload.get("attending"),
        payload.get("guests_count"),
        payload.get("message"),
    )

    guest.status = status
    guest.attendance = attendance
    guest.updated_at = datetime.now(timezone.utc)
    try:
        session.add(guest)
        session.commit()
        session.refresh(guest)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Failed to update RSVP for %s: %s", guest_number, e)
        raise StorageError(f"Failed to update RSVP: {e}") from e

    logger.info("RSVP updated for %s: %s", guest_number, status)
    return guest


def delete_guest_by_number(session: Session, guest_number: str) -> Optional[dict]:
    """Delete a guest and, best-effort, its device registration.

    Returns None if the guest does not exist. Device cleanup failures are
    logged and do not undo the guest deletion.
    """
    guest = find_guest_by_number(session, guest_number)
    if not guest:
        logger.info("Guest not found for deletion: %s", guest_number)
        return None

    name = guest.name
    try:
        session.delete(guest)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Failed to delete guest %s: %s", guest_number, e)
        raise StorageError(f"Failed to delete guest: {e}") from e

    try:
        registration = session.get(DeviceRegistration, guest_number)
        if registration:
            session.delete(registration)
            session.commit()
            logger.info("Device registrations deleted for %s", guest_number)
    except SQLAlchemyError as e:
        session.rollback()
        logger.warning("Device cleanup failed for %s: %s", guest_number, e)

    logger.info("Guest deleted: %s", guest_number)
    return {
        "success": True,
        "guest_number": guest_number,
        "deleted_guest": name,
    }
