"""Device registry: caps how many devices can open one invitation link.

Fingerprints come from the client and are not verified. This deters
casual link sharing; it is not access control.
"""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from rsvp_server.models.device import DeviceRegistration
from rsvp_server.services.errors import StorageError

logger = logging.getLogger(__name__)

MAX_DEVICES = 2


def _save(session: Session, registration: DeviceRegistration, merge: bool = False) -> None:
    try:
        if merge:
            # Upsert: a racing first registration overwrites instead of failing
            session.merge(registration)
        else:
            session.add(registration)
        session.commit()
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Device registration write failed for %s: %s", registration.guest_number, e)
        raise StorageError(f"Failed to register device: {e}") from e


def _load(session: Session, guest_number: str):
    try:
        return session.get(DeviceRegistration, guest_number)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Device registration read failed for %s: %s", guest_number, e)
        raise StorageError(f"Failed to read device registrations: {e}") from e


def register_device(session: Session, guest_number: str, fingerprint: str, user_agent: str = "") -> dict:
    """Record an access attempt from a device.

    Returns a dict with ``authorized``, ``device_count`` and ``message``,
    plus ``is_new_registration`` or ``is_registered`` when authorized.
    """
    now = datetime.now(timezone.utc)
    now_iso = now.isoformat()
    registration = _load(session, guest_number)

    if registration is None:
        registration = DeviceRegistration(
            guest_number=guest_number,
            devices=[{
                "fingerprint": fingerprint,
                "user_agent": user_agent,
                "registered_at": now_iso,
                "last_seen": now_iso,
            }],
            total_devices=1,
            created_at=now,
            updated_at=now,
        )
        _save(session, registration, merge=True)
        logger.info("First device registered for %s", guest_number)
        return {
            "authorized": True,
            "device_count": 1,
            "is_new_registration": True,
            "message": "First device registered successfully",
        }

    known = any(d.get("fingerprint") == fingerprint for d in registration.devices)
    if known:
        registration.devices = [
            {**d, "last_seen": now_iso} if d.get("fingerprint") == fingerprint else d
            for d in registration.devices
        ]
        registration.updated_at = now
        _save(session, registration)
        return {
            "authorized": True,
            "device_count": registration.total_devices,
            "is_registered": True,
            "message": "Device already authorized",
        }

    if registration.total_devices < MAX_DEVICES:
        registration.devices = registration.devices + [{
            "fingerprint": fingerprint,
            "user_agent": user_agent,
            "registered_at": now_iso,
            "last_seen": now_iso,
        }]
        registration.total_devices = registration.total_devices + 1
        registration.updated_at = now
        _save(session, registration)
        logger.info("Device %d registered for %s", registration.total_devices, guest_number)
        return {
            "authorized": True,
            "device_count": registration.total_devices,
            "is_new_registration": True,
            "message": "Device registered successfully",
        }

    logger.info("Device limit reached for %s", guest_number)
    return {
        "authorized": False,
        "device_count": registration.total_devices,
        "message": f"Maximum devices reached ({MAX_DEVICES} devices allowed)",
    }


def get_device_count(session: Session, guest_number: str) -> int:
    """Number of registered devices for a guest number (0 if none)."""
    registration = _load(session, guest_number)
    if registration is None:
        return 0
    return registration.total_devices or 0
