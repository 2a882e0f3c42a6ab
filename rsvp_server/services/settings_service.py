"""Event settings: a single row, created with defaults on first read."""

import logging
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from rsvp_server.models.event import SETTINGS_ID, EventSettings
from rsvp_server.services.errors import StorageError

logger = logging.getLogger(__name__)

DEFAULT_EVENT_SETTINGS = {
    "couple_names": {"groom": "العريس", "bride": "العروس"},
    "wedding_date": "2025-10-12T00:00:00.000Z",
    "venue": "البصرة - قاعة ألف ليلة وليلة",
    "theme": "romantic",
    "rsvp_deadline": "2025-09-30T00:00:00.000Z",
}

UPDATABLE_FIELDS = tuple(DEFAULT_EVENT_SETTINGS)


def get_event_settings(session: Session) -> EventSettings:
    """Return the settings row, creating it with defaults if absent."""
    try:
        event = session.get(EventSettings, SETTINGS_ID)
        if event is None:
            event = EventSettings(id=SETTINGS_ID, **DEFAULT_EVENT_SETTINGS)
            session.add(event)
            session.commit()
            session.refresh(event)
            logger.info("Created default event settings")
        return event
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Failed to load event settings: %s", e)
        raise StorageError(f"Failed to fetch settings: {e}") from e


def update_event_settings(session: Session, patch: dict) -> EventSettings:
    """Merge the given fields into the settings row. Unknown keys are ignored."""
    event = get_event_settings(session)
    for key, value in patch.items():
        if key not in UPDATABLE_FIELDS or value is None:
            continue
        if key == "couple_names" and isinstance(value, dict):
            value = {**(event.couple_names or {}), **value}
        setattr(event, key, value)
    event.updated_at = datetime.now(timezone.utc)
    try:
        session.add(event)
        session.commit()
        session.refresh(event)
    except SQLAlchemyError as e:
        session.rollback()
        logger.error("Failed to update event settings: %s", e)
        raise StorageError(f"Failed to update settings: {e}") from e

    logger.info("Event settings updated: %s", ", ".join(sorted(patch)))
    return event
