"""Event settings schemas."""

from typing import Optional

from rsvp_server.models.event import EventSettings
from rsvp_server.schemas.base import CamelModel


class CoupleNames(CamelModel):
    groom: str = ""
    bride: str = ""


class EventSettingsResponse(CamelModel):
    couple_names: CoupleNames
    wedding_date: str
    venue: str
    theme: str
    rsvp_deadline: str
    updated_at: str


class EventSettingsUpdateRequest(CamelModel):
    couple_names: Optional[dict[str, str]] = None
    wedding_date: Optional[str] = None
    venue: Optional[str] = None
    theme: Optional[str] = None
    rsvp_deadline: Optional[str] = None


def event_to_response(event: EventSettings) -> EventSettingsResponse:
    return EventSettingsResponse(
        couple_names=CoupleNames(**(event.couple_names or {})),
        wedding_date=event.wedding_date,
        venue=event.venue,
        theme=event.theme,
        rsvp_deadline=event.rsvp_deadline,
        updated_at=event.updated_at.isoformat(),
    )
