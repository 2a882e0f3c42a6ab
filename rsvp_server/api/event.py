"""Event settings API endpoints."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from rsvp_server.api.deps import require_admin
from rsvp_server.database import get_session
from rsvp_server.schemas.event import (
    EventSettingsResponse,
    EventSettingsUpdateRequest,
    event_to_response,
)
from rsvp_server.services.settings_service import get_event_settings, update_event_settings

router = APIRouter(tags=["settings"])


@router.get("/settings", response_model=EventSettingsResponse)
def get_settings(session: Session = Depends(get_session)):
    """Event settings, created with defaults on first read."""
    return event_to_response(get_event_settings(session))


@router.put("/settings", response_model=EventSettingsResponse, dependencies=[Depends(require_admin)])
def update_settings(request: EventSettingsUpdateRequest, session: Session = Depends(get_session)):
    """Merge the given fields into the event settings. Admin only."""
    patch = request.model_dump(exclude_unset=True)
    return event_to_response(update_event_settings(session, patch))
