"""Invitation landing endpoint: the guest page's load sequence in one call."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from rsvp_server.database import get_session
from rsvp_server.schemas.event import event_to_response
from rsvp_server.schemas.guest import guest_to_response
from rsvp_server.schemas.invitation import (
    InvitationDevice,
    InvitationOpenRequest,
    InvitationOpenResponse,
)
from rsvp_server.services import guest_service
from rsvp_server.services.device_service import register_device
from rsvp_server.services.errors import CapacityExceeded, NotFound, ValidationError
from rsvp_server.services.settings_service import get_event_settings
from rsvp_server.utils.invite import is_valid_guest_number

router = APIRouter(tags=["invitations"])


@router.post("/invitations/{guest_number}/open", response_model=InvitationOpenResponse)
def open_invitation(
    guest_number: str,
    request: InvitationOpenRequest,
    session: Session = Depends(get_session),
):
    """Check the link, gate the device, then load the guest and event details."""
    if not is_valid_guest_number(guest_number):
        raise ValidationError("Invalid guest number")
    if not request.fingerprint:
        raise ValidationError("Device fingerprint is required")

    device = register_device(session, guest_number, request.fingerprint, request.user_agent or "")
    if not device["authorized"]:
        raise CapacityExceeded(device["message"], device["device_count"])

    guest = guest_service.find_guest_by_number(session, guest_number)
    if not guest:
        raise NotFound("Guest not found")

    return InvitationOpenResponse(
        guest=guest_to_response(guest),
        settings=event_to_response(get_event_settings(session)),
        device=InvitationDevice(authorized=True, device_count=device["device_count"]),
    )
