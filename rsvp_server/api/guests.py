"""Guest list API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from rsvp_server.api.deps import require_admin
from rsvp_server.database import get_session
from rsvp_server.schemas.guest import (
    GuestBulkCreateRequest,
    GuestBulkCreateResponse,
    GuestCreateRequest,
    GuestCreateResponse,
    GuestDeleteResponse,
    GuestResponse,
    InvitationResponse,
    RSVPRequest,
    RSVPResponse,
    guest_to_response,
)
from rsvp_server.services import guest_service
from rsvp_server.services.errors import NotFound, ValidationError
from rsvp_server.utils.invite import invite_link, invite_message, whatsapp_url

router = APIRouter(tags=["guests"])


@router.get("/guests", response_model=list[GuestResponse], dependencies=[Depends(require_admin)])
def list_guests(
    status: Optional[str] = Query(default=None),
    session: Session = Depends(get_session),
):
    """List guests, newest first. Admin only."""
    guests = guest_service.find_all_guests(session, status=status)
    return [guest_to_response(g) for g in guests]


@router.post("/guests", response_model=GuestCreateResponse, dependencies=[Depends(require_admin)])
def create_guest(request: GuestCreateRequest, session: Session = Depends(get_session)):
    """Add a guest and allocate their guest number. Admin only."""
    guest = guest_service.create_guest(session, request.model_dump())
    return GuestCreateResponse(
        success=True,
        guest_number=guest.guest_number,
        guest=guest_to_response(guest),
    )


@router.post("/guests/bulk", response_model=GuestBulkCreateResponse, dependencies=[Depends(require_admin)])
def bulk_create_guests(request: GuestBulkCreateRequest, session: Session = Depends(get_session)):
    """Add many guests at once, from a list or one name per line. Admin only."""
    names = list(request.names or [])
    if request.text:
        names.extend(request.text.splitlines())
    if not any(n.strip() for n in names):
        raise ValidationError("No guest names given")

    created, failed = guest_service.create_guests_bulk(session, names, group=request.group or "General")
    return GuestBulkCreateResponse(
        success=not failed,
        created=[guest_to_response(g) for g in created],
        failed=failed,
    )


@router.get("/guests/{guest_number}", response_model=GuestResponse)
def get_guest(guest_number: str, session: Session = Depends(get_session)):
    """Fetch one guest by their guest number."""
    guest = guest_service.find_guest_by_number(session, guest_number)
    if not guest:
        raise NotFound("Guest not found")
    return guest_to_response(guest)


@router.put("/guests/{guest_number}", response_model=RSVPResponse)
def update_guest_rsvp(
    guest_number: str,
    request: RSVPRequest,
    session: Session = Depends(get_session),
):
    """Submit or change the RSVP for the guest in the path."""
    guest_service.update_rsvp(session, guest_number, request.to_payload())
    return RSVPResponse(success=True, message="RSVP updated successfully")


@router.delete("/guests/{guest_number}", response_model=GuestDeleteResponse, dependencies=[Depends(require_admin)])
def delete_guest(guest_number: str, session: Session = Depends(get_session)):
    """Delete a guest and their device registrations. Admin only."""
    result = guest_service.delete_guest_by_number(session, guest_number)
    if result is None:
        raise NotFound("Guest not found")
    return GuestDeleteResponse(**result)


@router.get(
    "/guests/{guest_number}/invitation",
    response_model=InvitationResponse,
    dependencies=[Depends(require_admin)],
)
def get_invitation(guest_number: str, session: Session = Depends(get_session)):
    """Invitation link and share text for a guest. Admin only."""
    guest = guest_service.find_guest_by_number(session, guest_number)
    if not guest:
        raise NotFound("Guest not found")

    link = invite_link(guest.guest_number)
    message = invite_message(guest.name, link)
    return InvitationResponse(
        guest_number=guest.guest_number,
        link=link,
        message=message,
        whatsapp_url=whatsapp_url(guest.phone, message),
    )
