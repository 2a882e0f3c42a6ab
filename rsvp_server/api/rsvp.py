"""RSVP submission and statistics endpoints."""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from rsvp_server.api.deps import require_admin
from rsvp_server.database import get_session
from rsvp_server.schemas.guest import RSVPRequest, RSVPResponse, StatsResponse
from rsvp_server.services import guest_service
from rsvp_server.services.errors import ValidationError
from rsvp_server.services.stats_service import get_stats

router = APIRouter(tags=["rsvp"])


@router.post("/rsvp", response_model=RSVPResponse)
def submit_rsvp(request: RSVPRequest, session: Session = Depends(get_session)):
    """Submit or change an RSVP; the guest number comes in the body."""
    if not request.guest_number:
        raise ValidationError("Guest number is required")

    guest_service.update_rsvp(session, request.guest_number, request.to_payload())
    return RSVPResponse(success=True, message="RSVP submitted successfully")


@router.get("/rsvp", response_model=StatsResponse, dependencies=[Depends(require_admin)])
def rsvp_stats(session: Session = Depends(get_session)):
    return StatsResponse(**get_stats(session))


@router.get("/stats", response_model=StatsResponse, dependencies=[Depends(require_admin)])
def stats(session: Session = Depends(get_session)):
    """Response counts and confirmed headcount. Admin only."""
    return StatsResponse(**get_stats(session))
