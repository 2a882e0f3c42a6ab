"""Device registration API endpoints."""

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from rsvp_server.database import get_session
from rsvp_server.schemas.device import (
    DeviceCountResponse,
    DeviceRegisterRequest,
    DeviceRegisterResponse,
)
from rsvp_server.services.device_service import get_device_count, register_device
from rsvp_server.services.errors import CapacityExceeded, ValidationError

router = APIRouter(prefix="/device", tags=["devices"])


@router.post("/register", response_model=DeviceRegisterResponse, response_model_exclude_none=True)
def device_register(request: DeviceRegisterRequest, session: Session = Depends(get_session)):
    """Register this device against an invitation link. 403 once the link has its maximum devices."""
    if not request.fingerprint:
        raise ValidationError("Device fingerprint is required")

    result = register_device(
        session,
        request.guest_number,
        request.fingerprint,
        request.user_agent or "",
    )
    if not result["authorized"]:
        raise CapacityExceeded(result["message"], result["device_count"])
    return DeviceRegisterResponse(**result)


@router.get("/register", response_model=DeviceCountResponse)
def device_count(
    guest_number: str = Query(default="default", alias="guestNumber"),
    session: Session = Depends(get_session),
):
    return DeviceCountResponse(
        device_count=get_device_count(session, guest_number),
        guest_number=guest_number,
    )
