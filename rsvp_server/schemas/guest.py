"""Guest and RSVP request/response schemas."""

from typing import Any, Optional

from rsvp_server.models.guest import Guest
from rsvp_server.schemas.base import CamelModel


class GuestCreateRequest(CamelModel):
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    group: Optional[str] = None


class GuestBulkCreateRequest(CamelModel):
    names: Optional[list[str]] = None
    text: Optional[str] = None  # one name per line
    group: Optional[str] = None


class AttendanceResponse(CamelModel):
    attending: bool
    guests_count: Optional[int] = None
    message: str = ""
    submitted_at: Optional[str] = None


class GuestResponse(CamelModel):
    id: str
    guest_number: str
    name: str
    phone: str
    email: str
    group: str
    status: str  # 'pending' | 'confirmed' | 'declined'
    attendance: Optional[AttendanceResponse]
    created_by: str
    created_at: str
    updated_at: str


class GuestCreateResponse(CamelModel):
    success: bool
    guest_number: str
    guest: GuestResponse


class GuestBulkCreateResponse(CamelModel):
    success: bool
    created: list[GuestResponse]
    failed: list[str]


class GuestDeleteResponse(CamelModel):
    success: bool
    guest_number: str
    deleted_guest: str


class InvitationResponse(CamelModel):
    guest_number: str
    link: str
    message: str
    whatsapp_url: Optional[str]


class RSVPRequest(CamelModel):
    guest_number: Optional[str] = None
    name: Optional[str] = None
    # Loose types here; the RSVP state machine does the checking
    attending: Any = None
    guests_count: Any = None
    message: Optional[str] = None

    def to_payload(self) -> dict:
        """RSVP payload with the caller default applied: accepting guests count 1 unless told otherwise."""
        guests_count = self.guests_count
        if self.attending is True and guests_count is None:
            guests_count = 1
        return {
            "attending": self.attending,
            "guests_count": guests_count,
            "message": self.message or "",
        }


class RSVPResponse(CamelModel):
    success: bool
    message: str


class StatsResponse(CamelModel):
    total: int
    confirmed: int
    declined: int
    pending: int
    total_guests: int


def guest_to_response(guest: Guest) -> GuestResponse:
    attendance = None
    if guest.attendance is not None:
        attendance = AttendanceResponse(
            attending=guest.attendance.get("attending", False),
            guests_count=guest.attendance.get("guests_count"),
            message=guest.attendance.get("message", ""),
            submitted_at=guest.attendance.get("submitted_at"),
        )
    return GuestResponse(
        id=guest.id,
        guest_number=guest.guest_number,
        name=guest.name,
        phone=guest.phone,
        email=guest.email,
        group=guest.group,
        status=guest.status,
        attendance=attendance,
        created_by=guest.created_by,
        created_at=guest.created_at.isoformat(),
        updated_at=guest.updated_at.isoformat(),
    )
