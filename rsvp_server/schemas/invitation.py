"""Invitation landing schemas."""

from typing import Optional

from rsvp_server.schemas.base import CamelModel
from rsvp_server.schemas.event import EventSettingsResponse
from rsvp_server.schemas.guest import GuestResponse


class InvitationOpenRequest(CamelModel):
    fingerprint: Optional[str] = None
    user_agent: Optional[str] = None


class InvitationDevice(CamelModel):
    authorized: bool
    device_count: int


class InvitationOpenResponse(CamelModel):
    guest: GuestResponse
    settings: EventSettingsResponse
    device: InvitationDevice
