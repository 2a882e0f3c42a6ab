"""Device registration schemas."""

from typing import Optional

from rsvp_server.schemas.base import CamelModel


class DeviceRegisterRequest(CamelModel):
    fingerprint: Optional[str] = None
    user_agent: Optional[str] = None
    guest_number: str = "default"


class DeviceRegisterResponse(CamelModel):
    authorized: bool
    device_count: int
    is_new_registration: Optional[bool] = None
    is_registered: Optional[bool] = None
    message: str


class DeviceCountResponse(CamelModel):
    device_count: int
    guest_number: str
