"""RSVP Server Database Models."""

from rsvp_server.models.guest import Guest
from rsvp_server.models.device import DeviceRegistration
from rsvp_server.models.event import EventSettings

__all__ = [
    "Guest",
    "DeviceRegistration",
    "EventSettings",
]
