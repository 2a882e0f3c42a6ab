"""Invitation links and messages."""

import re
from typing import Optional
from urllib.parse import quote

from rsvp_server.config import settings

_GUEST_NUMBER_RE = re.compile(r"^[0-9]{4,}$")


def is_valid_guest_number(guest_number: str) -> bool:
    """Guest numbers in links are all digits, at least 4 long."""
    return bool(_GUEST_NUMBER_RE.match(guest_number or ""))


def invite_link(guest_number: str) -> str:
    return f"{settings.app_url.rstrip('/')}/{guest_number}"


def invite_message(name: str, link: str) -> str:
    return (
        f"مرحباً {name}،\n\n"
        "أنت مدعو لحضور حفل زفافنا!\n\n"
        "يمكنك مشاهدة الدعوة والرد عليها من خلال الرابط التالي:\n"
        f"{link}\n\n"
        "نتمنى مشاركتك فرحتنا 💐"
    )


def whatsapp_url(phone: str, message: str) -> Optional[str]:
    """wa.me share link, or None when no phone is recorded."""
    digits = re.sub(r"[^0-9]", "", phone or "")
    if not digits:
        return None
    return f"https://wa.me/{digits}?text={quote(message)}"
