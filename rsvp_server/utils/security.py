"""Security utilities: admin passphrase check and admin JWT tokens."""

import secrets
from datetime import datetime, timedelta, timezone

import jwt

from rsvp_server.config import settings


# --- Admin passphrase ---

def admin_gate_enabled() -> bool:
    return bool(settings.admin_passphrase)


def verify_admin_passphrase(password: str) -> bool:
    if not settings.admin_passphrase:
        return False
    return secrets.compare_digest(password.encode(), settings.admin_passphrase.encode())


# --- JWT Tokens ---

def create_admin_token() -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=settings.admin_token_expire_minutes)
    payload = {
        "sub": "admin",
        "role": "admin",
        "exp": expire,
        "type": "access",
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Decode and validate a JWT token. Raises jwt.PyJWTError on failure."""
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
