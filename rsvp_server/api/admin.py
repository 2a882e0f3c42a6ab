"""Admin login endpoint."""

from fastapi import APIRouter, HTTPException, status

from rsvp_server.config import settings
from rsvp_server.schemas.auth import AdminLoginRequest, AdminLoginResponse
from rsvp_server.utils.security import (
    admin_gate_enabled,
    create_admin_token,
    verify_admin_passphrase,
)

router = APIRouter(tags=["admin"])


@router.post("/admin/login", response_model=AdminLoginResponse)
def admin_login(request: AdminLoginRequest):
    """Exchange the shared admin passphrase for a bearer token."""
    if not admin_gate_enabled():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Admin passphrase is not configured",
        )
    if not verify_admin_passphrase(request.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect password",
        )
    return AdminLoginResponse(
        access_token=create_admin_token(),
        expires_in=settings.admin_token_expire_minutes * 60,
    )
