"""Device registration model."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class DeviceRegistration(SQLModel, table=True):
    __tablename__ = "device_registrations"

    guest_number: str = Field(primary_key=True)
    # [{fingerprint, user_agent, registered_at, last_seen}], unique by fingerprint
    devices: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    total_devices: int = Field(default=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
