"""Guest model."""

import secrets
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class Guest(SQLModel, table=True):
    __tablename__ = "guests"

    id: str = Field(default_factory=lambda: f"gst_{secrets.token_hex(4)}", primary_key=True)
    guest_number: str = Field(index=True)  # not unique: numbering is read-then-increment
    name: str
    phone: str = ""
    email: str = ""
    group: str = Field(default="General")
    status: str = Field(default="pending", index=True)  # 'pending' | 'confirmed' | 'declined'
    # {attending, guests_count, message, submitted_at}; null while pending
    attendance: Optional[dict] = Field(default=None, sa_column=Column(JSON, nullable=True))
    created_by: str = Field(default="admin")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
