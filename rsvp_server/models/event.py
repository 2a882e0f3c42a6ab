"""Event settings model (singleton row)."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel

SETTINGS_ID = "wedding"


class EventSettings(SQLModel, table=True):
    __tablename__ = "event_settings"

    id: str = Field(default=SETTINGS_ID, primary_key=True)
    couple_names: dict = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    wedding_date: str = ""
    venue: str = ""
    theme: str = "romantic"
    rsvp_deadline: str = ""
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
