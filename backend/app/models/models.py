from datetime import datetime, timezone
from sqlmodel import SQLModel, Field


class Preference(SQLModel, table=True):
    """A single persisted user interface preference, stored as key/value."""

    key: str = Field(primary_key=True)
    value: str
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
