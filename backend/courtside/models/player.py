from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class Player(SQLModel, table=True):
    """Standing club roster, independent of any tournament date."""

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    rating: Optional[float] = Field(default=None)
    notes: str = Field(default="")
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
