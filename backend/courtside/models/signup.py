from datetime import date, datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class Signup(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    contact: Optional[str] = Field(default=None)
    tournament_date: date = Field(index=True)
    skill: int = Field(default=2)  # 1..4
    checked_in: bool = Field(default=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class SignupDay(SQLModel, table=True):
    """Per-date signup window. A missing row means signup is open."""

    __tablename__ = "signupday"

    id: Optional[int] = Field(default=None, primary_key=True)
    tournament_date: date = Field(index=True, unique=True)
    is_closed: bool = Field(default=False)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
