from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON
from sqlmodel import Column, Field, SQLModel


class Tournament(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    tournament_date: date = Field(index=True)
    format: str  # "single" | "double" | "round_robin" | "seeding"
    court_names: List[str] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    target_type: str = Field(default="points")  # "points" | "time" (minutes)
    target_value: int = Field(default=11)

    # Bracket in wire shape (see courtside.models.bracket.Bracket.to_dict)
    bracket_json: Dict[str, Any] = Field(default_factory=dict, sa_column=Column(JSON, nullable=False))
    # Completed-match log, newest first
    log_json: List[Dict[str, Any]] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    status: str = Field(default="active")  # "active" | "completed"
    summary_json: Optional[Dict[str, Any]] = Field(default=None, sa_column=Column(JSON, nullable=True))
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        sa_column_kwargs={"onupdate": lambda: datetime.now(timezone.utc)},
    )
    completed_at: Optional[datetime] = Field(default=None)
