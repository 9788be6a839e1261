"""Club player roster. Separate from per-date signups."""
import logging
from typing import List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict, field_validator
from sqlmodel import Session, select

from courtside.database import get_session
from courtside.models.player import Player

logger = logging.getLogger(__name__)

router = APIRouter()


class PlayerCreate(BaseModel):
    name: str
    rating: Optional[float] = None
    notes: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("name is required")
        return v.strip()

    @field_validator("rating")
    @classmethod
    def validate_rating(cls, v):
        if v is not None and v < 0:
            raise ValueError("rating must be >= 0")
        return v


class PlayerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    rating: Optional[float] = None
    notes: str


@router.get("/players", response_model=List[PlayerResponse])
def list_players(session: Session = Depends(get_session)):
    """Roster in name order"""
    return session.exec(select(Player).order_by(Player.name, Player.id)).all()


@router.post("/players", response_model=PlayerResponse, status_code=201)
def add_player(payload: PlayerCreate, session: Session = Depends(get_session)):
    player = Player(**payload.model_dump())
    session.add(player)
    session.commit()
    session.refresh(player)
    logger.info("Added player %s (%r)", player.id, player.name)
    return player
