"""
Signup intake and check-in.

Checked-in signups for a date are the default entrant list when a tournament
is created for that date (see routes.tournaments).
"""
import logging
from datetime import date, datetime, timezone
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, field_validator
from sqlmodel import Session, select

from courtside.database import get_session
from courtside.models.signup import Signup, SignupDay

logger = logging.getLogger(__name__)

router = APIRouter()

SKILL_LEVELS = (1, 2, 3, 4)


def _validate_skill(v: Optional[int]) -> Optional[int]:
    if v is not None and v not in SKILL_LEVELS:
        raise ValueError("skill must be between 1 and 4")
    return v


class SignupCreate(BaseModel):
    name: str
    contact: Optional[str] = None
    tournament_date: date
    skill: int = 2

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if not v or not v.strip():
            raise ValueError("name is required")
        return v.strip()

    @field_validator("skill")
    @classmethod
    def validate_skill(cls, v):
        return _validate_skill(v)


class SignupUpdate(BaseModel):
    checked_in: Optional[bool] = None
    skill: Optional[int] = None

    @field_validator("skill")
    @classmethod
    def validate_skill(cls, v):
        return _validate_skill(v)


class SignupResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    contact: Optional[str]
    tournament_date: date
    skill: int
    checked_in: bool


class SignupStatus(BaseModel):
    tournament_date: date
    closed: bool


class SignupDuplicate(BaseModel):
    from_date: date
    to_date: date


def is_signup_closed(session: Session, tournament_date: date) -> bool:
    day = session.exec(select(SignupDay).where(SignupDay.tournament_date == tournament_date)).first()
    return bool(day and day.is_closed)


def _list_signups(session: Session, tournament_date: date, checked_in_only: bool = False) -> List[Signup]:
    query = select(Signup).where(Signup.tournament_date == tournament_date)
    if checked_in_only:
        query = query.where(Signup.checked_in == True)  # noqa: E712
    return session.exec(query.order_by(Signup.name, Signup.id)).all()


@router.post("/signups", response_model=SignupResponse, status_code=201)
def create_signup(payload: SignupCreate, session: Session = Depends(get_session)):
    """Public signup for a tournament date"""
    if is_signup_closed(session, payload.tournament_date):
        raise HTTPException(
            status_code=409,
            detail=f"SIGNUP_CLOSED: Signup for {payload.tournament_date.isoformat()} is closed.",
        )
    signup = Signup(**payload.model_dump())
    session.add(signup)
    session.commit()
    session.refresh(signup)
    return signup


@router.get("/signups", response_model=List[SignupResponse])
def list_signups(tournament_date: date = Query(..., alias="date"), session: Session = Depends(get_session)):
    """All signups for a date, name order"""
    return _list_signups(session, tournament_date)


@router.get("/signups/checked-in", response_model=List[SignupResponse])
def list_checked_in(tournament_date: date = Query(..., alias="date"), session: Session = Depends(get_session)):
    """Checked-in signups for a date, name order"""
    return _list_signups(session, tournament_date, checked_in_only=True)


@router.get("/signups/status", response_model=SignupStatus)
def get_signup_status(tournament_date: date = Query(..., alias="date"), session: Session = Depends(get_session)):
    return SignupStatus(tournament_date=tournament_date, closed=is_signup_closed(session, tournament_date))


@router.put("/signups/status", response_model=SignupStatus)
def set_signup_status(payload: SignupStatus, session: Session = Depends(get_session)):
    """Open or close signup for a date"""
    day = session.exec(select(SignupDay).where(SignupDay.tournament_date == payload.tournament_date)).first()
    if day is None:
        day = SignupDay(tournament_date=payload.tournament_date)
    day.is_closed = payload.closed
    day.updated_at = datetime.now(timezone.utc)
    session.add(day)
    session.commit()
    logger.info("Signup for %s %s", payload.tournament_date, "closed" if payload.closed else "opened")
    return SignupStatus(tournament_date=payload.tournament_date, closed=day.is_closed)


@router.patch("/signups/{signup_id}", response_model=SignupResponse)
def update_signup(signup_id: int, payload: SignupUpdate, session: Session = Depends(get_session)):
    """Toggle check-in and/or change skill level"""
    signup = session.get(Signup, signup_id)
    if not signup:
        raise HTTPException(status_code=404, detail="Signup not found")

    update_data = payload.model_dump(exclude_unset=True, exclude_none=True)
    for field, value in update_data.items():
        setattr(signup, field, value)

    session.add(signup)
    session.commit()
    session.refresh(signup)
    return signup


@router.post("/signups/duplicate", response_model=List[SignupResponse], status_code=201)
def duplicate_signups(payload: SignupDuplicate, session: Session = Depends(get_session)):
    """Copy a date's signups to another date; copies start not checked in"""
    copies = []
    for source in _list_signups(session, payload.from_date):
        copy = Signup(
            name=source.name,
            contact=source.contact,
            tournament_date=payload.to_date,
            skill=source.skill,
            checked_in=False,
        )
        session.add(copy)
        copies.append(copy)
    session.commit()
    for copy in copies:
        session.refresh(copy)

    logger.info("Duplicated %d signups from %s to %s", len(copies), payload.from_date, payload.to_date)
    return copies
