import logging
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, field_validator
from sqlmodel import Session, select

from courtside.database import get_session
from courtside.models.bracket import Bracket, TournamentFormat
from courtside.models.signup import Signup
from courtside.models.tournament import Tournament
from courtside.services.summary_service import TournamentSummary, build_summary
from courtside.utils.courts import default_court_names, parse_court_names
from courtside.utils.match_generation import generate_bracket
from courtside.utils.match_guards import (
    get_tournament_or_404,
    require_active_tournament,
    require_bracket_generated,
    require_entrant_count,
    require_unique_entrants,
)

logger = logging.getLogger(__name__)

router = APIRouter()

TARGET_TYPES = ("points", "time")


class TournamentCreate(BaseModel):
    name: str = "Tournament"
    tournament_date: date
    format: str = TournamentFormat.SINGLE.value
    court_names: Optional[List[str]] = None
    target_type: str = "points"
    target_value: int = 11
    # Explicit entrant labels; when omitted the date's checked-in signups are used
    entrants: Optional[List[str]] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        v = (v or "").strip()
        return v or "Tournament"

    @field_validator("target_type")
    @classmethod
    def validate_target_type(cls, v):
        if v not in TARGET_TYPES:
            raise ValueError(f"target_type must be one of {', '.join(TARGET_TYPES)}")
        return v

    @field_validator("target_value")
    @classmethod
    def validate_target_value(cls, v):
        if v < 1:
            raise ValueError("target_value must be >= 1")
        return v

    @field_validator("court_names", mode="before")
    @classmethod
    def normalize_court_names(cls, v):
        if v is None:
            return None
        return parse_court_names(v)

    @field_validator("entrants")
    @classmethod
    def validate_entrants(cls, v):
        if v is None:
            return None
        return [e.strip() for e in v if e and e.strip()]


class TournamentResponse(BaseModel):
    id: int
    name: str
    tournament_date: date
    format: str
    court_names: List[str]
    target_type: str
    target_value: int
    status: str
    rounds: List[Dict[str, Any]]
    created_at: datetime
    completed_at: Optional[datetime] = None


class MatchLogEntryResponse(BaseModel):
    ts: datetime
    match_id: int
    winner: str
    score: Optional[str] = None


def to_tournament_response(t: Tournament) -> TournamentResponse:
    return TournamentResponse(
        id=t.id,
        name=t.name,
        tournament_date=t.tournament_date,
        format=t.format,
        court_names=parse_court_names(t.court_names),
        target_type=t.target_type,
        target_value=t.target_value,
        status=t.status,
        rounds=(t.bracket_json or {}).get("rounds", []),
        created_at=t.created_at,
        completed_at=t.completed_at,
    )


def checked_in_entrants(session: Session, tournament_date: date) -> List[str]:
    """Names of checked-in signups for a date, in name order."""
    signups = session.exec(
        select(Signup)
        .where(Signup.tournament_date == tournament_date, Signup.checked_in == True)  # noqa: E712
        .order_by(Signup.name, Signup.id)
    ).all()
    return [s.name for s in signups]


@router.get("/tournaments", response_model=List[TournamentResponse])
def list_tournaments(session: Session = Depends(get_session)):
    """List tournaments, newest date first"""
    tournaments = session.exec(
        select(Tournament).order_by(Tournament.tournament_date.desc(), Tournament.id.desc())
    ).all()
    return [to_tournament_response(t) for t in tournaments]


@router.post("/tournaments", response_model=TournamentResponse, status_code=201)
def create_tournament(payload: TournamentCreate, session: Session = Depends(get_session)):
    """Create a tournament and generate its bracket from the entrant list"""
    entrants = payload.entrants
    if entrants is None:
        entrants = checked_in_entrants(session, payload.tournament_date)
    require_entrant_count(entrants)
    require_unique_entrants(entrants)

    bracket = generate_bracket(payload.format, entrants)
    require_bracket_generated(bracket, payload.format)

    tournament = Tournament(
        name=payload.name,
        tournament_date=payload.tournament_date,
        format=payload.format,
        court_names=payload.court_names or default_court_names(),
        target_type=payload.target_type,
        target_value=payload.target_value,
        bracket_json=bracket.to_dict(),
        log_json=[],
    )
    session.add(tournament)
    session.commit()
    session.refresh(tournament)

    logger.info(
        "Created tournament %s (%s): %d entrants, %d rounds, %d matches",
        tournament.id,
        tournament.format,
        len(entrants),
        len(bracket.rounds),
        bracket.match_count,
    )
    return to_tournament_response(tournament)


@router.get("/tournaments/{tournament_id}", response_model=TournamentResponse)
def get_tournament(tournament_id: int, session: Session = Depends(get_session)):
    """Get a tournament by ID"""
    return to_tournament_response(get_tournament_or_404(session, tournament_id))


@router.get("/tournaments/{tournament_id}/log", response_model=List[MatchLogEntryResponse])
def get_match_log(tournament_id: int, session: Session = Depends(get_session)):
    """Completed-match log, newest first"""
    tournament = get_tournament_or_404(session, tournament_id)
    return tournament.log_json or []


@router.get("/tournaments/{tournament_id}/summary", response_model=TournamentSummary)
def get_summary(tournament_id: int, session: Session = Depends(get_session)):
    """Stored summary for completed tournaments; computed from the live bracket otherwise"""
    tournament = get_tournament_or_404(session, tournament_id)
    if tournament.summary_json:
        return TournamentSummary(**tournament.summary_json["summary"])
    return build_summary(tournament.format, Bracket.from_dict(tournament.bracket_json))


@router.post("/tournaments/{tournament_id}/complete", response_model=TournamentResponse)
def complete_tournament(tournament_id: int, session: Session = Depends(get_session)):
    """Freeze the tournament and archive its summary, rounds and log"""
    tournament = require_active_tournament(session, tournament_id)
    bracket = Bracket.from_dict(tournament.bracket_json)
    summary = build_summary(tournament.format, bracket)

    tournament.summary_json = {
        "summary": summary.model_dump(mode="json"),
        "rounds": bracket.to_dict()["rounds"],
        "log": list(tournament.log_json or []),
    }
    tournament.status = "completed"
    tournament.completed_at = datetime.now(timezone.utc)
    tournament.updated_at = datetime.now(timezone.utc)
    session.add(tournament)
    session.commit()
    session.refresh(tournament)

    logger.info("Completed tournament %s; champion=%r", tournament.id, summary.champion)
    return to_tournament_response(tournament)
