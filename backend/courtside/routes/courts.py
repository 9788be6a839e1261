from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlmodel import Session

from courtside.database import get_session
from courtside.models.bracket import Bracket
from courtside.services.court_view import active_matches, assignable_matches, court_board
from courtside.utils.courts import parse_court_names
from courtside.utils.match_guards import get_tournament_or_404

router = APIRouter()


class CourtRow(BaseModel):
    court: str
    status: str  # "available" | "in_play"
    match: Optional[Dict[str, Any]] = None


class CourtOverview(BaseModel):
    courts: List[CourtRow]
    active: List[Dict[str, Any]]
    assignable: List[Dict[str, Any]]


def build_court_overview(bracket: Bracket, court_names: List[str]) -> CourtOverview:
    return CourtOverview(
        courts=[CourtRow(**row) for row in court_board(bracket, court_names)],
        active=[m.to_dict() for m in active_matches(bracket)],
        assignable=[m.to_dict() for m in assignable_matches(bracket)],
    )


@router.get("/tournaments/{tournament_id}/courts", response_model=CourtOverview)
def get_courts(tournament_id: int, session: Session = Depends(get_session)) -> CourtOverview:
    """Per-court occupancy, matches in play, and pending matches ready for a court"""
    tournament = get_tournament_or_404(session, tournament_id)
    bracket = Bracket.from_dict(tournament.bracket_json)
    return build_court_overview(bracket, parse_court_names(tournament.court_names))
