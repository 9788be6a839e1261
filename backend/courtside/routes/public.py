"""Public read-only board (no auth): the active tournament's bracket and courts."""
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel
from sqlmodel import Session, select

from courtside.database import get_session
from courtside.models.bracket import Bracket
from courtside.models.tournament import Tournament
from courtside.routes.courts import CourtOverview, build_court_overview
from courtside.routes.tournaments import MatchLogEntryResponse, TournamentResponse, to_tournament_response
from courtside.utils.courts import parse_court_names

router = APIRouter()


class PublicBoard(BaseModel):
    tournament: TournamentResponse
    courts: CourtOverview
    log: List[MatchLogEntryResponse]


@router.get("/public/current", response_model=PublicBoard)
def get_current_board(session: Session = Depends(get_session)) -> PublicBoard:
    """Most recently created active tournament"""
    tournament = session.exec(
        select(Tournament).where(Tournament.status == "active").order_by(Tournament.id.desc())
    ).first()
    if not tournament:
        raise HTTPException(status_code=404, detail="No active tournament")

    bracket = Bracket.from_dict(tournament.bracket_json)
    return PublicBoard(
        tournament=to_tournament_response(tournament),
        courts=build_court_overview(bracket, parse_court_names(tournament.court_names)),
        log=[MatchLogEntryResponse(**entry) for entry in (tournament.log_json or [])],
    )
