from fastapi import APIRouter, BackgroundTasks, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from api.deps.db import get_db
from api.crud.match_crud import get_match, get_match_with_participants, list_matches, delete_match
from core.auth import get_admin, get_manager
from core.exceptions import MatchNotFound, MatchLocked
from models.match import MatchStatus
from models.user import User
from schemas.match import (
    MatchCreate, MatchUpdate, MatchRead, MatchWithParticipants, ParticipantsReplace,
    ParticipantRead, ScoreUpdate, DrawUpdate
)
from services import match_service
from services.notification_service import notify_score_updated, notify_match_status_changed

router = APIRouter(prefix="/matches", tags=["Matches"])


@router.get("", response_model=List[MatchRead])
async def get_matches(
    status: Optional[MatchStatus] = None,
    game_id: Optional[UUID] = None,
    db: Session = Depends(get_db)
):
    """Fixtures, optionally filtered by status or game (public)"""
    return list_matches(db, status=status, game_id=game_id)


@router.get("/{match_id}", response_model=MatchWithParticipants)
async def get_match_details(match_id: UUID, db: Session = Depends(get_db)):
    match = get_match_with_participants(db, match_id)
    if not match:
        raise MatchNotFound()
    return match


@router.post("", response_model=MatchWithParticipants, status_code=status.HTTP_201_CREATED)
async def create_match(
    match_data: MatchCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    match = match_service.create_match_logic(db, match_data)
    return get_match_with_participants(db, match.id)


@router.patch("/{match_id}", response_model=MatchRead)
async def update_match(
    match_id: UUID,
    match_update: MatchUpdate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_manager)
):
    """Update match. Managers of the game may change only status and winner."""
    match = get_match(db, match_id)
    if not match:
        raise MatchNotFound()

    previous = (match.status, match.winner_id)
    match = match_service.update_match_logic(db, match, match_update, current_user)

    if (match.status, match.winner_id) != previous:
        background_tasks.add_task(notify_match_status_changed, match.id, match.status, match.winner_id)
    return match


@router.put("/{match_id}/participants", response_model=MatchWithParticipants)
async def replace_participants(
    match_id: UUID,
    replacement: ParticipantsReplace,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    """Replace the participant list of a match whose points are not applied yet"""
    match = get_match(db, match_id)
    if not match:
        raise MatchNotFound()
    match_service.replace_participants_logic(db, match, replacement.participants)
    return get_match_with_participants(db, match_id)


@router.delete("/{match_id}")
async def remove_match(
    match_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    match = get_match(db, match_id)
    if not match:
        raise MatchNotFound()
    if match.points_applied:
        raise MatchLocked("delete the match")
    delete_match(db, match)
    return {"message": "Match deleted successfully"}


@router.put("/participants/{participant_id}/score", response_model=ParticipantRead)
async def update_participant_score(
    participant_id: UUID,
    score_update: ScoreUpdate,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_manager)
):
    """Live score update by the game manager"""
    participant = match_service.update_score_logic(db, participant_id, score_update.score, current_user)
    background_tasks.add_task(notify_score_updated, participant.match_id, participant.id, participant.score)
    return participant


@router.put("/participants/{participant_id}/draw", response_model=ParticipantRead)
async def mark_participant_draw(
    participant_id: UUID,
    draw_update: DrawUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_manager)
):
    """Mark (or unmark) a participant as having drawn the match"""
    return match_service.set_draw_logic(db, participant_id, draw_update.is_draw, current_user)
