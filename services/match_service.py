import logging
from datetime import datetime, timezone
from typing import List
from uuid import UUID

from sqlalchemy.orm import Session

from api.crud.game_crud import get_game
from api.crud.match_crud import create_match, get_match
from api.crud.participant_crud import (
    add_participant, delete_participants, get_participant, list_participants,
    update_participant_score, set_participant_draw
)
from api.crud.roster_crud import get_team, get_player
from core.exceptions import (
    SportsWeekException, GameNotFound, TeamNotFound, PlayerNotFound, MatchNotFound,
    ParticipantNotFound, UnauthorizedAction, InvalidMatchTransition, InvalidParticipant,
    MatchLocked
)
from core.roles import UserRole
from models.match import Match, MatchStatus, MATCH_STATUS_ORDER
from models.match_participant import MatchParticipant, MatchResult
from models.user import User
from schemas.match import MatchCreate, MatchUpdate, ParticipantInput

logger = logging.getLogger(__name__)

# Поля матчу, які може змінювати менеджер гри (решта - тільки адмін)
MANAGER_FIELDS = {"status", "winner_id"}


def ensure_can_manage_match(db: Session, match: Match, user: User, action: str = "update this match"):
    """Адмін може все, менеджер - тільки матчі своєї гри"""
    if user.role == UserRole.ADMIN:
        return
    game = get_game(db, match.game_id)
    if not game or game.manager_id != user.id:
        raise UnauthorizedAction(action)


def validate_status_transition(current: MatchStatus, requested: MatchStatus):
    """UPCOMING → LIVE → FINISHED, тільки вперед"""
    if MATCH_STATUS_ORDER[requested] < MATCH_STATUS_ORDER[current]:
        raise InvalidMatchTransition(current.value, requested.value)


def _add_participants(db: Session, match_id: UUID, participants: List[ParticipantInput]):
    for participant in participants:
        if participant.team_id and not get_team(db, participant.team_id):
            db.rollback()
            raise TeamNotFound()
        if participant.player_id and not get_player(db, participant.player_id):
            db.rollback()
            raise PlayerNotFound()
        add_participant(db, match_id, participant.team_id, participant.player_id)


def create_match_logic(db: Session, match_data: MatchCreate) -> Match:
    if not get_game(db, match_data.game_id):
        raise GameNotFound()

    match = create_match(db, match_data.game_id, match_data.start_time, match_data.venue)

    _add_participants(db, match.id, match_data.participants)

    db.commit()
    db.refresh(match)
    return match


def update_match_logic(db: Session, match: Match, match_update: MatchUpdate, user: User) -> Match:
    update_data = match_update.model_dump(exclude_unset=True)

    ensure_can_manage_match(db, match, user)
    if user.role != UserRole.ADMIN and set(update_data) - MANAGER_FIELDS:
        raise SportsWeekException("Managers can only update match status and winner", 403)

    if match.points_applied and ("status" in update_data or "winner_id" in update_data):
        raise MatchLocked("change the match result")

    new_status = update_data.get("status")
    if new_status is not None:
        validate_status_transition(match.status, new_status)

    if update_data.get("winner_id") is not None:
        entrant_ids = {p.entrant_id for p in list_participants(db, match.id)}
        if update_data["winner_id"] not in entrant_ids:
            raise InvalidParticipant("Winner must be one of the match participants")

    for field, value in update_data.items():
        setattr(match, field, value)

    if match.status == MatchStatus.FINISHED and match.finished_at is None:
        match.finished_at = datetime.now(timezone.utc)

    db.commit()
    db.refresh(match)
    logger.info(f"Match {match.id} updated: status={match.status.value}, winner={match.winner_id}")
    return match


def _get_participant_and_match(db: Session, participant_id: UUID):
    participant = get_participant(db, participant_id)
    if not participant:
        raise ParticipantNotFound()
    match = get_match(db, participant.match_id)
    if not match:
        raise MatchNotFound()
    return participant, match


def update_score_logic(db: Session, participant_id: UUID, score: int, user: User) -> MatchParticipant:
    participant, match = _get_participant_and_match(db, participant_id)
    ensure_can_manage_match(db, match, user, "update scores")

    if match.points_applied:
        raise MatchLocked("update the score")

    return update_participant_score(db, participant, score)


def set_draw_logic(db: Session, participant_id: UUID, is_draw: bool, user: User) -> MatchParticipant:
    """
    Позначити (або зняти) нічию для учасника.
    Нічия не виводиться з рахунку - тільки явна дія менеджера/адміна
    під час LIVE або після FINISHED до нарахування балів.
    """
    participant, match = _get_participant_and_match(db, participant_id)
    ensure_can_manage_match(db, match, user, "mark draws")

    if match.status == MatchStatus.UPCOMING:
        raise SportsWeekException("Draws can only be marked for live or finished matches")
    if match.points_applied:
        raise MatchLocked("mark a draw")
    if is_draw and match.winner_id is not None and participant.entrant_id == match.winner_id:
        raise InvalidParticipant("The match winner cannot be marked as a draw")

    if not is_draw and participant.result != MatchResult.DRAW:
        return participant

    return set_participant_draw(db, participant, is_draw)


def replace_participants_logic(db: Session, match: Match, participants: List[ParticipantInput]) -> Match:
    """
    Замінити склад учасників матчу (до нарахування балів).
    Попередні рахунки і позначки нічиї видаляються разом зі старими учасниками.
    """
    if match.points_applied:
        raise MatchLocked("replace participants")

    entrant_ids = {p.team_id or p.player_id for p in participants}
    if match.winner_id is not None and match.winner_id not in entrant_ids:
        raise InvalidParticipant("Winner must stay among the match participants")

    delete_participants(db, match.id)
    _add_participants(db, match.id, participants)

    db.commit()
    db.refresh(match)
    logger.info(f"Match {match.id} participants replaced ({len(participants)} entrants)")
    return match
