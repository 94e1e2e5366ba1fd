from sqlalchemy import or_
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
from models.match import Match
from models.match_participant import MatchParticipant, MatchResult
from models.player import Player
from models.team import Team


def get_participant(db: Session, participant_id: UUID) -> Optional[MatchParticipant]:
    return db.query(MatchParticipant).filter(
        MatchParticipant.id == participant_id
    ).first()


def list_participants(db: Session, match_id: UUID) -> List[MatchParticipant]:
    return db.query(MatchParticipant).filter(
        MatchParticipant.match_id == match_id
    ).order_by(MatchParticipant.id).all()


def add_participant(
    db: Session,
    match_id: UUID,
    team_id: Optional[UUID] = None,
    player_id: Optional[UUID] = None
) -> MatchParticipant:
    """Без commit - викликається при створенні матчу"""
    db_participant = MatchParticipant(
        match_id=match_id,
        team_id=team_id,
        player_id=player_id,
        score=0,
        points_earned=0
    )
    db.add(db_participant)
    db.flush()
    return db_participant


def update_participant_score(db: Session, participant: MatchParticipant, score: int) -> MatchParticipant:
    participant.score = score
    db.commit()
    db.refresh(participant)
    return participant


def set_participant_draw(db: Session, participant: MatchParticipant, is_draw: bool) -> MatchParticipant:
    participant.result = MatchResult.DRAW if is_draw else None
    db.commit()
    db.refresh(participant)
    return participant


def write_participant_result(
    db: Session,
    participant_id: UUID,
    result: Optional[MatchResult],
    points_earned: int
) -> int:
    """Записати результат і бали учасника. Без commit - частина транзакції нарахування."""
    updated = db.query(MatchParticipant).filter(
        MatchParticipant.id == participant_id
    ).update(
        {MatchParticipant.result: result, MatchParticipant.points_earned: points_earned},
        synchronize_session="evaluate"
    )
    db.flush()
    return updated


def has_applied_results(
    db: Session,
    team_id: Optional[UUID] = None,
    player_id: Optional[UUID] = None,
    faculty_id: Optional[UUID] = None,
    game_id: Optional[UUID] = None
) -> bool:
    """Чи є учасники (за командою/гравцем/факультетом/грою) у матчах з уже нарахованими балами"""
    query = db.query(MatchParticipant.id).join(
        Match, Match.id == MatchParticipant.match_id
    ).filter(Match.points_applied_at.isnot(None))

    if team_id:
        query = query.filter(MatchParticipant.team_id == team_id)
    if player_id:
        query = query.filter(MatchParticipant.player_id == player_id)
    if game_id:
        query = query.filter(Match.game_id == game_id)
    if faculty_id:
        query = query.outerjoin(
            Team, Team.id == MatchParticipant.team_id
        ).outerjoin(
            Player, Player.id == MatchParticipant.player_id
        ).filter(or_(Team.faculty_id == faculty_id, Player.faculty_id == faculty_id))

    return query.first() is not None


def delete_participants(db: Session, match_id: UUID) -> int:
    """Без commit - заміна складу учасників виконується однією транзакцією"""
    deleted = db.query(MatchParticipant).filter(
        MatchParticipant.match_id == match_id
    ).delete(synchronize_session="fetch")
    db.flush()
    return deleted
