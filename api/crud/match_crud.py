from sqlalchemy.orm import Session, selectinload
from typing import List, Optional
from uuid import UUID
from datetime import datetime
from models.match import Match, MatchStatus


def get_match(db: Session, match_id: UUID) -> Optional[Match]:
    return db.query(Match).filter(Match.id == match_id).first()


def get_match_with_participants(db: Session, match_id: UUID) -> Optional[Match]:
    return db.query(Match).options(
        selectinload(Match.participants)
    ).filter(Match.id == match_id).first()


def list_matches(
    db: Session,
    status: Optional[MatchStatus] = None,
    game_id: Optional[UUID] = None
) -> List[Match]:
    query = db.query(Match)
    if status:
        query = query.filter(Match.status == status)
    if game_id:
        query = query.filter(Match.game_id == game_id)
    return query.order_by(Match.start_time).all()


def create_match(db: Session, game_id: UUID, start_time: datetime, venue: str) -> Match:
    """Без commit - учасників додають в тій самій транзакції"""
    db_match = Match(
        game_id=game_id,
        start_time=start_time,
        venue=venue,
        status=MatchStatus.UPCOMING
    )
    db.add(db_match)
    db.flush()
    return db_match


def delete_match(db: Session, match: Match):
    db.delete(match)
    db.commit()


def claim_points_application(db: Session, match_id: UUID, applied_at: datetime) -> bool:
    """
    Позначити матч як "бали нараховано", тільки якщо цього ще не зроблено.
    Умовний UPDATE - з двох одночасних викликів виграє лише один.
    """
    claimed = db.query(Match).filter(
        Match.id == match_id,
        Match.points_applied_at.is_(None)
    ).update({Match.points_applied_at: applied_at}, synchronize_session="fetch")
    return claimed == 1


def release_points_application(db: Session, match_id: UUID) -> bool:
    released = db.query(Match).filter(
        Match.id == match_id,
        Match.points_applied_at.isnot(None)
    ).update({Match.points_applied_at: None}, synchronize_session="fetch")
    return released == 1
