"""
Сервіс для відправки WebSocket повідомлень про події спортивного тижня.
Викликається як background task після commit - відправка не впливає на відповідь.
"""
import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from models.match import MatchStatus
from schemas.points import PointsCalculationResult, LeaderboardUpdateEvent
from services.websocket_manager import websocket_manager

logger = logging.getLogger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


async def notify_leaderboard_updated(calculation: PointsCalculationResult):
    """Бали за матч нараховано - рейтинг факультетів змінився"""
    event = LeaderboardUpdateEvent(
        match_id=calculation.match_id,
        winner_faculty_id=calculation.winner_faculty_id,
        winner_faculty_name=calculation.winner_faculty_name,
        points_awarded=calculation.points_awarded,
        game_weight=calculation.game_weight,
        participant_results=calculation.participant_results,
        timestamp=_timestamp(),
    )
    await websocket_manager.broadcast(event.model_dump(mode="json"))
    logger.info(f"Sent leaderboard_update notification for match {calculation.match_id}")


async def notify_score_updated(match_id: UUID, participant_id: UUID, score: int):
    await websocket_manager.broadcast({
        "type": "score_update",
        "match_id": str(match_id),
        "participant_id": str(participant_id),
        "score": score,
        "timestamp": _timestamp(),
    })


async def notify_match_status_changed(match_id: UUID, status: MatchStatus, winner_id: Optional[UUID]):
    await websocket_manager.broadcast({
        "type": "match_status_change",
        "match_id": str(match_id),
        "status": status.value,
        "winner_id": str(winner_id) if winner_id else None,
        "timestamp": _timestamp(),
    })
    logger.info(f"Sent match_status_change notification for match {match_id}")
