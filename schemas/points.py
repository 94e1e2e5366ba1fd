from pydantic import BaseModel
from typing import Optional, List
from uuid import UUID
from datetime import datetime
from models.match_participant import MatchResult
from schemas.faculty import FacultyRead


class ParticipantPoints(BaseModel):
    participant_id: UUID
    team_id: Optional[UUID] = None
    player_id: Optional[UUID] = None
    faculty_id: UUID
    score: int
    result: MatchResult
    points_earned: int


class PointsCalculationResult(BaseModel):
    """Результат розрахунку балів за матч (нічого не змінює в БД до apply_points)"""
    match_id: UUID
    game_id: UUID
    game_weight: int
    winner_faculty_id: Optional[UUID] = None  # None тільки для матчу, де всі зіграли внічию
    winner_faculty_name: Optional[str] = None
    points_awarded: int
    participant_results: List[ParticipantPoints]


class DetailedLeaderboardEntry(BaseModel):
    faculty: FacultyRead
    wins: int
    losses: int
    draws: int
    total_matches: int
    points_per_match: float


class HistoryEntry(BaseModel):
    match_id: UUID
    game_name: str
    game_weight: int
    participant_name: str
    result: str
    points_earned: int
    completed_at: Optional[datetime] = None


class LeaderboardUpdateEvent(BaseModel):
    type: str = "leaderboard_update"
    match_id: UUID
    winner_faculty_id: Optional[UUID] = None
    winner_faculty_name: Optional[str] = None
    points_awarded: int
    game_weight: int
    participant_results: List[ParticipantPoints]
    timestamp: str
