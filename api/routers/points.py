from fastapi import APIRouter, BackgroundTasks, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from api.deps.db import get_db
from api.crud.faculty_crud import get_faculty
from core.auth import get_admin
from core.exceptions import FacultyNotFound
from models.user import User
from schemas.faculty import FacultyRead
from schemas.points import PointsCalculationResult, DetailedLeaderboardEntry, HistoryEntry
from services import points_service, leaderboard_service
from services.notification_service import notify_leaderboard_updated

router = APIRouter(prefix="/points", tags=["Points"])

NOT_APPLICABLE_DETAIL = "Match is not finished or not found"


def not_applicable_response() -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"detail": NOT_APPLICABLE_DETAIL, "type": "not_applicable"}
    )


@router.get("/leaderboard", response_model=List[FacultyRead])
async def get_leaderboard(db: Session = Depends(get_db)):
    """Faculty leaderboard sorted by total points (public)"""
    return leaderboard_service.get_leaderboard(db)


@router.get("/leaderboard/detailed", response_model=List[DetailedLeaderboardEntry])
async def get_detailed_leaderboard(db: Session = Depends(get_db)):
    """Leaderboard with win/loss/draw statistics (public)"""
    return leaderboard_service.get_detailed_leaderboard(db)


@router.get("/faculty/{faculty_id}/history", response_model=List[HistoryEntry])
async def get_faculty_history(faculty_id: UUID, db: Session = Depends(get_db)):
    """Points history for a faculty, most recent first (public)"""
    if not get_faculty(db, faculty_id):
        raise FacultyNotFound()
    return leaderboard_service.get_faculty_points_history(db, faculty_id)


@router.post("/calculate/{match_id}", response_model=PointsCalculationResult)
async def calculate_points(
    match_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    """Preview points for a finished match without applying them"""
    calculation = points_service.calculate_match_points(db, match_id)
    if calculation is None:
        return not_applicable_response()
    return calculation


@router.post("/apply/{match_id}", response_model=PointsCalculationResult)
async def apply_points(
    match_id: UUID,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    """Calculate and apply points for a finished match, then notify the dashboard"""
    calculation = points_service.calculate_match_points(db, match_id)
    if calculation is None:
        return not_applicable_response()

    points_service.apply_points(db, calculation)
    background_tasks.add_task(notify_leaderboard_updated, calculation)
    return calculation


@router.post("/recalculate/{match_id}", response_model=PointsCalculationResult)
async def recalculate_points(
    match_id: UUID,
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    """Revoke previously applied points (if any) and apply a fresh calculation"""
    calculation = points_service.recalculate_match_points(db, match_id)
    if calculation is None:
        return not_applicable_response()

    background_tasks.add_task(notify_leaderboard_updated, calculation)
    return calculation


@router.post("/revoke/{match_id}")
async def revoke_points(
    match_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    """Take back the points applied for a match"""
    points_service.revoke_points(db, match_id)
    return {"message": "Points revoked", "match_id": str(match_id)}
