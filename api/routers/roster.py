from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID

from api.deps.db import get_db
from api.crud import roster_crud
from api.crud.faculty_crud import get_faculty
from api.crud.game_crud import get_game
from core.auth import get_admin
from api.crud.participant_crud import has_applied_results
from core.exceptions import (
    FacultyNotFound, GameNotFound, TeamNotFound, PlayerNotFound, AppliedPointsExist
)
from models.user import User
from schemas.roster import TeamCreate, TeamUpdate, TeamRead, PlayerCreate, PlayerUpdate, PlayerRead

router = APIRouter(tags=["Teams & Players"])


@router.get("/teams", response_model=List[TeamRead])
async def get_teams(
    faculty_id: Optional[UUID] = None,
    game_id: Optional[UUID] = None,
    db: Session = Depends(get_db)
):
    return roster_crud.list_teams(db, faculty_id=faculty_id, game_id=game_id)


@router.get("/teams/{team_id}", response_model=TeamRead)
async def get_team(team_id: UUID, db: Session = Depends(get_db)):
    team = roster_crud.get_team(db, team_id)
    if not team:
        raise TeamNotFound()
    return team


@router.post("/teams", response_model=TeamRead, status_code=status.HTTP_201_CREATED)
async def create_team(
    team_data: TeamCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    if not get_faculty(db, team_data.faculty_id):
        raise FacultyNotFound()
    if not get_game(db, team_data.game_id):
        raise GameNotFound()
    return roster_crud.create_team(db, team_data)


@router.put("/teams/{team_id}", response_model=TeamRead)
async def update_team(
    team_id: UUID,
    team_update: TeamUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    """Rename a team or move it to another faculty/game"""
    team = roster_crud.get_team(db, team_id)
    if not team:
        raise TeamNotFound()
    if team_update.faculty_id and not get_faculty(db, team_update.faculty_id):
        raise FacultyNotFound()
    if team_update.game_id and not get_game(db, team_update.game_id):
        raise GameNotFound()
    # Нараховані бали скасовуються з факультету учасника - його не можна змінити
    if team_update.faculty_id and team_update.faculty_id != team.faculty_id \
            and has_applied_results(db, team_id=team.id):
        raise AppliedPointsExist("Team")
    return roster_crud.update_team(db, team, team_update)


@router.delete("/teams/{team_id}")
async def delete_team(
    team_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    team = roster_crud.get_team(db, team_id)
    if not team:
        raise TeamNotFound()
    if has_applied_results(db, team_id=team.id):
        raise AppliedPointsExist("Team")
    name = team.name
    roster_crud.delete_team(db, team)
    return {"message": f"Team {name} deleted"}


@router.get("/players", response_model=List[PlayerRead])
async def get_players(faculty_id: Optional[UUID] = None, db: Session = Depends(get_db)):
    return roster_crud.list_players(db, faculty_id=faculty_id)


@router.get("/players/{player_id}", response_model=PlayerRead)
async def get_player(player_id: UUID, db: Session = Depends(get_db)):
    player = roster_crud.get_player(db, player_id)
    if not player:
        raise PlayerNotFound()
    return player


@router.post("/players", response_model=PlayerRead, status_code=status.HTTP_201_CREATED)
async def create_player(
    player_data: PlayerCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    if not get_faculty(db, player_data.faculty_id):
        raise FacultyNotFound()
    return roster_crud.create_player(db, player_data)


@router.put("/players/{player_id}", response_model=PlayerRead)
async def update_player(
    player_id: UUID,
    player_update: PlayerUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    player = roster_crud.get_player(db, player_id)
    if not player:
        raise PlayerNotFound()
    if player_update.faculty_id and not get_faculty(db, player_update.faculty_id):
        raise FacultyNotFound()
    if player_update.faculty_id and player_update.faculty_id != player.faculty_id \
            and has_applied_results(db, player_id=player.id):
        raise AppliedPointsExist("Player")
    return roster_crud.update_player(db, player, player_update)


@router.delete("/players/{player_id}")
async def delete_player(
    player_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    player = roster_crud.get_player(db, player_id)
    if not player:
        raise PlayerNotFound()
    if has_applied_results(db, player_id=player.id):
        raise AppliedPointsExist("Player")
    name = player.name
    roster_crud.delete_player(db, player)
    return {"message": f"Player {name} deleted"}
