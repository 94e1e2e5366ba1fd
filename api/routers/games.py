from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from api.deps.db import get_db
from api.crud import game_crud
from api.crud.user import get_user_by_id
from core.auth import get_admin
from api.crud.participant_crud import has_applied_results
from core.exceptions import GameNotFound, UserNotFound, AppliedPointsExist
from models.user import User
from schemas.game import GameCreate, GameUpdate, GameRead

router = APIRouter(prefix="/games", tags=["Games"])


@router.get("", response_model=List[GameRead])
async def get_games(db: Session = Depends(get_db)):
    return game_crud.list_games(db)


@router.get("/{game_id}", response_model=GameRead)
async def get_game(game_id: UUID, db: Session = Depends(get_db)):
    game = game_crud.get_game(db, game_id)
    if not game:
        raise GameNotFound()
    return game


@router.post("", response_model=GameRead, status_code=status.HTTP_201_CREATED)
async def create_game(
    game_data: GameCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    if game_data.manager_id and not get_user_by_id(db, game_data.manager_id):
        raise UserNotFound()
    return game_crud.create_game(db, game_data)


@router.put("/{game_id}", response_model=GameRead)
async def update_game(
    game_id: UUID,
    game_update: GameUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    """Update game, including its point weight and assigned manager"""
    game = game_crud.get_game(db, game_id)
    if not game:
        raise GameNotFound()
    if game_update.manager_id and not get_user_by_id(db, game_update.manager_id):
        raise UserNotFound()
    return game_crud.update_game(db, game, game_update)


@router.delete("/{game_id}")
async def delete_game(
    game_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    game = game_crud.get_game(db, game_id)
    if not game:
        raise GameNotFound()
    if has_applied_results(db, game_id=game.id):
        raise AppliedPointsExist("Game")
    name = game.name
    game_crud.delete_game(db, game)
    return {"message": f"Game {name} deleted"}
