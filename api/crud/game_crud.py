from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
from models.game import Game
from schemas.game import GameCreate, GameUpdate
from core.exceptions import DuplicateName


def get_game(db: Session, game_id: UUID) -> Optional[Game]:
    return db.query(Game).filter(Game.id == game_id).first()


def list_games(db: Session) -> List[Game]:
    return db.query(Game).order_by(Game.name).all()


def create_game(db: Session, game_data: GameCreate) -> Game:
    if db.query(Game).filter(Game.name == game_data.name).first():
        raise DuplicateName("Game", game_data.name)

    db_game = Game(**game_data.model_dump())
    db.add(db_game)
    db.commit()
    db.refresh(db_game)
    return db_game


def update_game(db: Session, game: Game, game_update: GameUpdate) -> Game:
    update_data = game_update.model_dump(exclude_unset=True)
    new_name = update_data.get("name")
    if new_name and new_name != game.name:
        if db.query(Game).filter(Game.name == new_name).first():
            raise DuplicateName("Game", new_name)

    for field, value in update_data.items():
        setattr(game, field, value)

    db.commit()
    db.refresh(game)
    return game


def delete_game(db: Session, game: Game):
    db.delete(game)
    db.commit()
