from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
from models.team import Team
from models.player import Player
from schemas.roster import TeamCreate, TeamUpdate, PlayerCreate, PlayerUpdate


def get_team(db: Session, team_id: UUID) -> Optional[Team]:
    return db.query(Team).filter(Team.id == team_id).first()


def list_teams(db: Session, faculty_id: Optional[UUID] = None, game_id: Optional[UUID] = None) -> List[Team]:
    query = db.query(Team)
    if faculty_id:
        query = query.filter(Team.faculty_id == faculty_id)
    if game_id:
        query = query.filter(Team.game_id == game_id)
    return query.order_by(Team.name).all()


def create_team(db: Session, team_data: TeamCreate) -> Team:
    db_team = Team(**team_data.model_dump())
    db.add(db_team)
    db.commit()
    db.refresh(db_team)
    return db_team


def update_team(db: Session, team: Team, team_update: TeamUpdate) -> Team:
    for field, value in team_update.model_dump(exclude_unset=True).items():
        setattr(team, field, value)
    db.commit()
    db.refresh(team)
    return team


def delete_team(db: Session, team: Team):
    db.delete(team)
    db.commit()


def get_player(db: Session, player_id: UUID) -> Optional[Player]:
    return db.query(Player).filter(Player.id == player_id).first()


def list_players(db: Session, faculty_id: Optional[UUID] = None) -> List[Player]:
    query = db.query(Player)
    if faculty_id:
        query = query.filter(Player.faculty_id == faculty_id)
    return query.order_by(Player.name).all()


def create_player(db: Session, player_data: PlayerCreate) -> Player:
    db_player = Player(**player_data.model_dump())
    db.add(db_player)
    db.commit()
    db.refresh(db_player)
    return db_player


def update_player(db: Session, player: Player, player_update: PlayerUpdate) -> Player:
    for field, value in player_update.model_dump(exclude_unset=True).items():
        setattr(player, field, value)
    db.commit()
    db.refresh(player)
    return player


def delete_player(db: Session, player: Player):
    db.delete(player)
    db.commit()
