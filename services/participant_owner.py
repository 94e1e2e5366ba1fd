"""
Визначення власника учасника матчу.

Учасник - це або команда, або окремий гравець; в обох випадках факультет
визначається транзитивно. Вся логіка "команда чи гравець" зібрана тут, щоб
розрахунок балів, детальний рейтинг і історія не дублювали однакові join-и.
"""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from sqlalchemy import select, union_all
from sqlalchemy.orm import Session

from api.crud.roster_crud import get_team, get_player
from models.match_participant import MatchParticipant
from models.team import Team
from models.player import Player


@dataclass(frozen=True)
class ParticipantOwner:
    faculty_id: UUID
    display_name: str
    kind: str  # "team" | "player"


def resolve_owner(db: Session, participant: MatchParticipant) -> Optional[ParticipantOwner]:
    """Факультет і назва команди/гравця для одного учасника, або None якщо не вдалось"""
    if participant.team_id is not None:
        team = get_team(db, participant.team_id)
        if team and team.faculty_id:
            return ParticipantOwner(team.faculty_id, team.name, "team")
    elif participant.player_id is not None:
        player = get_player(db, participant.player_id)
        if player and player.faculty_id:
            return ParticipantOwner(player.faculty_id, player.name, "player")
    return None


def owner_subquery():
    """
    (participant_id, faculty_id, display_name) для всіх учасників:
    шлях через команди UNION ALL шлях через гравців.
    """
    team_path = select(
        MatchParticipant.id.label("participant_id"),
        Team.faculty_id.label("faculty_id"),
        Team.name.label("display_name"),
    ).join(Team, MatchParticipant.team_id == Team.id)

    player_path = select(
        MatchParticipant.id.label("participant_id"),
        Player.faculty_id.label("faculty_id"),
        Player.name.label("display_name"),
    ).join(Player, MatchParticipant.player_id == Player.id)

    return union_all(team_path, player_path).subquery("participant_owner")
