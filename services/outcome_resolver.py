from dataclasses import dataclass
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from api.crud.match_crud import get_match
from api.crud.participant_crud import list_participants
from core.exceptions import MatchHasNoParticipants, ParticipantFacultyUnresolved
from models.match import Match, MatchStatus
from models.match_participant import MatchResult
from services.participant_owner import resolve_owner


@dataclass
class ResolvedOutcome:
    participant_id: UUID
    team_id: Optional[UUID]
    player_id: Optional[UUID]
    faculty_id: UUID
    score: int
    result: MatchResult


def is_scorable(match: Optional[Match]) -> bool:
    """Бали рахуються тільки для існуючого матчу зі статусом FINISHED"""
    return match is not None and match.status == MatchStatus.FINISHED


def resolve_outcomes(db: Session, match: Match) -> List[ResolvedOutcome]:
    """
    Результат кожного учасника завершеного матчу:
    - WIN: команда/гравець збігається з Match.winner_id
    - DRAW: не переможець, але менеджер позначив нічию
    - LOSS: всі інші
    Нічого не записує в БД.
    """
    participants = list_participants(db, match.id)
    if not participants:
        raise MatchHasNoParticipants(match.id)

    outcomes = []
    for participant in participants:
        owner = resolve_owner(db, participant)
        if owner is None:
            raise ParticipantFacultyUnresolved(participant.id)

        if match.winner_id is not None and participant.entrant_id == match.winner_id:
            result = MatchResult.WIN
        elif participant.result == MatchResult.DRAW:
            result = MatchResult.DRAW
        else:
            result = MatchResult.LOSS

        outcomes.append(ResolvedOutcome(
            participant_id=participant.id,
            team_id=participant.team_id,
            player_id=participant.player_id,
            faculty_id=owner.faculty_id,
            score=participant.score,
            result=result,
        ))

    return outcomes


def resolve_match(db: Session, match_id: UUID) -> Optional[List[ResolvedOutcome]]:
    """None означає "не застосовно" (матчу немає або він ще не завершений)"""
    match = get_match(db, match_id)
    if not is_scorable(match):
        return None
    return resolve_outcomes(db, match)
