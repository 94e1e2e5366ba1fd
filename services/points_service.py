"""
Нарахування балів факультетам за завершені матчі.

calculate_match_points нічого не змінює в БД; apply_points - єдине місце, де
змінюються Faculty.total_points та результати учасників. Нарахування
виконується в одній транзакції і не може бути застосоване двічі для одного
матчу (Match.points_applied_at).
"""
import logging
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.orm import Session

from api.crud.faculty_crud import get_faculty, credit_faculty_points
from api.crud.game_crud import get_game
from api.crud.match_crud import get_match, claim_points_application, release_points_application
from api.crud.participant_crud import list_participants, write_participant_result
from core.exceptions import (
    MatchNotFound, FacultyNotFound, MatchGameMissing, WinnerNotAmongParticipants,
    WinnerFacultyMissing, ParticipantFacultyUnresolved, PointsIntegrityError,
    PointsAlreadyApplied, PointsNotApplied
)
from models.match import MatchStatus
from models.match_participant import MatchResult
from schemas.points import PointsCalculationResult, ParticipantPoints
from services.outcome_resolver import is_scorable, resolve_outcomes
from services.participant_owner import resolve_owner

logger = logging.getLogger(__name__)

# Бали за результат до множення на вагу гри
RESULT_POINTS = {
    MatchResult.WIN: 3,
    MatchResult.DRAW: 1,
    MatchResult.LOSS: 0,
}


def points_for(result: MatchResult, game_weight: int) -> int:
    return RESULT_POINTS[result] * game_weight


def calculate_match_points(db: Session, match_id: UUID) -> Optional[PointsCalculationResult]:
    """
    Розрахувати бали за матч:
    - переможець: 3 * вага гри
    - нічия: 1 * вага гри
    - поразка: 0

    Повертає None якщо матч не знайдено або він не FINISHED.
    Помилки цілісності даних (немає гри, учасників, факультету, переможця)
    кидаються як PointsIntegrityError - частковий результат не повертається.
    """
    match = get_match(db, match_id)
    if not is_scorable(match):
        logger.warning(f"Cannot calculate points: match {match_id} is not finished or not found")
        return None

    game = get_game(db, match.game_id)
    if not game:
        raise MatchGameMissing(match.game_id)

    outcomes = resolve_outcomes(db, match)

    participant_results = [
        ParticipantPoints(
            participant_id=outcome.participant_id,
            team_id=outcome.team_id,
            player_id=outcome.player_id,
            faculty_id=outcome.faculty_id,
            score=outcome.score,
            result=outcome.result,
            points_earned=points_for(outcome.result, game.point_weight),
        )
        for outcome in outcomes
    ]

    winner = next((r for r in participant_results if r.result == MatchResult.WIN), None)

    if winner is None:
        # Матч без переможця валідний тільки якщо всі учасники зіграли внічию
        all_draw = all(r.result == MatchResult.DRAW for r in participant_results)
        if match.winner_id is not None or not all_draw:
            raise WinnerNotAmongParticipants(match.id)

        return PointsCalculationResult(
            match_id=match.id,
            game_id=game.id,
            game_weight=game.point_weight,
            winner_faculty_id=None,
            winner_faculty_name=None,
            points_awarded=0,
            participant_results=participant_results,
        )

    winner_faculty = get_faculty(db, winner.faculty_id)
    if not winner_faculty:
        raise WinnerFacultyMissing(winner.faculty_id)

    return PointsCalculationResult(
        match_id=match.id,
        game_id=game.id,
        game_weight=game.point_weight,
        winner_faculty_id=winner_faculty.id,
        winner_faculty_name=winner_faculty.name,
        points_awarded=winner.points_earned,
        participant_results=participant_results,
    )


def _apply(db: Session, calculation: PointsCalculationResult, applied_at: datetime):
    match = get_match(db, calculation.match_id)
    if not match:
        raise MatchNotFound()

    if not claim_points_application(db, match.id, applied_at):
        logger.warning(f"Rejected re-application of points for match {match.id}")
        raise PointsAlreadyApplied(match.id)

    if match.status != MatchStatus.FINISHED:
        raise PointsIntegrityError(f"Match {match.id} is no longer finished")

    stored_ids = {p.id for p in list_participants(db, match.id)}
    calculated_ids = {r.participant_id for r in calculation.participant_results}
    if stored_ids != calculated_ids:
        raise PointsIntegrityError(
            f"Participants of match {match.id} changed since points were calculated"
        )

    for entry in calculation.participant_results:
        # Спочатку результат учасника, потім бали факультету
        write_participant_result(db, entry.participant_id, entry.result, entry.points_earned)

        if credit_faculty_points(db, entry.faculty_id, entry.points_earned) == 0:
            raise FacultyNotFound()

        faculty = get_faculty(db, entry.faculty_id)
        logger.info(
            f"Updated {faculty.name} points: +{entry.points_earned} (Total: {faculty.total_points})"
        )


def apply_points(db: Session, calculation: PointsCalculationResult) -> None:
    """
    Записати результат розрахунку: результати/бали учасників і загальні бали факультетів.
    Все або нічого; повторний виклик для того ж матчу кидає PointsAlreadyApplied.
    """
    try:
        _apply(db, calculation, datetime.now(timezone.utc))
        db.commit()
    except Exception:
        db.rollback()
        raise


def _revoke(db: Session, match_id: UUID):
    match = get_match(db, match_id)
    if not match:
        raise MatchNotFound()

    if not release_points_application(db, match.id):
        raise PointsNotApplied(match.id)

    for participant in list_participants(db, match.id):
        owner = resolve_owner(db, participant)
        if owner is None:
            raise ParticipantFacultyUnresolved(participant.id)

        if participant.points_earned:
            if credit_faculty_points(db, owner.faculty_id, -participant.points_earned) == 0:
                raise FacultyNotFound()

        # Позначка нічиї виставляється менеджером і переживає скасування
        kept_result = MatchResult.DRAW if participant.result == MatchResult.DRAW else None
        write_participant_result(db, participant.id, kept_result, 0)

    logger.info(f"Revoked points for match {match.id}")


def revoke_points(db: Session, match_id: UUID) -> None:
    """Скасувати раніше нараховані бали матчу (віднімає їх у факультетів)"""
    try:
        _revoke(db, match_id)
        db.commit()
    except Exception:
        db.rollback()
        raise


def recalculate_match_points(db: Session, match_id: UUID) -> Optional[PointsCalculationResult]:
    """
    Перерахунок: скасувати попереднє нарахування (якщо було), розрахувати і
    нарахувати заново. Все в одній транзакції.
    """
    try:
        match = get_match(db, match_id)
        if match is not None and match.points_applied:
            _revoke(db, match_id)

        calculation = calculate_match_points(db, match_id)
        if calculation is None:
            db.rollback()
            return None

        _apply(db, calculation, datetime.now(timezone.utc))
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info(f"Recalculated points for match {match_id}")
    return calculation
