from collections import Counter, defaultdict
from typing import List
from uuid import UUID

from sqlalchemy import func
from sqlalchemy.orm import Session

from api.crud.faculty_crud import list_faculties_by_points
from models.faculty import Faculty
from models.game import Game
from models.match import Match, MatchStatus
from models.match_participant import MatchParticipant, MatchResult
from schemas.faculty import FacultyRead
from schemas.points import DetailedLeaderboardEntry, HistoryEntry
from services.participant_owner import owner_subquery


def get_leaderboard(db: Session) -> List[Faculty]:
    """Факультети за total_points (спадання), при рівності - за назвою"""
    return list_faculties_by_points(db)


def _result_counts_by_faculty(db: Session) -> dict:
    """{faculty_id: Counter({MatchResult: count})} по матчах з уже нарахованими балами"""
    owner = owner_subquery()

    rows = db.query(
        owner.c.faculty_id,
        MatchParticipant.result,
        func.count(MatchParticipant.id)
    ).select_from(owner).join(
        MatchParticipant, MatchParticipant.id == owner.c.participant_id
    ).join(
        Match, Match.id == MatchParticipant.match_id
    ).filter(
        Match.points_applied_at.isnot(None),
        MatchParticipant.result.isnot(None)
    ).group_by(
        owner.c.faculty_id, MatchParticipant.result
    ).all()

    counts = defaultdict(Counter)
    for faculty_id, result, count in rows:
        counts[faculty_id][result] += count
    return counts


def get_detailed_leaderboard(db: Session) -> List[DetailedLeaderboardEntry]:
    """Рейтинг з кількістю перемог/поразок/нічиїх і середніми балами за матч"""
    faculties = get_leaderboard(db)
    counts = _result_counts_by_faculty(db)

    detailed = []
    for faculty in faculties:
        faculty_counts = counts.get(faculty.id, Counter())
        wins = faculty_counts[MatchResult.WIN]
        losses = faculty_counts[MatchResult.LOSS]
        draws = faculty_counts[MatchResult.DRAW]
        total_matches = wins + losses + draws

        detailed.append(DetailedLeaderboardEntry(
            faculty=FacultyRead.model_validate(faculty),
            wins=wins,
            losses=losses,
            draws=draws,
            total_matches=total_matches,
            points_per_match=round(faculty.total_points / total_matches, 2) if total_matches > 0 else 0,
        ))

    return detailed


def get_faculty_points_history(db: Session, faculty_id: UUID) -> List[HistoryEntry]:
    """Історія балів факультету по завершених матчах, найновіші першими"""
    owner = owner_subquery()
    completed_at = func.coalesce(Match.finished_at, Match.updated_at)

    rows = db.query(
        Match.id,
        Game.name,
        Game.point_weight,
        owner.c.display_name,
        MatchParticipant.result,
        MatchParticipant.points_earned,
        Match.points_applied_at,
        completed_at.label("completed_at")
    ).select_from(owner).join(
        MatchParticipant, MatchParticipant.id == owner.c.participant_id
    ).join(
        Match, Match.id == MatchParticipant.match_id
    ).join(
        Game, Game.id == Match.game_id
    ).filter(
        owner.c.faculty_id == faculty_id,
        Match.status == MatchStatus.FINISHED
    ).order_by(
        completed_at.desc()
    ).all()

    history = []
    for match_id, game_name, game_weight, participant_name, result, points_earned, applied_at, completed in rows:
        # До нарахування балів результат ще не остаточний (навіть позначка нічиї)
        applied = applied_at is not None and result is not None
        history.append(HistoryEntry(
            match_id=match_id,
            game_name=game_name,
            game_weight=game_weight,
            participant_name=participant_name,
            result=result.value if applied else "UNKNOWN",
            points_earned=points_earned if applied else 0,
            completed_at=completed,
        ))
    return history
