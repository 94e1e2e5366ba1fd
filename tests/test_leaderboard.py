"""
Leaderboard, detailed statistics and faculty history
"""
from datetime import datetime, timezone

from models.game import GameType
from models.match import MatchStatus
from services.leaderboard_service import (
    get_leaderboard, get_detailed_leaderboard, get_faculty_points_history
)
from services.points_service import apply_points, calculate_match_points


def _apply(db, match):
    apply_points(db, calculate_match_points(db, match.id))


def test_leaderboard_order_with_tie(db, make):
    make.faculty("Business", total_points=30)
    make.faculty("Science", total_points=12)
    make.faculty("Arts", total_points=30)
    make.faculty("Law", total_points=45)

    names = [f.name for f in get_leaderboard(db)]
    assert names == ["Law", "Arts", "Business", "Science"]


def test_detailed_leaderboard_without_matches(db, make):
    make.faculty("Arts", total_points=5)

    entry = get_detailed_leaderboard(db)[0]
    assert entry.faculty.name == "Arts"
    assert (entry.wins, entry.losses, entry.draws, entry.total_matches) == (0, 0, 0, 0)
    assert entry.points_per_match == 0


def test_detailed_leaderboard_counts_team_and_player_matches(db, make, futsal_match):
    _apply(db, futsal_match["match"])

    chess = make.game("Chess", game_type=GameType.INDIVIDUAL, point_weight=1)
    arts_player = make.player(futsal_match["arts"], "Alice")
    business_player = make.player(futsal_match["business"], "Bob")
    chess_match = make.match(
        chess, [arts_player, business_player], status=MatchStatus.FINISHED, winner=business_player
    )
    _apply(db, chess_match)

    entries = {e.faculty.name: e for e in get_detailed_leaderboard(db)}
    arts, business = entries["Arts"], entries["Business"]

    assert (arts.wins, arts.losses, arts.draws, arts.total_matches) == (1, 1, 0, 2)
    assert arts.faculty.total_points == 6
    assert arts.points_per_match == 3.0
    assert (business.wins, business.losses, business.total_matches) == (1, 1, 2)
    assert business.points_per_match == 1.5


def test_detailed_leaderboard_ignores_unapplied_matches(db, make, futsal_match):
    """Позначка нічиї у матчі без нарахування не потрапляє в статистику"""
    arts = futsal_match["arts"]
    futsal = futsal_match["game"]
    team = futsal_match["team_a"]
    other = futsal_match["team_b"]
    match = make.match(futsal, [team, other], status=MatchStatus.LIVE)
    make.flag_draw(match, team)

    entry = next(e for e in get_detailed_leaderboard(db) if e.faculty.id == arts.id)
    assert entry.total_matches == 0


def test_points_per_match_rounding(db, make):
    arts = make.faculty("Arts")
    business = make.faculty("Business")
    futsal = make.game("Futsal", point_weight=2)
    team_a = make.team(arts, futsal)
    team_b = make.team(business, futsal)

    for winner in (team_a, team_b, team_b):
        match = make.match(futsal, [team_a, team_b], status=MatchStatus.FINISHED, winner=winner)
        _apply(db, match)

    entry = next(e for e in get_detailed_leaderboard(db) if e.faculty.name == "Arts")
    assert entry.total_matches == 3
    assert entry.points_per_match == 2.0

    entry = next(e for e in get_detailed_leaderboard(db) if e.faculty.name == "Business")
    assert entry.points_per_match == 4.0


def test_faculty_history_newest_first(db, make):
    arts = make.faculty("Arts")
    business = make.faculty("Business")
    futsal = make.game("Futsal", point_weight=2)
    chess = make.game("Chess", game_type=GameType.INDIVIDUAL, point_weight=1)
    team_a = make.team(arts, futsal, "Arts Five")
    team_b = make.team(business, futsal, "Business Five")
    alice = make.player(arts, "Alice")
    bob = make.player(business, "Bob")

    older = make.match(
        futsal, [team_a, team_b], status=MatchStatus.FINISHED, winner=team_a,
        finished_at=datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
    )
    newer = make.match(
        chess, [alice, bob], status=MatchStatus.FINISHED, winner=bob,
        finished_at=datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)
    )
    make.match(futsal, [team_a, team_b], status=MatchStatus.LIVE)
    _apply(db, older)

    history = get_faculty_points_history(db, arts.id)

    assert [h.match_id for h in history] == [newer.id, older.id]
    assert history[0].game_name == "Chess"
    assert history[0].participant_name == "Alice"
    assert history[0].result == "UNKNOWN"
    assert history[0].points_earned == 0
    assert history[1].participant_name == "Arts Five"
    assert history[1].result == "WIN"
    assert history[1].points_earned == 6
    assert history[1].game_weight == 2


def test_history_of_faculty_without_matches(db, make):
    science = make.faculty("Science")
    assert get_faculty_points_history(db, science.id) == []


def test_history_hides_draw_mark_until_points_applied(db, make):
    """Позначка нічиї в матчі без нарахування не є результатом"""
    arts = make.faculty("Arts")
    business = make.faculty("Business")
    futsal = make.game("Futsal", point_weight=2)
    team_a = make.team(arts, futsal)
    team_b = make.team(business, futsal)
    match = make.match(futsal, [team_a, team_b], status=MatchStatus.FINISHED)
    make.flag_draw(match, team_a)
    make.flag_draw(match, team_b)

    entry = get_faculty_points_history(db, arts.id)[0]
    assert (entry.result, entry.points_earned) == ("UNKNOWN", 0)

    _apply(db, match)

    entry = get_faculty_points_history(db, arts.id)[0]
    assert (entry.result, entry.points_earned) == ("DRAW", 2)
