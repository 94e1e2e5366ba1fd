"""
Unit tests for match outcome resolution and participant ownership
"""
import uuid

from models.game import GameType
from models.match import MatchStatus
from models.match_participant import MatchResult
from services.outcome_resolver import resolve_match, is_scorable
from services.participant_owner import resolve_owner


def test_resolve_match_outcomes(db, make, futsal_match):
    outcomes = resolve_match(db, futsal_match["match"].id)

    results = {o.team_id: o.result for o in outcomes}
    assert results == {
        futsal_match["team_a"].id: MatchResult.WIN,
        futsal_match["team_b"].id: MatchResult.LOSS,
    }
    scores = {o.team_id: o.score for o in outcomes}
    assert scores[futsal_match["team_a"].id] == 3


def test_resolve_live_match_is_not_applicable(db, make):
    arts = make.faculty("Arts")
    futsal = make.game()
    match = make.match(futsal, [make.team(arts, futsal)], status=MatchStatus.LIVE)

    assert resolve_match(db, match.id) is None
    assert is_scorable(match) is False
    assert is_scorable(None) is False


def test_stored_win_is_not_trusted_without_winner_reference(db, make, futsal_match):
    """Результат береться з winner_id, а не з попередньо збереженого WIN"""
    match = futsal_match["match"]
    loser = make.participant_for(match, futsal_match["team_b"])
    loser.result = MatchResult.WIN
    db.commit()

    outcomes = {o.team_id: o.result for o in resolve_match(db, match.id)}
    assert outcomes[futsal_match["team_b"].id] == MatchResult.LOSS


def test_owner_for_team_and_player(db, make):
    arts = make.faculty("Arts")
    chess = make.game("Chess", game_type=GameType.INDIVIDUAL, point_weight=1)
    futsal = make.game("Futsal")
    team = make.team(arts, futsal, "Arts Five")
    player = make.player(arts, "Ivy")
    match = make.match(chess, [player])
    team_match = make.match(futsal, [team])

    team_owner = resolve_owner(db, make.participant_for(team_match, team))
    player_owner = resolve_owner(db, make.participant_for(match, player))

    assert (team_owner.faculty_id, team_owner.display_name, team_owner.kind) == (arts.id, "Arts Five", "team")
    assert (player_owner.faculty_id, player_owner.display_name, player_owner.kind) == (arts.id, "Ivy", "player")


def test_owner_missing_team(db, make, futsal_match):
    participant = make.participant_for(futsal_match["match"], futsal_match["team_a"])
    participant.team_id = uuid.uuid4()
    db.commit()

    assert resolve_owner(db, participant) is None
