"""
Match lifecycle: status transitions, winner, scores and draw marks
"""
import uuid
from datetime import datetime, timezone

import pytest

from core.exceptions import (
    SportsWeekException, InvalidMatchTransition, InvalidParticipant, MatchLocked,
    UnauthorizedAction, GameNotFound, TeamNotFound
)
from core.roles import UserRole
from models.match import MatchStatus
from models.match_participant import MatchResult
from pydantic import ValidationError

from schemas.match import MatchCreate, MatchUpdate, ParticipantInput, ParticipantsReplace
from services.match_service import (
    create_match_logic, update_match_logic, update_score_logic, set_draw_logic,
    replace_participants_logic
)
from services.points_service import apply_points, calculate_match_points


@pytest.fixture
def admin(make):
    return make.user("admin", UserRole.ADMIN)


@pytest.fixture
def live_match(make):
    arts = make.faculty("Arts")
    business = make.faculty("Business")
    manager = make.user("futsal_manager", UserRole.MANAGER)
    futsal = make.game("Futsal", point_weight=2, manager=manager)
    team_a = make.team(arts, futsal)
    team_b = make.team(business, futsal)
    match = make.match(futsal, [team_a, team_b], status=MatchStatus.LIVE)
    return {"match": match, "manager": manager, "team_a": team_a, "team_b": team_b, "game": futsal}


def test_create_match_with_participants(db, make, admin):
    arts = make.faculty("Arts")
    futsal = make.game()
    team = make.team(arts, futsal)

    match = create_match_logic(db, MatchCreate(
        game_id=futsal.id,
        start_time=datetime(2026, 3, 3, 9, 0, tzinfo=timezone.utc),
        venue="Hall B",
        participants=[ParticipantInput(team_id=team.id)],
    ))

    assert match.status == MatchStatus.UPCOMING
    assert [p.team_id for p in match.participants] == [team.id]
    assert match.participants[0].result is None


def test_create_match_unknown_game_or_team(db, make):
    futsal = make.game()
    start = datetime(2026, 3, 3, 9, 0, tzinfo=timezone.utc)

    with pytest.raises(GameNotFound):
        create_match_logic(db, MatchCreate(game_id=uuid.uuid4(), start_time=start, venue="Hall"))

    with pytest.raises(TeamNotFound):
        create_match_logic(db, MatchCreate(
            game_id=futsal.id, start_time=start, venue="Hall",
            participants=[ParticipantInput(team_id=uuid.uuid4())]
        ))


def test_participant_input_requires_exactly_one_entrant():
    with pytest.raises(ValueError):
        ParticipantInput()
    with pytest.raises(ValueError):
        ParticipantInput(team_id=uuid.uuid4(), player_id=uuid.uuid4())


def test_finishing_match_sets_finished_at(db, live_match):
    match = update_match_logic(
        db, live_match["match"],
        MatchUpdate(status=MatchStatus.FINISHED, winner_id=live_match["team_a"].id),
        live_match["manager"]
    )

    assert match.status == MatchStatus.FINISHED
    assert match.winner_id == live_match["team_a"].id
    assert match.finished_at is not None


def test_upcoming_can_skip_to_finished(db, make, admin):
    futsal = make.game()
    match = make.match(futsal, [make.team(make.faculty("Arts"), futsal)])

    match = update_match_logic(db, match, MatchUpdate(status=MatchStatus.FINISHED), admin)
    assert match.status == MatchStatus.FINISHED


def test_status_cannot_move_backwards(db, live_match, admin):
    with pytest.raises(InvalidMatchTransition):
        update_match_logic(db, live_match["match"], MatchUpdate(status=MatchStatus.UPCOMING), admin)


def test_winner_must_be_participant(db, live_match, admin):
    with pytest.raises(InvalidParticipant):
        update_match_logic(db, live_match["match"], MatchUpdate(winner_id=uuid.uuid4()), admin)


def test_other_manager_cannot_update_match(db, make, live_match):
    chess_manager = make.user("chess_manager", UserRole.MANAGER)

    with pytest.raises(UnauthorizedAction):
        update_match_logic(db, live_match["match"], MatchUpdate(status=MatchStatus.FINISHED), chess_manager)


def test_manager_cannot_change_venue(db, live_match):
    with pytest.raises(SportsWeekException) as exc_info:
        update_match_logic(db, live_match["match"], MatchUpdate(venue="Elsewhere"), live_match["manager"])
    assert exc_info.value.status_code == 403


def test_result_is_locked_after_points_applied(db, make, futsal_match, admin):
    apply_points(db, calculate_match_points(db, futsal_match["match"].id))
    participant = make.participant_for(futsal_match["match"], futsal_match["team_b"])

    with pytest.raises(MatchLocked):
        update_match_logic(db, futsal_match["match"], MatchUpdate(winner_id=futsal_match["team_b"].id), admin)
    with pytest.raises(MatchLocked):
        update_score_logic(db, participant.id, 5, admin)
    with pytest.raises(MatchLocked):
        set_draw_logic(db, participant.id, True, admin)


def test_manager_updates_live_score(db, make, live_match):
    participant = make.participant_for(live_match["match"], live_match["team_a"])

    updated = update_score_logic(db, participant.id, 2, live_match["manager"])
    assert updated.score == 2


def test_mark_and_unmark_draw(db, make, live_match):
    participant = make.participant_for(live_match["match"], live_match["team_b"])

    marked = set_draw_logic(db, participant.id, True, live_match["manager"])
    assert marked.result == MatchResult.DRAW

    unmarked = set_draw_logic(db, participant.id, False, live_match["manager"])
    assert unmarked.result is None


def test_draw_not_allowed_for_upcoming_match(db, make, admin):
    futsal = make.game()
    team = make.team(make.faculty("Arts"), futsal)
    match = make.match(futsal, [team])
    participant = make.participant_for(match, team)

    with pytest.raises(SportsWeekException):
        set_draw_logic(db, participant.id, True, admin)


def test_winner_cannot_be_marked_draw(db, make, futsal_match, admin):
    participant = make.participant_for(futsal_match["match"], futsal_match["team_a"])

    with pytest.raises(InvalidParticipant):
        set_draw_logic(db, participant.id, True, admin)


@pytest.mark.parametrize("field", ["status", "venue", "start_time"])
def test_required_match_fields_cannot_be_cleared(field):
    with pytest.raises(ValidationError):
        MatchUpdate(**{field: None})


def test_winner_can_be_cleared(db, make, live_match, admin):
    match = update_match_logic(db, live_match["match"], MatchUpdate(winner_id=live_match["team_a"].id), admin)
    assert match.winner_id == live_match["team_a"].id

    match = update_match_logic(db, match, MatchUpdate(winner_id=None), admin)
    assert match.winner_id is None


@pytest.mark.parametrize("body", [{"status": None}, {"venue": None}, {"start_time": None}])
def test_patch_with_null_required_field_is_rejected(client, live_match, admin, auth_headers, body):
    match = live_match["match"]

    response = client.patch(f"/matches/{match.id}", json=body, headers=auth_headers(admin))

    assert response.status_code == 422
    assert client.get(f"/matches/{match.id}").json()["status"] == "LIVE"


def test_replace_participants(db, make, live_match):
    science = make.faculty("Science")
    team_c = make.team(science, live_match["game"])
    make.set_score(live_match["match"], live_match["team_a"], 4)

    match = replace_participants_logic(db, live_match["match"], [
        ParticipantInput(team_id=live_match["team_a"].id),
        ParticipantInput(team_id=team_c.id),
    ])

    assert {p.team_id for p in match.participants} == {live_match["team_a"].id, team_c.id}
    assert all(p.score == 0 for p in match.participants)


def test_replace_participants_keeps_winner_among_entrants(db, live_match, admin):
    update_match_logic(db, live_match["match"], MatchUpdate(winner_id=live_match["team_a"].id), admin)

    with pytest.raises(InvalidParticipant):
        replace_participants_logic(db, live_match["match"], [ParticipantInput(team_id=live_match["team_b"].id)])


def test_replace_participants_locked_after_points_applied(db, futsal_match):
    match = futsal_match["match"]
    apply_points(db, calculate_match_points(db, match.id))

    with pytest.raises(MatchLocked):
        replace_participants_logic(db, match, [ParticipantInput(team_id=futsal_match["team_a"].id)])


def test_replace_participants_rejects_duplicates():
    team_id = uuid.uuid4()
    with pytest.raises(ValidationError):
        ParticipantsReplace(participants=[{"team_id": str(team_id)}, {"team_id": str(team_id)}])


def test_replace_participants_endpoint(client, make, live_match, admin, auth_headers):
    team_c = make.team(make.faculty("Science"), live_match["game"])
    match_id = live_match["match"].id

    response = client.put(
        f"/matches/{match_id}/participants",
        json={"participants": [{"team_id": str(team_c.id)}]},
        headers=auth_headers(admin)
    )

    assert response.status_code == 200
    assert [p["team_id"] for p in response.json()["participants"]] == [str(team_c.id)]
