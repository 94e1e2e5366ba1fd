"""
HTTP tests for the points endpoints
"""
import uuid

from core.roles import UserRole
from models.match import MatchStatus


def test_leaderboard_is_public(client, make):
    make.faculty("Arts", total_points=9)
    make.faculty("Business", total_points=12)

    response = client.get("/points/leaderboard")

    assert response.status_code == 200
    assert [f["name"] for f in response.json()] == ["Business", "Arts"]


def test_apply_then_reapply(client, make, futsal_match, auth_headers):
    headers = auth_headers(make.user("admin", UserRole.ADMIN))
    url = f"/points/apply/{futsal_match['match'].id}"

    first = client.post(url, headers=headers)
    assert first.status_code == 200
    body = first.json()
    assert body["points_awarded"] == 6
    assert body["winner_faculty_name"] == "Arts"

    second = client.post(url, headers=headers)
    assert second.status_code == 409
    assert second.json()["type"] == "sports_week_error"

    leaderboard = client.get("/points/leaderboard").json()
    assert leaderboard[0]["name"] == "Arts"
    assert leaderboard[0]["total_points"] == 6


def test_calculate_unfinished_match_is_not_applicable(client, make, auth_headers):
    headers = auth_headers(make.user("admin", UserRole.ADMIN))
    futsal = make.game()
    match = make.match(futsal, [make.team(make.faculty("Arts"), futsal)], status=MatchStatus.LIVE)

    response = client.post(f"/points/calculate/{match.id}", headers=headers)

    assert response.status_code == 400
    assert response.json()["type"] == "not_applicable"

    response = client.post(f"/points/apply/{uuid.uuid4()}", headers=headers)
    assert response.status_code == 400


def test_integrity_error_is_unprocessable(client, make, auth_headers, db):
    headers = auth_headers(make.user("admin", UserRole.ADMIN))
    futsal = make.game()
    match = make.match(futsal, [], status=MatchStatus.FINISHED)

    response = client.post(f"/points/calculate/{match.id}", headers=headers)

    assert response.status_code == 422
    assert "No participants" in response.json()["detail"]


def test_points_actions_require_admin(client, make, futsal_match, auth_headers):
    url = f"/points/apply/{futsal_match['match'].id}"

    assert client.post(url).status_code in (401, 403)

    manager_headers = auth_headers(make.user("futsal_manager", UserRole.MANAGER))
    assert client.post(url, headers=manager_headers).status_code == 403


def test_revoke_and_history(client, make, futsal_match, auth_headers):
    headers = auth_headers(make.user("admin", UserRole.ADMIN))
    match_id = futsal_match["match"].id
    client.post(f"/points/apply/{match_id}", headers=headers)

    history = client.get(f"/points/faculty/{futsal_match['arts'].id}/history").json()
    assert history[0]["result"] == "WIN"
    assert history[0]["points_earned"] == 6

    response = client.post(f"/points/revoke/{match_id}", headers=headers)
    assert response.status_code == 200
    assert client.post(f"/points/revoke/{match_id}", headers=headers).status_code == 409


def test_history_for_unknown_faculty(client):
    assert client.get(f"/points/faculty/{uuid.uuid4()}/history").status_code == 404


def test_detailed_leaderboard_endpoint(client, make, futsal_match, auth_headers):
    headers = auth_headers(make.user("admin", UserRole.ADMIN))
    client.post(f"/points/apply/{futsal_match['match'].id}", headers=headers)

    detailed = client.get("/points/leaderboard/detailed").json()

    assert detailed[0]["faculty"]["name"] == "Arts"
    assert detailed[0]["wins"] == 1
    assert detailed[0]["points_per_match"] == 6.0
    assert detailed[1]["losses"] == 1
