import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from db import Base
from api.deps.db import get_db
from core.auth import create_access_token
from core.roles import UserRole
from core.security import hash_password
from models.user import User
from models.faculty import Faculty
from models.game import Game, GameType
from models.team import Team
from models.player import Player
from models.match import Match, MatchStatus
from models.match_participant import MatchParticipant, MatchResult


class Factory:
    """Створення тестових даних напряму через ORM"""

    def __init__(self, db):
        self.db = db

    def _save(self, obj):
        self.db.add(obj)
        self.db.commit()
        self.db.refresh(obj)
        return obj

    def user(self, username="admin", role=UserRole.ADMIN, password=None, is_active=True):
        return self._save(User(
            username=username,
            role=role,
            is_active=is_active,
            password_hash=hash_password(password) if password else None
        ))

    def faculty(self, name, total_points=0):
        return self._save(Faculty(name=name, total_points=total_points))

    def game(self, name="Futsal", game_type=GameType.TEAM, point_weight=2, manager=None):
        return self._save(Game(
            name=name,
            type=game_type,
            point_weight=point_weight,
            manager_id=manager.id if manager else None
        ))

    def team(self, faculty, game, name=None):
        return self._save(Team(name=name or f"{faculty.name} team", faculty_id=faculty.id, game_id=game.id))

    def player(self, faculty, name=None):
        return self._save(Player(name=name or f"{faculty.name} player", faculty_id=faculty.id))

    def match(self, game, entrants=(), status=MatchStatus.UPCOMING, winner=None, finished_at=None,
              venue="Main ground"):
        match = Match(
            game_id=game.id,
            start_time=datetime(2026, 3, 1, 10, 0, tzinfo=timezone.utc),
            venue=venue,
            status=status,
            winner_id=winner.id if winner else None,
            finished_at=finished_at,
        )
        self.db.add(match)
        self.db.flush()

        for entrant in entrants:
            self.db.add(MatchParticipant(
                match_id=match.id,
                team_id=entrant.id if isinstance(entrant, Team) else None,
                player_id=entrant.id if isinstance(entrant, Player) else None,
                score=0,
                points_earned=0,
            ))
        self.db.commit()
        self.db.refresh(match)
        return match

    def participant_for(self, match, entrant):
        column = MatchParticipant.team_id if isinstance(entrant, Team) else MatchParticipant.player_id
        return self.db.query(MatchParticipant).filter(
            MatchParticipant.match_id == match.id,
            column == entrant.id
        ).one()

    def set_score(self, match, entrant, score):
        participant = self.participant_for(match, entrant)
        participant.score = score
        self.db.commit()
        return participant

    def flag_draw(self, match, entrant):
        participant = self.participant_for(match, entrant)
        participant.result = MatchResult.DRAW
        self.db.commit()
        return participant


@pytest.fixture
def db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def make(db):
    return Factory(db)


@pytest.fixture
def futsal_match(make):
    """Futsal (вага 2): команда A перемогла команду B 3:1"""
    arts = make.faculty("Arts")
    business = make.faculty("Business")
    futsal = make.game("Futsal", point_weight=2)
    team_a = make.team(arts, futsal, "Arts Futsal")
    team_b = make.team(business, futsal, "Business Futsal")
    match = make.match(futsal, [team_a, team_b], status=MatchStatus.FINISHED, winner=team_a)
    make.set_score(match, team_a, 3)
    make.set_score(match, team_b, 1)
    return {
        "match": match,
        "game": futsal,
        "arts": arts,
        "business": business,
        "team_a": team_a,
        "team_b": team_b,
    }


@pytest.fixture
def client(db):
    from main import app

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(user):
        token = create_access_token(user.id)
        return {"Authorization": f"Bearer {token}"}
    return _headers
