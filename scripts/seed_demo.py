"""
Seed demo data: faculties, games, managers and a few teams
Run with: python3 -m scripts.seed_demo
"""
from create_tables import Base, engine
from db import SessionLocal
from core.roles import UserRole
from core.security import hash_password
from models.faculty import Faculty
from models.game import Game, GameType
from models.team import Team
from models.player import Player
from models.user import User

FACULTIES = ["CSIT", "BCA", "BSW", "BBS"]

# Демо-паролі, тільки для локальної розробки
DEMO_USERS = [
    ("admin", UserRole.ADMIN, "admin123"),
    ("futsal_manager", UserRole.MANAGER, "futsal2026"),
    ("chess_manager", UserRole.MANAGER, "chess2026"),
]

GAMES = [
    # (name, type, point_weight, manager username)
    ("Futsal", GameType.TEAM, 2, "futsal_manager"),
    ("Basketball", GameType.TEAM, 2, None),
    ("Chess", GameType.INDIVIDUAL, 1, "chess_manager"),
    ("Table Tennis", GameType.INDIVIDUAL, 1, None),
]


def seed_demo():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        if db.query(Faculty).count() > 0:
            print("ℹ️ Database already has faculties, skipping seed")
            return

        users = {}
        for username, role, password in DEMO_USERS:
            users[username] = User(username=username, role=role, password_hash=hash_password(password))
            db.add(users[username])

        faculties = [Faculty(name=name, total_points=0) for name in FACULTIES]
        db.add_all(faculties)

        games = []
        for name, game_type, weight, manager in GAMES:
            game = Game(name=name, type=game_type, point_weight=weight, manager=users.get(manager))
            games.append(game)
            db.add(game)
        db.flush()

        for faculty in faculties:
            for game in games:
                if game.type == GameType.TEAM:
                    db.add(Team(name=f"{faculty.name} {game.name}", faculty_id=faculty.id, game_id=game.id))
            db.add(Player(name=f"{faculty.name} Captain", faculty_id=faculty.id, semester="1"))

        db.commit()
        print(f"✅ Seeded {len(faculties)} faculties, {len(games)} games, {len(users)} users")
        for username, _, password in DEMO_USERS:
            print(f"   🔑 {username} / {password}")

    except Exception as e:
        print(f"❌ Seed failed: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_demo()
