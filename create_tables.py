"""
Create all database tables
Run with: python3 create_tables.py
"""
from db import Base, engine

# Import all models so they are registered with Base.metadata
from models.user import User
from models.faculty import Faculty
from models.game import Game
from models.team import Team
from models.player import Player
from models.match import Match
from models.match_participant import MatchParticipant

if __name__ == "__main__":
    print("🔨 Creating all tables...")
    Base.metadata.create_all(bind=engine)
    print("✅ All tables created successfully!")

    # List created tables
    from sqlalchemy import inspect
    inspector = inspect(engine)
    tables = inspector.get_table_names()
    print(f"\n📋 Created tables ({len(tables)}):")
    for table in sorted(tables):
        print(f"   - {table}")
