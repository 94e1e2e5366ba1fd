import enum
import uuid

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Enum, CheckConstraint, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db import Base


class GameType(str, enum.Enum):
    TEAM = "TEAM"
    INDIVIDUAL = "INDIVIDUAL"


class Game(Base):
    __tablename__ = "games"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, unique=True, nullable=False)
    type = Column(Enum(GameType), nullable=False)
    point_weight = Column(Integer, nullable=False, default=1)  # множник для всіх балів за матчі цієї гри
    manager_id = Column(Uuid, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    manager = relationship("User", back_populates="managed_games")
    teams = relationship("Team", back_populates="game", cascade="all, delete-orphan")
    matches = relationship("Match", back_populates="game", cascade="all, delete-orphan")

    __table_args__ = (
        CheckConstraint("point_weight >= 1", name="ck_games_point_weight_positive"),
    )
