import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db import Base


class Team(Base):
    __tablename__ = "teams"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    faculty_id = Column(Uuid, ForeignKey("faculties.id", ondelete="CASCADE"), nullable=False, index=True)
    game_id = Column(Uuid, ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    faculty = relationship("Faculty", back_populates="teams")
    game = relationship("Game", back_populates="teams")
    participations = relationship("MatchParticipant", back_populates="team", cascade="all, delete-orphan")
