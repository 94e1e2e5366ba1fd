import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db import Base


class Player(Base):
    __tablename__ = "players"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    faculty_id = Column(Uuid, ForeignKey("faculties.id", ondelete="CASCADE"), nullable=False, index=True)
    semester = Column(String, nullable=True)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    faculty = relationship("Faculty", back_populates="players")
    participations = relationship("MatchParticipant", back_populates="player", cascade="all, delete-orphan")
