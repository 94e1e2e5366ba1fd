import uuid

from sqlalchemy import Column, Integer, String, DateTime, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db import Base


class Faculty(Base):
    __tablename__ = "faculties"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, unique=True, nullable=False)

    # Змінюється тільки при нарахуванні/скасуванні балів за матч
    total_points = Column(Integer, nullable=False, default=0)

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    teams = relationship("Team", back_populates="faculty", cascade="all, delete-orphan")
    players = relationship("Player", back_populates="faculty", cascade="all, delete-orphan")
