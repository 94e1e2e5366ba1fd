import enum
import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, Enum, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from db import Base


class MatchStatus(str, enum.Enum):
    UPCOMING = "UPCOMING"
    LIVE = "LIVE"
    FINISHED = "FINISHED"


# Дозволені переходи статусу: тільки вперед
MATCH_STATUS_ORDER = {
    MatchStatus.UPCOMING: 0,
    MatchStatus.LIVE: 1,
    MatchStatus.FINISHED: 2,
}


class Match(Base):
    __tablename__ = "matches"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    game_id = Column(Uuid, ForeignKey("games.id", ondelete="CASCADE"), nullable=False, index=True)
    start_time = Column(DateTime(timezone=True), nullable=False)
    venue = Column(String, nullable=False)

    # Status and result
    status = Column(Enum(MatchStatus), default=MatchStatus.UPCOMING, nullable=False)
    winner_id = Column(Uuid, nullable=True)  # id команди або гравця, не факультету
    finished_at = Column(DateTime(timezone=True), nullable=True)
    points_applied_at = Column(DateTime(timezone=True), nullable=True)  # NULL поки бали не нараховані

    # Metadata
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # Relationships
    game = relationship("Game", back_populates="matches")
    participants = relationship("MatchParticipant", back_populates="match", cascade="all, delete-orphan")

    @property
    def points_applied(self) -> bool:
        return self.points_applied_at is not None
