import enum
import uuid

from sqlalchemy import Column, Integer, ForeignKey, Enum, UniqueConstraint, CheckConstraint, Uuid
from sqlalchemy.orm import relationship
from db import Base


class MatchResult(str, enum.Enum):
    WIN = "WIN"
    LOSS = "LOSS"
    DRAW = "DRAW"


class MatchParticipant(Base):
    __tablename__ = "match_participants"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    match_id = Column(Uuid, ForeignKey("matches.id", ondelete="CASCADE"), nullable=False, index=True)
    team_id = Column(Uuid, ForeignKey("teams.id", ondelete="CASCADE"), nullable=True, index=True)
    player_id = Column(Uuid, ForeignKey("players.id", ondelete="CASCADE"), nullable=True, index=True)

    score = Column(Integer, nullable=False, default=0)

    # Останній результат розрахунку балів (DRAW може бути виставлений менеджером заздалегідь)
    points_earned = Column(Integer, nullable=False, default=0)
    result = Column(Enum(MatchResult), nullable=True)

    # Relationships
    match = relationship("Match", back_populates="participants")
    team = relationship("Team", back_populates="participations")
    player = relationship("Player", back_populates="participations")

    # Constraints
    __table_args__ = (
        CheckConstraint("(team_id IS NULL) <> (player_id IS NULL)", name="ck_participant_team_xor_player"),
        CheckConstraint("score >= 0", name="ck_participant_score_non_negative"),
        UniqueConstraint("match_id", "team_id", name="unique_match_team"),
        UniqueConstraint("match_id", "player_id", name="unique_match_player"),
    )

    @property
    def entrant_id(self):
        """id команди або гравця - з ним порівнюється Match.winner_id"""
        return self.team_id if self.team_id is not None else self.player_id
