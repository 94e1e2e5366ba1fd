from pydantic import BaseModel, Field, field_validator, model_validator
from typing import Optional, List
from uuid import UUID
from datetime import datetime
from models.match import MatchStatus
from models.match_participant import MatchResult


class ParticipantInput(BaseModel):
    team_id: Optional[UUID] = None
    player_id: Optional[UUID] = None

    @model_validator(mode="after")
    def validate_exactly_one_entrant(self):
        if (self.team_id is None) == (self.player_id is None):
            raise ValueError("Exactly one of team_id or player_id must be set")
        return self


def _ensure_unique_entrants(participants: List[ParticipantInput]) -> List[ParticipantInput]:
    entrants = [p.team_id or p.player_id for p in participants]
    if len(entrants) != len(set(entrants)):
        raise ValueError("All participants must be unique")
    return participants


class MatchCreate(BaseModel):
    game_id: UUID
    start_time: datetime
    venue: str = Field(..., min_length=1, max_length=200)
    participants: List[ParticipantInput] = Field(default_factory=list)

    @field_validator("participants")
    @classmethod
    def validate_unique_participants(cls, v):
        return _ensure_unique_entrants(v)


class ParticipantsReplace(BaseModel):
    participants: List[ParticipantInput]

    @field_validator("participants")
    @classmethod
    def validate_unique_participants(cls, v):
        return _ensure_unique_entrants(v)


class MatchUpdate(BaseModel):
    start_time: Optional[datetime] = None
    venue: Optional[str] = Field(None, min_length=1, max_length=200)
    status: Optional[MatchStatus] = None
    winner_id: Optional[UUID] = None

    @field_validator("start_time", "venue", "status")
    @classmethod
    def validate_not_null(cls, v, info):
        # Поле можна не передавати, але не можна очистити (winner_id - можна)
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class ScoreUpdate(BaseModel):
    score: int = Field(..., ge=0)


class DrawUpdate(BaseModel):
    is_draw: bool = True


class ParticipantRead(BaseModel):
    id: UUID
    match_id: UUID
    team_id: Optional[UUID] = None
    player_id: Optional[UUID] = None
    score: int
    points_earned: int
    result: Optional[MatchResult] = None

    class Config:
        from_attributes = True


class MatchRead(BaseModel):
    id: UUID
    game_id: UUID
    start_time: datetime
    venue: str
    status: MatchStatus
    winner_id: Optional[UUID] = None
    finished_at: Optional[datetime] = None
    points_applied_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class MatchWithParticipants(MatchRead):
    participants: List[ParticipantRead] = []
