from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from datetime import datetime
from models.game import GameType


class GameCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    type: GameType
    point_weight: int = Field(default=1, ge=1, description="Multiplier for all points awarded in this game")
    manager_id: Optional[UUID] = None


class GameUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)
    type: Optional[GameType] = None
    point_weight: Optional[int] = Field(None, ge=1)
    manager_id: Optional[UUID] = None


class GameRead(BaseModel):
    id: UUID
    name: str
    type: GameType
    point_weight: int
    manager_id: Optional[UUID] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
