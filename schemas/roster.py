from pydantic import BaseModel, Field, field_validator
from typing import Optional
from uuid import UUID
from datetime import datetime


# Team schemas
class TeamCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    faculty_id: UUID
    game_id: UUID


class TeamUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    faculty_id: Optional[UUID] = None
    game_id: Optional[UUID] = None

    @field_validator("name", "faculty_id", "game_id")
    @classmethod
    def validate_not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class TeamRead(BaseModel):
    id: UUID
    name: str
    faculty_id: UUID
    game_id: UUID
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# Player schemas
class PlayerCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    faculty_id: UUID
    semester: Optional[str] = None


class PlayerUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    faculty_id: Optional[UUID] = None
    semester: Optional[str] = None  # null очищає семестр

    @field_validator("name", "faculty_id")
    @classmethod
    def validate_not_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class PlayerRead(BaseModel):
    id: UUID
    name: str
    faculty_id: UUID
    semester: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
