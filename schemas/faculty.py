from pydantic import BaseModel, Field
from typing import Optional
from uuid import UUID
from datetime import datetime


class FacultyCreate(BaseModel):
    name: str = Field(..., min_length=2, max_length=100, description="Faculty name (unique)")


class FacultyUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=2, max_length=100)


class FacultyRead(BaseModel):
    id: UUID
    name: str
    total_points: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
