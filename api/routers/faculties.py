from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from api.deps.db import get_db
from api.crud import faculty_crud
from core.auth import get_admin
from api.crud.participant_crud import has_applied_results
from core.exceptions import FacultyNotFound, AppliedPointsExist
from models.user import User
from schemas.faculty import FacultyCreate, FacultyUpdate, FacultyRead

router = APIRouter(prefix="/faculties", tags=["Faculties"])


@router.get("", response_model=List[FacultyRead])
async def get_faculties(db: Session = Depends(get_db)):
    return faculty_crud.list_faculties(db)


@router.get("/{faculty_id}", response_model=FacultyRead)
async def get_faculty(faculty_id: UUID, db: Session = Depends(get_db)):
    faculty = faculty_crud.get_faculty(db, faculty_id)
    if not faculty:
        raise FacultyNotFound()
    return faculty


@router.post("", response_model=FacultyRead, status_code=status.HTTP_201_CREATED)
async def create_faculty(
    faculty_data: FacultyCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    return faculty_crud.create_faculty(db, faculty_data)


@router.put("/{faculty_id}", response_model=FacultyRead)
async def update_faculty(
    faculty_id: UUID,
    faculty_update: FacultyUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    faculty = faculty_crud.get_faculty(db, faculty_id)
    if not faculty:
        raise FacultyNotFound()
    return faculty_crud.update_faculty(db, faculty, faculty_update)


@router.delete("/{faculty_id}")
async def delete_faculty(
    faculty_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    """Delete faculty together with its teams, players and their participations"""
    faculty = faculty_crud.get_faculty(db, faculty_id)
    if not faculty:
        raise FacultyNotFound()
    if has_applied_results(db, faculty_id=faculty.id):
        raise AppliedPointsExist("Faculty")
    name = faculty.name
    faculty_crud.delete_faculty(db, faculty)
    return {"message": f"Faculty {name} deleted"}
