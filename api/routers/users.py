from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List
from uuid import UUID

from api.deps.db import get_db
from api.crud import user as user_crud
from core.auth import get_admin
from core.exceptions import SportsWeekException, UserNotFound
from models.user import User
from schemas.auth import UserCreate, UserUpdate, UserRead

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=List[UserRead])
async def get_users(db: Session = Depends(get_db), current_user: User = Depends(get_admin)):
    return user_crud.list_users(db)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: UUID, db: Session = Depends(get_db), current_user: User = Depends(get_admin)):
    user = user_crud.get_user_by_id(db, user_id)
    if not user:
        raise UserNotFound()
    return user


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    """Create an admin or a game manager account"""
    if not user_data.password:
        raise SportsWeekException("Password is required")
    return user_crud.create_user(db, user_data)


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: UUID,
    user_update: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    user = user_crud.get_user_by_id(db, user_id)
    if not user:
        raise UserNotFound()
    if user.id == current_user.id and (user_update.role is not None or user_update.is_active is False):
        raise SportsWeekException("You cannot change your own role or deactivate yourself")
    return user_crud.update_user(db, user, user_update)


@router.delete("/{user_id}")
async def delete_user(
    user_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_admin)
):
    user = user_crud.get_user_by_id(db, user_id)
    if not user:
        raise UserNotFound()
    if user.id == current_user.id:
        raise SportsWeekException("You cannot delete your own account")
    username = user.username
    user_crud.delete_user(db, user)
    return {"message": f"User {username} deleted"}
