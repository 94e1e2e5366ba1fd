from sqlalchemy.orm import Session
from typing import List, Optional
from uuid import UUID
from core.exceptions import DuplicateName
from core.security import hash_password
from models.user import User
from schemas.auth import UserCreate, UserUpdate


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_user_by_id(db: Session, user_id: UUID) -> Optional[User]:
    return db.query(User).filter(User.id == user_id).first()


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.username).all()


def create_user(db: Session, user: UserCreate) -> User:
    if get_user_by_username(db, user.username):
        raise DuplicateName("User", user.username)

    db_user = User(
        username=user.username,
        role=user.role,
        password_hash=hash_password(user.password) if user.password else None
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def update_user(db: Session, user: User, user_update: UserUpdate) -> User:
    update_data = user_update.model_dump(exclude_unset=True)

    new_username = update_data.get("username")
    if new_username and new_username != user.username and get_user_by_username(db, new_username):
        raise DuplicateName("User", new_username)

    password = update_data.pop("password", None)
    if password:
        user.password_hash = hash_password(password)

    for field, value in update_data.items():
        setattr(user, field, value)

    db.commit()
    db.refresh(user)
    return user


def delete_user(db: Session, user: User):
    """Ігри користувача залишаються без менеджера"""
    for game in user.managed_games:
        game.manager_id = None
    db.delete(user)
    db.commit()
