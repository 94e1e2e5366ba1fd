from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from api.deps.db import get_db
from api.crud.user import get_user_by_username
from core.auth import create_access_token, get_current_user
from core.security import verify_password
from models.user import User
from schemas.auth import LoginRequest, Token, UserRead
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login", response_model=Token)
async def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Вхід адміна або менеджера гри за логіном і паролем"""
    user = get_user_by_username(db, credentials.username)

    # Однакова відповідь для невідомого логіна і неправильного пароля
    if not user or not user.password_hash or not verify_password(credentials.password, user.password_hash):
        logger.warning(f"Failed login attempt for '{credentials.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Inactive user")

    logger.info(f"User {user.username} logged in ({user.role.value})")
    return Token(access_token=create_access_token(user.id), user=UserRead.model_validate(user))


@router.get("/me", response_model=UserRead)
async def get_me(current_user: User = Depends(get_current_user)):
    return current_user
