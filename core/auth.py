from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID
from jose import JWTError, jwt
from fastapi import HTTPException, status, Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from core.config import settings
from core.roles import UserRole
from api.deps.db import get_db
from api.crud.user import get_user_by_id
from models.user import User
from schemas.auth import TokenData

security = HTTPBearer()


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def create_access_token(user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
    """JWT для адміна або менеджера гри (sub = id користувача)"""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    claims = {"sub": str(user_id), "exp": expire}
    return jwt.encode(claims, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> TokenData:
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        subject = payload.get("sub")
        if subject is None:
            raise _credentials_error()
        return TokenData(user_id=UUID(subject))
    except (JWTError, ValueError):
        raise _credentials_error()


def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    token_data = decode_access_token(credentials.credentials)
    user = get_user_by_id(db, token_data.user_id)
    if user is None:
        raise _credentials_error()
    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Inactive user")
    return user


def require_role(required_role: UserRole):
    """
    Перевірка ролі з урахуванням ієрархії (ADMIN має всі права MANAGER).

    Приклад:
    @router.post("/apply/{match_id}")
    async def apply(user: User = Depends(require_role(UserRole.ADMIN))):
        ...
    """
    def role_checker(current_user: User = Depends(get_current_user)):
        if not UserRole.has_permission(current_user.role, required_role):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"Access denied. Required role: {required_role.value}"
            )
        return current_user
    return role_checker


get_admin = require_role(UserRole.ADMIN)
get_manager = require_role(UserRole.MANAGER)
