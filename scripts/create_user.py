"""
Скрипт для створення користувача (ADMIN або MANAGER) і видачі токена доступу
Run with: python3 -m scripts.create_user <username> [ADMIN|MANAGER] [password]
"""
import sys
from datetime import timedelta
from typing import Optional

from db import SessionLocal
from create_tables import Base, engine
from api.crud.user import get_user_by_username, create_user
from core.auth import create_access_token
from core.roles import UserRole
from schemas.auth import UserCreate


def create_user_with_token(username: str, role: UserRole, password: Optional[str] = None,
                           expire_days: int = 30) -> str:
    """Створити користувача (якщо немає) і повернути JWT токен. Без пароля - вхід тільки за токеном."""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        user = get_user_by_username(db, username)
        if user:
            print(f"ℹ️ Користувач '{username}' вже існує (роль: {user.role.value})")
        else:
            user = create_user(db, UserCreate(username=username, role=role, password=password))
            print(f"✅ Користувача створено: {user.username} ({user.role.value})")

        return create_access_token(user.id, expires_delta=timedelta(days=expire_days))
    finally:
        db.close()


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python3 -m scripts.create_user <username> [ADMIN|MANAGER] [password]")
        sys.exit(1)

    role_arg = sys.argv[2].upper() if len(sys.argv) > 2 else UserRole.MANAGER.value
    try:
        role = UserRole(role_arg)
    except ValueError:
        print(f"❌ Невідома роль: {role_arg}")
        sys.exit(1)

    password = sys.argv[3] if len(sys.argv) > 3 else None
    token = create_user_with_token(sys.argv[1], role, password)
    print(f"\n🔑 Access token:\n{token}")
