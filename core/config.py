import os
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]


class Settings:
    def __init__(self):
        self.database_url: str = os.getenv("DATABASE_URL", "sqlite:///./sports_week.db")
        self.debug: bool = os.getenv("DEBUG", "False").lower() == "true"

        cors_env = os.getenv("CORS_ORIGINS", "")
        self.cors_origins: List[str] = (
            [origin.strip() for origin in cors_env.split(",") if origin.strip()]
            or list(DEFAULT_CORS_ORIGINS)
        )

        # JWT
        # ВАЖЛИВО: на проді обов'язково задати JWT_SECRET_KEY через змінні оточення.
        # "fallback-secret" використовується лише для локальної розробки.
        self.jwt_secret_key: str = os.getenv("JWT_SECRET_KEY", "fallback-secret")
        self.jwt_algorithm: str = "HS256"
        self.jwt_expire_minutes: int = int(os.getenv("JWT_EXPIRE_MINUTES", 60 * 24))  # 1 day by default

    @property
    def is_postgres(self) -> bool:
        return self.database_url.startswith("postgres")


settings = Settings()
