import os
from dataclasses import dataclass
from typing import List


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    APP_TITLE: str = os.getenv("APP_TITLE", "User Directory API")
    APP_ENV: str = os.getenv("APP_ENV", "development")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FILE: str = os.getenv("LOG_FILE", "")

    UPLOADS_DIR: str = os.getenv("UPLOADS_DIR", "./uploads")
    SEED_USERS: bool = _as_bool(os.getenv("SEED_USERS", "true"))

    ASYNC_FAILURE_RATE: float = float(os.getenv("ASYNC_FAILURE_RATE", "0.5"))
    ASYNC_LATENCY_SECONDS: float = float(os.getenv("ASYNC_LATENCY_SECONDS", "0"))

    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:5173,http://localhost:3000")

    # клиентская часть
    CLIENT_API_BASE_URL: str = os.getenv("CLIENT_API_BASE_URL", "http://localhost:3000")
    CLIENT_INITIAL_USER_ID: int = int(os.getenv("CLIENT_INITIAL_USER_ID", "1"))
    CLIENT_TIMEOUT_SECONDS: float = float(os.getenv("CLIENT_TIMEOUT_SECONDS", "10"))

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() == "production"

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
