from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (or a .env file).
    """
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Embedded datastore (SQLite file by default)
    DATABASE_URL: str = "sqlite:///./pos.db"

    # Redis cache for product lookups
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_TTL: int = 300
    CACHE_ENABLED: bool = True

    # Celery worker for the sale intake (stock decrement) task
    CELERY_BROKER_URL: str = "redis://localhost:6379/1"
    CELERY_RESULT_BACKEND: str = "redis://localhost:6379/2"
    CELERY_TASK_ALWAYS_EAGER: bool = False

    LOG_LEVEL: str = "INFO"

    # Address the desktop shell starts the API on
    HOST: str = "127.0.0.1"
    PORT: int = 8001

    # Seeded by GET /users/check when no admin exists
    DEFAULT_ADMIN_USERNAME: str = "admin"
    DEFAULT_ADMIN_PASSWORD: str = "admin"


@lru_cache
def get_settings() -> Settings:
    return Settings()
