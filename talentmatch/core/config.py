from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "talentmatch"
    VERSION: str = "0.1.0"
    API_V1_PREFIX: str = "/api/v1"

    # Matching weights (normalized at scoring time, need not sum to 1)
    MATCH_WEIGHT_SKILLS: float = 0.35
    MATCH_WEIGHT_BUDGET: float = 0.20
    MATCH_WEIGHT_AVAILABILITY: float = 0.20
    MATCH_WEIGHT_LOCATION: float = 0.15
    MATCH_WEIGHT_REPUTATION: float = 0.10

    # Matching limits
    MATCH_DEFAULT_LIMIT: int | None = None
    MATCH_MAX_POOL_SIZE: int = 5000

    # Rate limiting
    RATE_LIMIT_STORAGE_URI: str = "memory://"
    RATE_LIMIT_DEFAULT: str = "60/minute"

    # Sentry
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str = "development"

    # App
    CORS_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    model_config = {"env_file": ".env", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
