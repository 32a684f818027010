"""Application configuration."""
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./swift_flow.db"

    # Application
    APP_ENV: str = "development"
    SECRET_KEY: str
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Frontend
    FRONTEND_URL: str = "http://localhost:3000"

    # Auth
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # Exchange rate provider
    EXCHANGE_RATE_API_URL: str = "https://api.exchangerate-api.com/v4/latest/{base}"
    RATE_PROVIDER_TIMEOUT_SECONDS: float = 10.0
    RATE_PROVIDER_RETRIES: int = 0  # 0 = single attempt

    # Historical series
    HISTORICAL_DEFAULT_DAYS: int = 30

    # Rate limiting (100 requests per 15 minutes per client IP)
    RATE_LIMIT_DEFAULT: str = "100/15minutes"

    @property
    def is_development(self) -> bool:
        return self.APP_ENV == "development"

    # CORS
    @property
    def ALLOWED_ORIGINS(self) -> List[str]:
        if self.is_development:
            return ["*"]  # Allow all origins in development
        return [self.FRONTEND_URL]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
