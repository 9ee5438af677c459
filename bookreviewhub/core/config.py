"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "postgres+psycopg2://",
    "sqlite://",
)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = "/api"

    # Postgres location; DATABASE_URL, when set, wins over the individual parts
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_NAME: str = "bookreviewhub"
    DB_USERNAME: str = "postgres"
    DB_PASSWORD: SecretStr = SecretStr("postgres")
    DATABASE_URL: str | None = None

    # JWT authentication
    JWT_SECRET: SecretStr = SecretStr("change-me-in-production")
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 1440

    # Frontend origin allowed by CORS
    CORS_ALLOWED_ORIGIN: str = "http://localhost:3000"

    # When True, 500 responses carry the raw exception message. Keep False in prod.
    EXPOSE_ERROR_DETAILS: bool = False

    @property
    def database_url(self) -> str:
        """Effective SQLAlchemy URL: DATABASE_URL or one built from the DB_* parts."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "postgresql+psycopg2",
            username=self.DB_USERNAME,
            password=self.DB_PASSWORD.get_secret_value(),
            host=self.DB_HOST,
            port=self.DB_PORT,
            database=self.DB_NAME,
        ).render_as_string(hide_password=False)

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        if not any(v.startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a PostgreSQL or SQLite URL "
                "(e.g. postgresql+psycopg2:// or sqlite://)"
            )
        return v.strip()

    @field_validator("DB_HOST", "DB_NAME", "DB_USERNAME")
    @classmethod
    def validate_db_part(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DB_HOST, DB_NAME and DB_USERNAME must be non-empty")
        return v.strip()

    @field_validator("DB_PORT")
    @classmethod
    def validate_db_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("DB_PORT must be between 1 and 65535")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @field_validator("CORS_ALLOWED_ORIGIN")
    @classmethod
    def validate_cors_allowed_origin(cls, v: str) -> str:
        s = v.strip().rstrip("/")
        if not (s.lower().startswith("http://") or s.lower().startswith("https://")):
            raise ValueError(
                "CORS_ALLOWED_ORIGIN must use http or https (e.g. http://localhost:3000)"
            )
        return s

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("JWT_SECRET must be set and non-empty")
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("JWT_EXPIRE_MINUTES")
    @classmethod
    def validate_jwt_expire_minutes(cls, v: int) -> int:
        if v < 1 or v > 10080:
            raise ValueError(
                "JWT_EXPIRE_MINUTES must be between 1 and 10080 (1 min to 7 days)"
            )
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
