from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below

    DB_URL has no default: the server refuses to start without it.
    """

    # Platform ("dev" unlocks the admin reset endpoint)
    platform: str = "prod"

    # Application
    app_name: str = "Chirpy"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # Server
    host: str = "127.0.0.1"
    port: int = 8080

    # Database
    db_url: str

    # Static files served under /app/
    filepath_root: str = "."

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("db_url")
    @classmethod
    def normalize_postgres_scheme(cls, value: str) -> str:
        # lib/pq style URLs (postgres://) are not understood by SQLAlchemy
        if value.startswith("postgres://"):
            return "postgresql://" + value[len("postgres://"):]
        return value

    @property
    def is_dev(self) -> bool:
        return self.platform == "dev"


# Create settings instance
settings = Settings()
