"""Application configuration using Pydantic Settings."""
from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.work_time import WorkTimeConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    debug: bool = False

    # CORS
    cors_origins: str = "http://localhost:3000,http://localhost:8000"

    # Work-time policy defaults
    default_office_hours: float = 9
    default_grace_minutes: float = 0
    default_allow_overwork_minutes: float = 60
    default_warning_threshold_minutes: float = 60

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    def default_work_time_config(self) -> WorkTimeConfig:
        """
        Build the fallback policy used when a request carries none.

        Raises:
            ValueError: If the configured defaults are invalid
        """
        try:
            return WorkTimeConfig(
                office_hours=self.default_office_hours,
                grace_minutes=self.default_grace_minutes,
                allow_overwork_minutes=self.default_allow_overwork_minutes,
                warning_threshold_minutes=self.default_warning_threshold_minutes,
            )
        except ValidationError as e:
            raise ValueError(f"Invalid work time configuration: {e}") from e


settings = Settings()
