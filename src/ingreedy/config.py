"""Configuration for the CLI and API using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from ingreedy.parse import MultipartPolicy, ParseOptions


class Settings(BaseSettings):
    """Settings loaded from INGREEDY_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="INGREEDY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Parsing
    multipart_policy: MultipartPolicy = MultipartPolicy.LIST
    strip_of_prefix: bool = False

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    log_file: str | None = None
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    @property
    def parse_options(self) -> ParseOptions:
        """Options handed to the parser."""
        return ParseOptions(
            multipart_policy=self.multipart_policy,
            strip_of_prefix=self.strip_of_prefix,
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
