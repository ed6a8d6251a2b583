from pathlib import Path

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_PER_PAGE = 10
DEFAULT_PROVIDER = "data.posts"


class PaginationSettings(BaseModel):
    """Process-wide pagination defaults."""

    max_per_page: int = Field(default=DEFAULT_MAX_PER_PAGE, gt=0, description="Items per page when a source sets none")
    default_provider: str = Field(default=DEFAULT_PROVIDER, description="Provider reference when a source sets none")


class PermalinkSettings(BaseModel):
    """Permalink configuration."""

    default: str = Field(default="none", description="Permalink style for sources without their own")


class LoggingSettings(BaseModel):
    level: str = Field(default="INFO", description="Root log level")
    file: Path | None = Field(default=None, description="Optional log file")


class FolioConfig(BaseSettings):
    """Root configuration for Folio.

    Supports environment variable overrides with the pattern:
    FOLIO_SECTION__KEY (e.g., FOLIO_PAGINATION__MAX_PER_PAGE)
    """

    pagination: PaginationSettings = Field(default_factory=PaginationSettings)
    permalinks: PermalinkSettings = Field(default_factory=PermalinkSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        extra="ignore",
        env_prefix="FOLIO_",
        env_nested_delimiter="__",
    )
