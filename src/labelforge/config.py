"""Configuration management using Pydantic Settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Template files shipped with the package
BUNDLED_TEMPLATE_DIR = Path(__file__).parent / "data"


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Template search locations, read in this order
    system_data_dir: Path = Field(default=BUNDLED_TEMPLATE_DIR, alias="LABELFORGE_SYSTEM_DIR")
    user_data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".labelforge", alias="LABELFORGE_USER_DIR"
    )

    # Page size used to filter listings when none is given on the command line
    default_page_size: str | None = Field(default=None, alias="LABELFORGE_DEFAULT_PAGE_SIZE")


# Global settings instance
settings = Settings()
