"""Application settings for rawg-service."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.rawg.io/api"


class Settings(BaseSettings):
    """Runtime settings for the RAWG API connection."""

    model_config = SettingsConfigDict(
        env_prefix="RAWG_SERVICE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    api_key: str = Field(
        default="",
        validation_alias=AliasChoices("RAWG_API_KEY", "RAWG_SERVICE_API_KEY"),
    )
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float | None = None
    user_agent: str = "rawg-service"
