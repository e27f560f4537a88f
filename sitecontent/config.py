from pathlib import Path
from typing import Literal, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    SITE_NAME: str = "Kotacom"
    SITE_URL: str = "https://www.kotacom.id"
    ENVIRONMENT: Literal["development", "production"] = "development"
    LOG_LEVEL: str = "INFO"

    # Content configuration
    CONTENT_SOURCE: Literal["markdown", "static"] = "markdown"
    CONTENT_DIR: Path = Path("src/content")

    # Listing configuration
    RECENT_POSTS_LIMIT: int = 5
    FEATURED_POSTS_LIMIT: int = 3
    EXCERPT_LENGTH: int = 120

    @field_validator("SITE_URL", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> str:
        if isinstance(v, str):
            return v.rstrip("/")
        return v

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True)

settings = Settings()
