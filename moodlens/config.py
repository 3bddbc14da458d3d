from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="MOODLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    search_result_count: int = Field(default=6, ge=1, le=6)
    image_base_url: str = "https://source.unsplash.com"
    image_size: str = "400x400"
    seed: int | None = None


@lru_cache
def get_settings() -> Settings:
    return Settings()
