from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"

    service_url: str = "https://api.us-south.visual-recognition.watson.cloud.ibm.com"
    api_version: str = "2018-03-19"
    request_timeout_seconds: int = 30

    @property
    def service_base_url(self) -> str:
        return self.service_url.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
