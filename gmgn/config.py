from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import BASE_URL


BASE_DIR = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GMGN_",
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # API Settings
    base_url: str = Field(default=BASE_URL, description="Origin every request path is joined to")
    request_timeout_seconds: float = Field(default=30.0, gt=0, description="Overall per-request timeout")
    user_agent: str = Field(default="gmgn-python/0.1.0", description="User-Agent header sent with every request")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    @property
    def normalized_base_url(self) -> str:
        """Base URL with exactly one trailing slash."""
        return self.base_url.rstrip("/") + "/"


# Global settings instance
settings = Settings()
