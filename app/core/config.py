from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="allow",
    )

    SLACK_BOT_TOKEN: str | None = None
    SLACK_API_BASE_URL: str = "https://slack.com/api"
    HACKATIME_API_KEY: str | None = None
    HACKATIME_BASE_URL: str = "https://hackatime.hackclub.com/api/v1"
    PORT: int = 0  # 0 = let the OS pick a free port
    APP_ENV: Literal["development", "production"] = "production"
    LOG_LEVEL: str = "INFO"

    EMOJI_CACHE_FILE: str = "emoji.json"
    EMOJI_REFRESH_INTERVAL_SECONDS: int = 60

    # Outbound calls are bounded; a slow upstream must not hold a request forever
    HTTP_TIMEOUT_SECONDS: float = 10.0
    SLACK_MAX_RETRIES: int = 2
    HACKATIME_MAX_RETRIES: int = 1

    TOP_LANGUAGES_LIMIT: int = 3
    DEFAULT_AVATAR_URL: str = "https://www.gravatar.com/avatar/?d=identicon&f=y"


settings = Settings()
