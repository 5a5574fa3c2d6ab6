"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App
    APP_NAME: str = "Lottery Engine"
    APP_ENV: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_FILE: str | None = "logs/app.log"

    # Statistics
    DEFAULT_WINDOW_SIZE: int = 30
    WINDOW_PRESETS: list[int] = [5, 10, 20, 30, 50, 100]

    # Prize analysis
    PRIZE_ANALYSIS_LIMIT: int = 100  # 0 = whole history
    DEFAULT_KL8_PLAY_TYPE: int = 10


settings = Settings()
