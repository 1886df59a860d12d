"""Application configuration loaded from environment variables and .env file."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings.

    Values are loaded from environment variables first,
    then from a .env file in the project root as fallback.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    DATABASE_URL: str = "sqlite:///./adventure_deck.db"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # 시뮬레이션 타이밍
    TICK_RATE: float = 60.0
    BASE_SPEED: float = 30.0  # canvas points / second
    SCAN_DELAY_SECONDS: float = 1.5
    MISSION_DISPLAY_SECONDS: float = 30.0
    REALTIME_DRIVER: bool = True

    # 맵 생성
    DEFAULT_CANVAS_WIDTH: float = 0.0
    DEFAULT_CANVAS_HEIGHT: float = 0.0
    SEARCH_STEP_BUDGET: int = 100_000

    # Audio backend: "log" | "null"
    AUDIO_BACKEND: str = "log"


settings = Settings()
