"""
Service configuration — Pydantic Settings.

Values come from the environment (or a local ``.env``).  Everything
the transitions endpoint treats as policy (default ``topN``,
self-transitions, fetch cap) is a setting, not a constant.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Application ──────────────────────────────────────────────
    APP_NAME: str = "MillOpsAnalytics"
    APP_ENV: str = "development"
    DEBUG: bool = False
    API_PORT: int = 8000

    # ── Event store (downtime events) ────────────────────────────
    EVENTS_DB_DRIVER: str = "aiomysql"
    EVENTS_DB_HOST: str = "localhost"
    EVENTS_DB_PORT: int = 3306
    EVENTS_DB_NAME: str = "millops"
    EVENTS_DB_USER: str = "root"
    EVENTS_DB_PASSWORD: str = ""
    EVENTS_TABLE: str = "downtime_events"

    # ── Demo data ────────────────────────────────────────────────
    DEMO_MODE: bool = False
    DEMO_SEED: int = 42

    # ── Transitions analysis ─────────────────────────────────────
    TRANSITIONS_DEFAULT_TOP_N: int = 12
    TRANSITIONS_INCLUDE_SELF: bool = True
    TRANSITIONS_MAX_EVENTS: int = 50_000
    TRANSITIONS_BATCH_SIZE: int = 10_000

    # ── Logging ──────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"

    # ── Event store URL ──────────────────────────────────────────

    @property
    def events_db_url(self) -> str:
        """SQLAlchemy async URL for the event store."""
        cred = self.EVENTS_DB_USER
        if self.EVENTS_DB_PASSWORD:
            cred = f"{cred}:{self.EVENTS_DB_PASSWORD}"
        return (
            f"mysql+{self.EVENTS_DB_DRIVER}://{cred}"
            f"@{self.EVENTS_DB_HOST}:{self.EVENTS_DB_PORT}/{self.EVENTS_DB_NAME}"
        )


@lru_cache
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


settings = get_settings()
