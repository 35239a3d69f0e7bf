# enellerett/shared/config.py
import os
from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Bundled word lists and pages live inside the package.
PACKAGE_DIR = Path(__file__).resolve().parent.parent


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "enellerett"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Server ---
    HOST: str = "0.0.0.0"
    PORT: int = 6969

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "enellerett"
    OTEL_ENABLED: bool = False

    # --- Word Lists ---
    # One lowercase noun per line, UTF-8.
    EN_WORDS_PATH: str = str(PACKAGE_DIR / "data" / "en.txt")
    ETT_WORDS_PATH: str = str(PACKAGE_DIR / "data" / "ett.txt")

    # --- Hit Counting ---
    # Upper bound on increments waiting for the writer thread.
    HIT_QUEUE_SIZE: int = 10_000

    # --- Site ---
    SITE_URL: str = "https://enellerett.se"
    SITEMAP_LASTMOD: str = "2025-06-08"
    STATIC_DIR: str = str(PACKAGE_DIR / "static")

    @property
    def INDEX_PAGE_PATH(self) -> str:
        return os.path.join(self.STATIC_DIR, "index.html")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
