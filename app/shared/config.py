# app/shared/config.py
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

# Repository root (the directory holding language_profiles/)
PROJECT_ROOT = Path(__file__).resolve().parents[2]


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    CONSOLE = "console"
    JSON = "json"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic; every field can be
    overridden with a PT_-prefixed environment variable or a .env file.
    """

    # --- Application Meta ---
    APP_NAME: str = "Phrase Trainer"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE

    # --- Languages ---
    DEFAULT_LANGUAGE: str = "german"
    LANGUAGE_PROFILES_DIR: Path = PROJECT_ROOT / "language_profiles"

    # --- Generation ---
    # Seeds the process-wide random generator; unset means nondeterministic.
    RANDOM_SEED: Optional[int] = None
    DEFAULT_PHRASE_COUNT: int = 5

    model_config = SettingsConfigDict(env_prefix="PT_", env_file=".env", extra="ignore")


settings = Settings()
