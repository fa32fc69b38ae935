"""
Configuration Module

Every setting comes from an environment variable with a sensible default.
A local .env file is read too (dev convenience; in prod the platform injects env vars).
"""

import os
from datetime import date
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

DATA_DIR = Path(__file__).resolve().parent / "data"


class Config:
    """All settings in one place."""

    APP_ENV = os.getenv("APP_ENV", "local")

    # Database (SQLite file by default; MySQL works via mysql+pymysql://...)
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+pysqlite:///./xordle.db")

    # Game rules
    GAME_NAME = os.getenv("XORDLE_GAME_NAME", "xordle")
    MAX_GUESSES = int(os.getenv("XORDLE_MAX_GUESSES", 6))
    ELIGIBLE_CUTOFF = os.getenv("XORDLE_ELIGIBLE_CUTOFF", "murky")
    EPOCH = date.fromisoformat(os.getenv("XORDLE_EPOCH", "2022-01-01"))
    MAX_DRAWS = int(os.getenv("XORDLE_MAX_DRAWS", 100_000))

    # Word lists
    TARGETS_FILE = Path(os.getenv("XORDLE_TARGETS_FILE", DATA_DIR / "targets.json"))
    DICTIONARY_FILE = Path(os.getenv("XORDLE_DICTIONARY_FILE", DATA_DIR / "dictionary.json"))

    # Practice-mode seeds
    RANDOM_URL = os.getenv("RANDOM_URL", "https://www.random.org/integers/")
    RANDOM_TIMEOUT_SECONDS = float(os.getenv("RANDOM_TIMEOUT_SECONDS", 3.0))

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR")


config = Config()
