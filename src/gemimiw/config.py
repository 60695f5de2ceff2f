"""Environment configuration."""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root (src/gemimiw/config.py -> ./)
PROJECT_ROOT = Path(__file__).parent.parent.parent

load_dotenv(PROJECT_ROOT / ".env")

_default_db_path = PROJECT_ROOT / "data" / "gemimiw.db"

DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite+aiosqlite:///{_default_db_path}")
DATABASE_KEY = os.getenv("DATABASE_KEY", "")

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY", "")
ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")

API_VERSION = os.getenv("API_VERSION", "1.0")
PORT = int(os.getenv("PORT", "6969"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def missing_secrets() -> list[str]:
    """Names of secrets that were left empty."""
    secrets = {
        "DATABASE_KEY": DATABASE_KEY,
        "ANTHROPIC_API_KEY": ANTHROPIC_API_KEY,
    }
    return [name for name, value in secrets.items() if not value]
