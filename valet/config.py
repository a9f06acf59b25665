"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. A `.env` file in the working directory
(or any parent) is respected.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv, set_key


# Load .env once at import time
load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
DATA_DIR = os.path.join(PROJECT_ROOT, "data")
ENV_PATH = Path(PROJECT_ROOT) / ".env"


def _env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # Database (root-level data directory by default)
    database_url: str = field(
        default_factory=lambda: os.getenv(
            "DATABASE_URL", "sqlite:///" + os.path.join(DATA_DIR, "valet.db")
        )
    )

    # CSV export target
    export_dir: str = field(
        default_factory=lambda: os.getenv(
            "VALET_EXPORT_DIR", os.path.join(DATA_DIR, "exports")
        )
    )

    # UI preferences
    disable_animations: bool = field(
        default_factory=lambda: _env_flag("VALET_DISABLE_ANIMATIONS")
    )
    toast_ms: int = field(default_factory=lambda: int(os.getenv("VALET_TOAST_MS", "1500")))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("VALET_LOG_LEVEL", "INFO"))


def get_settings() -> Settings:
    """Return a new Settings instance (cheap dataclass construction)."""
    return Settings()


def save_preference(key: str, value: str, env_path: Optional[Path] = None) -> None:
    """Persist a preference to the process environment and the `.env` file.

    The `.env` file is only written when it already exists.
    """
    os.environ[key] = value
    path = env_path or ENV_PATH
    if path.exists():
        set_key(str(path), key, value)
