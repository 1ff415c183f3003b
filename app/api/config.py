"""
API configuration loaded from environment or defaults.
"""

import os
from pathlib import Path
from typing import List, Optional

DEFAULT_ALLOWED_ORIGINS = (
    "http://localhost:8080",
    "http://localhost:3000",
    "http://localhost:8000",
)


def get_movies_path() -> str:
    """Get movie seed file path from env or default."""
    return os.getenv("MOVIES_PATH", "") or str(
        Path(__file__).resolve().parents[2] / "data" / "movies.json"
    )


def get_log_level() -> str:
    """Get log level from env or default."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_log_file() -> Optional[str]:
    """Get log file name from env; None logs to console only."""
    return os.getenv("LOG_FILE") or None


def get_allowed_origins() -> List[str]:
    """Get CORS allow-list from comma-separated env or default."""
    raw = os.getenv("CORS_ORIGINS", "")
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    return origins or list(DEFAULT_ALLOWED_ORIGINS)


def get_api_host() -> str:
    """Get API host for binding."""
    return os.getenv("API_HOST", "0.0.0.0")


def get_api_port() -> int:
    """Get API port."""
    return int(os.getenv("PORT", "1234"))
