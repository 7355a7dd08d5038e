"""Service settings read from the environment (and a local .env file)."""

import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_CORS_ORIGINS = "http://localhost:5173"


def cors_origins() -> List[str]:
    raw = os.getenv("GOLF_TRIP_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def log_level() -> str:
    return os.getenv("GOLF_TRIP_LOG_LEVEL", "INFO").upper()
