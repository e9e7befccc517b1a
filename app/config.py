# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# Step transitions
_TRANSITION_FRAME_MS = int(os.getenv("TRANSITION_FRAME_MS", "16"))
_TRANSITION_FADE_MS = int(os.getenv("TRANSITION_FADE_MS", "50"))

# Initiatives carousel
_CAROUSEL_TICK_MS = int(os.getenv("CAROUSEL_TICK_MS", "3000"))
_CAROUSEL_SETTLE_MS = int(os.getenv("CAROUSEL_SETTLE_MS", "500"))
_CAROUSEL_COOLDOWN_MS = int(os.getenv("CAROUSEL_COOLDOWN_MS", "4000"))
_CAROUSEL_ITEM_GAP = int(os.getenv("CAROUSEL_ITEM_GAP", "24"))
_CAROUSEL_DEFAULT_ITEM_WIDTH = int(os.getenv("CAROUSEL_DEFAULT_ITEM_WIDTH", "300"))
_CAROUSEL_REPEAT = int(os.getenv("CAROUSEL_REPEAT", "4"))

# Registration store: "local" (in-memory / JSON file) or "http"
_REGISTRATION_STORE = os.getenv("REGISTRATION_STORE", "local").lower()
_REGISTRATION_API_URL = os.getenv("REGISTRATION_API_URL", "http://localhost:8080/api")
_REGISTRATION_API_TIMEOUT = int(os.getenv("REGISTRATION_API_TIMEOUT", "15"))
_LOCAL_STORE_FILE = os.getenv("LOCAL_STORE_FILE", None)

_DEFAULT_COUNTRY_CODE = os.getenv("DEFAULT_COUNTRY_CODE", "+91")

# Console log level (the log file always records DEBUG)
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Save a Turtle"
    APP_TITLE: str = "Save a Turtle - Volunteer Registration"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Save a Turtle"

    # Step transitions (fade window around every screen swap)
    TRANSITION_FRAME_MS: int = _TRANSITION_FRAME_MS  # ~1 frame at 60fps
    TRANSITION_FADE_MS: int = _TRANSITION_FADE_MS
    FADE_ANIMATION_MS: int = 200

    # Initiatives carousel
    CAROUSEL_TICK_MS: int = _CAROUSEL_TICK_MS
    CAROUSEL_SETTLE_MS: int = _CAROUSEL_SETTLE_MS
    CAROUSEL_COOLDOWN_MS: int = _CAROUSEL_COOLDOWN_MS
    CAROUSEL_ITEM_GAP: int = _CAROUSEL_ITEM_GAP
    CAROUSEL_DEFAULT_ITEM_WIDTH: int = _CAROUSEL_DEFAULT_ITEM_WIDTH
    CAROUSEL_REPEAT: int = _CAROUSEL_REPEAT
    CAROUSEL_SCROLL_ANIMATION_MS: int = 400

    # Registration store
    REGISTRATION_STORE: str = _REGISTRATION_STORE
    REGISTRATION_API_URL: str = _REGISTRATION_API_URL
    REGISTRATION_API_TIMEOUT: int = _REGISTRATION_API_TIMEOUT
    LOCAL_STORE_FILE: Optional[str] = _LOCAL_STORE_FILE

    # Registration defaults
    DEFAULT_COUNTRY_CODE: str = _DEFAULT_COUNTRY_CODE
    COUNTRY_CODES: tuple = ("+91", "+1", "+44", "+61", "+65", "+971")

    # Deep link query parameter
    DEEP_LINK_PARAM: str = "org"

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOGGER_NAME: str = "turtlereg"
    LOG_LEVEL: str = _LOG_LEVEL
    LOG_FILE: str = "save_a_turtle.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # UI Settings
    WINDOW_MIN_WIDTH: int = 1100
    WINDOW_MIN_HEIGHT: int = 760
    HEADER_HEIGHT: int = 64

    # Branding Colors
    PRIMARY_COLOR: str = "#0EA5E9"  # sky-500
    SECONDARY_COLOR: str = "#2DD4BF"  # teal
    MIDNIGHT_COLOR: str = "#0F172A"
    CANVAS_COLOR: str = "#F0F9FF"
    TEXT_COLOR: str = "#1E293B"
    TEXT_LIGHT: str = "#64748B"
    ERROR_COLOR: str = "#DC2626"
