# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os
from typing import Optional

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_PROJECT_ROOT = Path(__file__).parent.parent

# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5000")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "true").lower() in ("true", "1", "yes")
_API_TOKEN = os.getenv("API_TOKEN") or None

# Logging
_LOGS_DIR = Path(os.getenv("LOGS_DIR", str(_PROJECT_ROOT / "logs")))

# Wizard behaviour
_RESET_WIZARD_ON_CLOSE = os.getenv("RESET_WIZARD_ON_CLOSE", "false").lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Processing Batch Desk"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Processing Batch Desk"

    # HTTP API Backend Settings
    # Reads from .env (API_BASE_URL, API_TIMEOUT, API_VERIFY_SSL)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_VERIFY_SSL: bool = _API_VERIFY_SSL
    # Bearer token issued by the login flow (optional)
    API_TOKEN: Optional[str] = _API_TOKEN

    # Paths
    LOGS_DIR: Path = _LOGS_DIR

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3

    # Wizard
    # Reset the batch wizard's state when its window is closed or cancelled.
    RESET_WIZARD_ON_CLOSE: bool = _RESET_WIZARD_ON_CLOSE

    # UI Settings
    WINDOW_MIN_WIDTH: int = 900
    WINDOW_MIN_HEIGHT: int = 640


# Page identifiers
class Pages:
    PROCESSING_BATCHES = "processing_batches"


# API endpoints
class Endpoints:
    PROCESSING_BATCHES = "/api/processing-batches"
    PROCUREMENTS = "/api/procurements"
    SALES = "/api/sales"


# Controlled vocabularies
class Vocabularies:
    # Crops offered in the criteria step (the field also accepts free text)
    CROPS = ["Coffee", "Pepper", "Cardamom", "Cocoa"]

    # First stage processing methods (value, display name)
    PROCESS_METHODS = [
        ("wet", "Wet"),
        ("dry", "Dry"),
    ]
