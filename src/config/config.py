"""
Configuration module for Markdown Blog.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of src/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)

PROJECT_ROOT: Path = _project_root


# =============================================================================
# Application Environment
# =============================================================================

# Application environment: "development", "staging", or "production"
APP_ENV: str = os.getenv("APP_ENV", "development")

# Enable Flask debug mode (only honoured outside production)
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"


# =============================================================================
# Content Locations
# =============================================================================

# Directory scanned for *.md posts (relative paths resolve against the cwd)
CONTENT_DIR: str = os.getenv("CONTENT_DIR", "content")

# Jinja2 templates used for the home and post pages
TEMPLATES_DIR: str = os.getenv("TEMPLATES_DIR", str(_project_root / "web" / "templates"))

# Files served under /static
STATIC_DIR: str = os.getenv("STATIC_DIR", str(_project_root / "static"))


# =============================================================================
# Server Configuration
# =============================================================================

HOST: str = os.getenv("HOST", "127.0.0.1")

PORT: int = int(os.getenv("PORT", "8080"))


# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# Empty string: log to console only
LOG_FILE: str = os.getenv("LOG_FILE", "")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


# =============================================================================
# Helper Functions
# =============================================================================

def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV == "production"


def is_development() -> bool:
    """Check if running in development environment."""
    return APP_ENV == "development"


def validate_config() -> list[str]:
    """
    Validate configuration values.

    Returns:
        List of human-readable problems (empty if all valid).
    """
    errors = []

    if not (1 <= PORT <= 65535):
        errors.append(f"PORT must be between 1 and 65535, got {PORT}")

    if not HOST.strip():
        errors.append("HOST cannot be empty")

    if LOG_LEVEL not in VALID_LOG_LEVELS:
        errors.append(f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, got {LOG_LEVEL}")

    if is_production():
        if not Path(CONTENT_DIR).is_dir():
            errors.append(f"CONTENT_DIR does not exist: {CONTENT_DIR}")
        if DEBUG:
            errors.append("DEBUG must be disabled in production")

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration."""
    print(f"  APP_ENV: {APP_ENV}")
    print(f"  DEBUG: {DEBUG}")
    print(f"  CONTENT_DIR: {CONTENT_DIR}")
    print(f"  TEMPLATES_DIR: {TEMPLATES_DIR}")
    print(f"  STATIC_DIR: {STATIC_DIR}")
    print(f"  HOST: {HOST}")
    print(f"  PORT: {PORT}")
    print(f"  LOG_LEVEL: {LOG_LEVEL}")
    print(f"  LOG_FILE: {LOG_FILE or '(console only)'}")
