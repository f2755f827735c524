"""
Configuration module.

Handles environment variables, content locations, and server settings.
"""

from src.config.config import (
    PROJECT_ROOT,
    APP_ENV,
    DEBUG,
    CONTENT_DIR,
    TEMPLATES_DIR,
    STATIC_DIR,
    HOST,
    PORT,
    LOG_LEVEL,
    LOG_FILE,
    VALID_LOG_LEVELS,
    is_production,
    is_development,
    validate_config,
    print_config_summary,
)

__all__ = [
    "PROJECT_ROOT",
    "APP_ENV",
    "DEBUG",
    "CONTENT_DIR",
    "TEMPLATES_DIR",
    "STATIC_DIR",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "LOG_FILE",
    "VALID_LOG_LEVELS",
    "is_production",
    "is_development",
    "validate_config",
    "print_config_summary",
]
