"""
Memory Cache Configuration Settings

This module contains all configuration constants for Memory Cache.
Values can be overridden through environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Cache and command-line configuration settings."""

    # Cache settings
    DEFAULT_TTL: float = float(os.environ.get("MEMORY_CACHE_DEFAULT_TTL", "30"))
    MAX_KEY_LENGTH: int = 256

    # Shell settings
    PROMPT: str = "> "

    # Logging settings
    DEBUG: bool = os.environ.get("MEMORY_CACHE_DEBUG", "false").lower() == "true"
    LOG_LEVEL: str = os.environ.get("MEMORY_CACHE_LOG_LEVEL", "WARNING")


# Global settings instance
settings = Settings()
