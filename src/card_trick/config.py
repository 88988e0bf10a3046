"""Configuration settings for the card trick command line."""

import os
from typing import Optional, Type


def _optional_int(value: Optional[str]) -> Optional[int]:
    """Parse an optional integer setting; empty means unset."""
    if value is None or value.strip() == "":
        return None
    return int(value)


class Config:
    """Base configuration class."""

    # Logging settings
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = os.environ.get("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    # Seed for random hands; None deals a different hand each run
    DEAL_SEED = _optional_int(os.environ.get("DEAL_SEED"))

    # Verification settings
    VERIFY_PROGRESS_EVERY = int(os.environ.get("VERIFY_PROGRESS_EVERY", "100000"))


class DevelopmentConfig(Config):
    """Development configuration."""

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG").upper()


class TestingConfig(Config):
    """Testing configuration."""

    LOG_LEVEL = "WARNING"

    # Reproducible hands in tests
    DEAL_SEED = 0

    # No progress noise in tests
    VERIFY_PROGRESS_EVERY = 0


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "default": Config,
}


def get_config(config_name: Optional[str] = None) -> Type[Config]:
    """Get configuration class based on environment."""
    if config_name is None:
        config_name = os.environ.get("CARD_TRICK_ENV", "default")

    return config.get(config_name, config["default"])
