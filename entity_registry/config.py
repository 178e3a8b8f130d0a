"""
Configuration module for Entity Registry

Loads and validates configuration from environment variables.
"""

import logging
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config:
    """
    Centralized configuration for Entity Registry.

    The registry itself needs no configuration; these settings drive
    logging and the inspection CLI.
    """

    # Logging
    LOG_LEVEL: str = os.getenv("ENTITY_REGISTRY_LOG_LEVEL", "WARNING").upper()

    # CLI display
    SHOW_HANDLES: bool = os.getenv("ENTITY_REGISTRY_SHOW_HANDLES", "true").lower() == "true"

    # Debug
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    @classmethod
    def validate(cls) -> bool:
        """
        Validate the loaded configuration.

        Returns:
            True if configuration is valid

        Raises:
            ValueError: If any setting is invalid
        """
        errors = []

        if cls.LOG_LEVEL not in VALID_LOG_LEVELS:
            errors.append(
                f"ENTITY_REGISTRY_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got '{cls.LOG_LEVEL}'"
            )

        if errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            raise ValueError(error_msg)

        return True

    @classmethod
    def log_level(cls) -> int:
        """
        Numeric logging level to use.

        DEBUG=true always wins; an invalid LOG_LEVEL falls back to WARNING.
        """
        if cls.DEBUG:
            return logging.DEBUG
        if cls.LOG_LEVEL not in VALID_LOG_LEVELS:
            return logging.WARNING
        return getattr(logging, cls.LOG_LEVEL)


# Validate configuration on import
try:
    Config.validate()
    if Config.DEBUG:
        print("[OK] Configuration loaded successfully")
except ValueError as e:
    print(f"[WARNING] Configuration Warning: {e}")
    print("         Please check your .env file")
