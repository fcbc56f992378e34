"""
Configuration settings for the Transcript Studio application.
"""

import os
from typing import Dict, Any
from pathlib import Path
from dotenv import load_dotenv


# Ensure environment variables are loaded
load_dotenv()


class Config:
    """Base configuration class."""

    # Application info
    APP_NAME = "Transcript Studio"
    APP_VERSION = "0.1.0"

    BASE_DIR = Path(__file__).resolve().parent.parent.absolute()
    LOGS_DIR = BASE_DIR / "logs"

    # API keys
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")

    # Default models
    ANALYSIS_MODEL = os.getenv("ANALYSIS_MODEL", "gemini-2.5-flash")
    STORY_MODEL = os.getenv("STORY_MODEL", "gemini-2.5-pro")

    # Sampling temperatures per operation
    ANALYSIS_TEMPERATURE = 0.2
    TRANSLATION_TEMPERATURE = 0.1
    STORY_TEMPERATURE = 0.75
    STORY_TRANSLATION_TEMPERATURE = 0.2

    # Average speaking rate used to size a story
    WORDS_PER_MINUTE = 140

    # Story duration slider bounds (minutes)
    MIN_STORY_MINUTES = 1
    MAX_STORY_MINUTES = 15
    DEFAULT_STORY_MINUTES = 5

    DEFAULT_TARGET_LANGUAGE = "Vietnamese"

    # How long the copy button shows its acknowledgment
    COPY_ACK_MS = 2000

    @classmethod
    def initialize(cls):
        """Initialize the application configuration."""
        cls.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    @classmethod
    def get_api_key(cls) -> str:
        """
        Return the Gemini API key.

        Raises:
            ConfigurationMissingError: if no key is configured
        """
        from transcript_studio.utils.error_handling import ConfigurationMissingError

        api_key = cls.GEMINI_API_KEY or os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise ConfigurationMissingError(
                "GEMINI_API_KEY environment variable not set. "
                "Please set it in the .env file or environment variables."
            )
        return api_key

    @classmethod
    def get_settings(cls) -> Dict[str, Any]:
        """Get the non-secret settings, for diagnostics."""
        return {
            "app_name": cls.APP_NAME,
            "version": cls.APP_VERSION,
            "analysis_model": cls.ANALYSIS_MODEL,
            "story_model": cls.STORY_MODEL,
            "words_per_minute": cls.WORDS_PER_MINUTE,
        }


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    LOG_LEVEL = "DEBUG"


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    LOG_LEVEL = "INFO"


# Determine which configuration to use based on environment
def get_config():
    """Get the appropriate configuration based on environment."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    if env == "production":
        return ProductionConfig
    else:
        return DevelopmentConfig


# Create a config instance
config = get_config()
config.initialize()
