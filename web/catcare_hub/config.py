"""
Configuration management for the Cat Care Hub site.
"""
import logging
import os
import sys
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from root .env file
env_path = Path(__file__).parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path)


class ConfigurationError(Exception):
    """Raised when required configuration is missing."""
    pass


class Config:
    """Configuration class for application settings."""

    # Contentful credentials
    CONTENTFUL_SPACE_ID = os.getenv('CONTENTFUL_SPACE_ID')
    CONTENTFUL_ACCESS_TOKEN = os.getenv('CONTENTFUL_ACCESS_TOKEN')
    CONTENTFUL_ENVIRONMENT = os.getenv('CONTENTFUL_ENVIRONMENT', 'master')
    CONTENTFUL_HOST = os.getenv('CONTENTFUL_HOST', 'cdn.contentful.com')

    # HTTP
    REQUEST_TIMEOUT = int(os.getenv('REQUEST_TIMEOUT')) if os.getenv('REQUEST_TIMEOUT') else 10

    # Web server
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    SITE_HOST = os.getenv('SITE_HOST', '0.0.0.0')
    SITE_PORT = int(os.getenv('SITE_PORT', 5000))
    SITE_DEBUG = os.getenv('SITE_DEBUG', 'False').lower() == 'true'

    @classmethod
    def validate(cls):
        """
        Validate that all required configuration values are set.

        Raises:
            ConfigurationError: If required configuration is missing
        """
        required_vars = {
            'CONTENTFUL_SPACE_ID': cls.CONTENTFUL_SPACE_ID,
            'CONTENTFUL_ACCESS_TOKEN': cls.CONTENTFUL_ACCESS_TOKEN,
        }

        missing = [var for var, value in required_vars.items() if not value]

        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}. "
                f"Please check your .env file."
            )


def setup_logging(verbose: bool = False):
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)]
    )
