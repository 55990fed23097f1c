"""
Site Entry Point
"""
import logging
import sys

from catcare_hub import create_app
from catcare_hub.config import Config, ConfigurationError, setup_logging


def main():
    """Run the site"""
    setup_logging(Config.SITE_DEBUG)
    logger = logging.getLogger(__name__)

    # Missing credentials are fatal at startup
    try:
        Config.validate()
        app = create_app()
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)

    logger.info(f"Serving Cat Care Hub on {Config.SITE_HOST}:{Config.SITE_PORT}")

    app.run(
        host=Config.SITE_HOST,
        port=Config.SITE_PORT,
        debug=Config.SITE_DEBUG,
        use_reloader=Config.SITE_DEBUG
    )


if __name__ == '__main__':
    main()
