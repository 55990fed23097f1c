"""
Flask Application Factory
"""
import logging
from datetime import datetime
from flask import Flask
from typing import Optional
from .config import Config
from .model.content_client import ContentClient
from .model.article_model import ArticleModel

logger = logging.getLogger(__name__)


class FlaskApp:
    """Flask application factory wired to one content client"""

    def __init__(self, content_client: Optional[ContentClient] = None):
        self._content_client = content_client
        self._app: Optional[Flask] = None

    def create_app(self, config: Optional[dict] = None) -> Flask:
        """Create and configure the Flask application"""
        if self._app is not None:
            return self._app

        self._app = Flask(
            __name__,
            template_folder='view/templates',
            static_folder='view/static',
            static_url_path=''
        )

        # Default configuration from environment variables
        self._app.config.update(
            SECRET_KEY=Config.SECRET_KEY,
            CONTENTFUL_SPACE_ID=Config.CONTENTFUL_SPACE_ID,
            CONTENTFUL_ACCESS_TOKEN=Config.CONTENTFUL_ACCESS_TOKEN,
            CONTENTFUL_ENVIRONMENT=Config.CONTENTFUL_ENVIRONMENT,
            CONTENTFUL_HOST=Config.CONTENTFUL_HOST,
            REQUEST_TIMEOUT=Config.REQUEST_TIMEOUT
        )

        # Update with custom config if provided
        if config:
            self._app.config.update(config)

        # Initialize content client
        self._init_content_client()

        # Register routes
        self._register_routes()

        @self._app.context_processor
        def inject_current_year():
            return {'current_year': datetime.now().year}

        return self._app

    def _init_content_client(self):
        """Build the content client from app config unless one was injected"""
        if self._content_client is not None:
            logger.debug("Using injected content client")
            return

        # Raises ConfigurationError when credentials are missing
        self._content_client = ContentClient(
            space_id=self._app.config['CONTENTFUL_SPACE_ID'],
            access_token=self._app.config['CONTENTFUL_ACCESS_TOKEN'],
            environment=self._app.config['CONTENTFUL_ENVIRONMENT'],
            host=self._app.config['CONTENTFUL_HOST'],
            timeout=self._app.config['REQUEST_TIMEOUT']
        )

    def _register_routes(self):
        """Register application routes"""
        from .controller.site_controller import SiteController

        site = SiteController(ArticleModel(self._content_client))

        # Page routes
        self._app.add_url_rule('/', 'index', site.index)
        self._app.add_url_rule('/articles/<slug>', 'article', site.article)

        # API routes
        self._app.add_url_rule('/api/articles', 'api_articles', site.get_articles)
        self._app.add_url_rule('/api/articles/<slug>', 'api_article', site.get_article)
        self._app.add_url_rule('/api/products', 'api_products', site.get_products)
        self._app.add_url_rule('/api/gallery', 'api_gallery', site.get_gallery)
        self._app.add_url_rule('/api/health', 'api_health', site.get_health)

    def get_app(self) -> Optional[Flask]:
        """Get the Flask application instance"""
        return self._app

    @property
    def content_client(self) -> Optional[ContentClient]:
        return self._content_client


def create_app(config: Optional[dict] = None, content_client: Optional[ContentClient] = None) -> Flask:
    """Factory function to create Flask app"""
    app_factory = FlaskApp(content_client)
    return app_factory.create_app(config)
