"""
Article Model - Business logic for CMS content
"""
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, TypeVar
from pydantic import ValidationError
from .content_client import ContentClient, ContentClientError
from .entities import (
    ARTICLE_CONTENT_TYPE,
    GALLERY_CONTENT_TYPE,
    PRODUCT_CONTENT_TYPE,
    Article,
    GalleryImage,
    ProductRecommendation,
)

logger = logging.getLogger(__name__)

T = TypeVar('T')

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


class ArticleModel:
    """
    Fail-soft data access for the site's content types.

    Every query method converts transport and query errors into an empty
    list (or None for single lookups) after logging them, so callers only
    ever deal with emptiness.
    """

    def __init__(self, client: ContentClient):
        self.client = client

    def _parse_items(self, items: List[Dict[str, Any]], factory: Callable[[Dict[str, Any]], T]) -> List[T]:
        """Build typed records from raw entries, skipping entries with invalid fields"""
        records = []
        for item in items:
            if not isinstance(item, dict):
                logger.warning(f"Skipping non-object entry of type {type(item).__name__}")
                continue
            try:
                records.append(factory(item))
            except ValidationError as e:
                entry_id = item.get('sys', {}).get('id') if isinstance(item.get('sys'), dict) else None
                logger.warning(f"Skipping malformed entry {entry_id}: {e.error_count()} invalid field(s)")
        return records

    def get_all_articles(self) -> List[Article]:
        """Retrieve all articles, newest first"""
        try:
            response = self.client.get_entries(
                ARTICLE_CONTENT_TYPE,
                order='-fields.publishDate'
            )
        except ContentClientError as e:
            logger.error(f"Error fetching articles: {e}")
            return []

        articles = self._parse_items(response['items'], Article.from_entry)
        # Undated articles sort last
        articles.sort(key=lambda a: a.publish_date or _OLDEST, reverse=True)
        return articles

    def get_article_by_slug(self, slug: str) -> Optional[Article]:
        """Retrieve a single article by its slug"""
        if not slug:
            return None

        try:
            response = self.client.get_entries(
                ARTICLE_CONTENT_TYPE,
                limit=1,
                **{'fields.slug': slug}
            )
        except ContentClientError as e:
            logger.error(f'Error fetching article with slug "{slug}": {e}')
            return None

        for article in self._parse_items(response['items'], Article.from_entry):
            if article.slug == slug:
                return article

        return None

    def get_product_recommendations(self) -> List[ProductRecommendation]:
        """Retrieve all product recommendations"""
        try:
            response = self.client.get_entries(PRODUCT_CONTENT_TYPE)
        except ContentClientError as e:
            logger.error(f"Error fetching product recommendations: {e}")
            return []

        return self._parse_items(response['items'], ProductRecommendation.from_entry)

    def get_gallery_images(self) -> List[GalleryImage]:
        """Retrieve all gallery images"""
        try:
            response = self.client.get_entries(GALLERY_CONTENT_TYPE)
        except ContentClientError as e:
            logger.error(f"Error fetching gallery images: {e}")
            return []

        return self._parse_items(response['items'], GalleryImage.from_entry)

    def check_health(self) -> Dict[str, Any]:
        """Report whether the content API is reachable with the configured credentials"""
        try:
            content_types = self.client.get_content_types()
        except ContentClientError as e:
            logger.error(f"Content API health check failed: {e}")
            return {
                "content_api_connected": False,
                "content_types": [],
                "error": str(e)
            }

        return {
            "content_api_connected": True,
            "content_types": [
                (ct.get('sys') or {}).get('id') for ct in content_types['items']
            ],
            "error": None
        }
