"""
View Mapper - Translates content records into template props
"""
import logging
from datetime import date, datetime
from typing import Any, Dict, Optional, Union
from ..model.entities import Article, Asset
from .rich_text import render_rich_text

logger = logging.getLogger(__name__)

PLACEHOLDER_IMAGE = '/placeholder-cat.svg'

CATEGORY_STYLES = {
    'care-tasks': 'bg-blue-100 text-blue-800',
    'behavior': 'bg-purple-100 text-purple-800',
    'general': 'bg-gray-100 text-gray-800',
}


def category_style(category: Optional[str]) -> str:
    """CSS classes for a category badge; unknown categories use the general style"""
    return CATEGORY_STYLES.get(category, CATEGORY_STYLES['general'])


def category_label(category: Optional[str]) -> str:
    """Display label for a category, e.g. 'care-tasks' -> 'CARE TASKS'"""
    return (category or '').replace('-', ' ').upper()


def format_date(value: Union[str, date, datetime, None], long: bool = True) -> str:
    """
    Format a publish date for display.

    Args:
        value: Date, datetime or ISO-8601 string
        long: 'October 5, 2024' when True, 'Oct 5, 2024' otherwise

    Returns:
        Formatted date, or an empty string if the value cannot be parsed
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            logger.debug(f"Unparseable date: {value!r}")
            return ''

    if not isinstance(value, date):
        return ''

    month = value.strftime('%B' if long else '%b')
    return f"{month} {value.day}, {value.year}"


def image_url(asset: Optional[Asset]) -> str:
    """Absolute URL for an asset, or the placeholder image when there is no file"""
    if asset is None or not asset.url:
        return PLACEHOLDER_IMAGE
    if asset.url.startswith('//'):
        return f"https:{asset.url}"
    return asset.url


def article_card(article: Article) -> Dict[str, Any]:
    """Props for an article card in a listing"""
    return {
        'id': article.id,
        'title': article.title,
        'slug': article.slug,
        'excerpt': article.excerpt,
        'category_label': category_label(article.category),
        'category_style': category_style(article.category),
        'date': format_date(article.publish_date, long=False),
        'image_url': image_url(article.featured_image),
        'image_alt': article.title or 'Article image',
    }


def article_page(article: Article) -> Dict[str, Any]:
    """Props for the full article page"""
    return {
        'title': article.title,
        'slug': article.slug,
        'excerpt': article.excerpt,
        'category_label': category_label(article.category),
        'category_style': category_style(article.category),
        'date': format_date(article.publish_date, long=True),
        'iso_date': article.publish_date.isoformat() if article.publish_date else '',
        'image_url': image_url(article.featured_image),
        'content_html': render_rich_text(article.content),
    }
