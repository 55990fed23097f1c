"""View package - Template props mapping and rich text rendering"""
from .mapper import (
    PLACEHOLDER_IMAGE,
    article_card,
    article_page,
    category_label,
    category_style,
    format_date,
    image_url,
)
from .rich_text import RichTextRenderer, render_rich_text

__all__ = [
    'PLACEHOLDER_IMAGE',
    'article_card',
    'article_page',
    'category_label',
    'category_style',
    'format_date',
    'image_url',
    'RichTextRenderer',
    'render_rich_text',
]
