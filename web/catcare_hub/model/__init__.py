"""Model package - Content access and entity records"""
from .content_client import ContentClient, ContentClientError
from .article_model import ArticleModel
from .entities import Article, Asset, GalleryImage, ProductRecommendation

__all__ = [
    'ContentClient',
    'ContentClientError',
    'ArticleModel',
    'Article',
    'Asset',
    'GalleryImage',
    'ProductRecommendation',
]
