"""
Site Controller - Handles page routes and the JSON API
"""
import logging
from flask import render_template, jsonify
from ..model.article_model import ArticleModel
from ..view.mapper import article_card, article_page

logger = logging.getLogger(__name__)


class SiteController:
    """Controller for site pages and content API"""

    def __init__(self, article_model: ArticleModel):
        self.article_model = article_model

    def index(self):
        """Render the home page with the latest articles"""
        try:
            articles = self.article_model.get_all_articles()

            return render_template(
                'index.html',
                articles=[article_card(article) for article in articles]
            )
        except Exception as e:
            logger.exception(f"Error in home page: {e}")
            return render_template('error.html', error=str(e)), 500

    def article(self, slug: str):
        """Render a single article, or the not-found page"""
        try:
            article = self.article_model.get_article_by_slug(slug)

            if article is None:
                return self.not_found()

            return render_template('articles/detail.html', article=article_page(article))
        except Exception as e:
            logger.exception(f"Error in article page {slug}: {e}")
            return render_template('error.html', error=str(e)), 500

    def not_found(self):
        """Render the article not-found page"""
        return render_template('articles/not_found.html'), 404

    def get_articles(self):
        """API endpoint for articles list"""
        try:
            articles = self.article_model.get_all_articles()

            return jsonify({
                "success": True,
                "data": [article.model_dump(mode='json') for article in articles]
            })
        except Exception as e:
            return jsonify({
                "success": False,
                "error": str(e)
            }), 500

    def get_article(self, slug: str):
        """API endpoint for single article"""
        try:
            article = self.article_model.get_article_by_slug(slug)

            if article:
                return jsonify({
                    "success": True,
                    "data": article.model_dump(mode='json')
                })
            else:
                return jsonify({
                    "success": False,
                    "error": "Article not found"
                }), 404
        except Exception as e:
            return jsonify({
                "success": False,
                "error": str(e)
            }), 500

    def get_products(self):
        """API endpoint for product recommendations"""
        try:
            products = self.article_model.get_product_recommendations()

            return jsonify({
                "success": True,
                "data": [product.model_dump(mode='json') for product in products]
            })
        except Exception as e:
            return jsonify({
                "success": False,
                "error": str(e)
            }), 500

    def get_gallery(self):
        """API endpoint for gallery images"""
        try:
            images = self.article_model.get_gallery_images()

            return jsonify({
                "success": True,
                "data": [image.model_dump(mode='json') for image in images]
            })
        except Exception as e:
            return jsonify({
                "success": False,
                "error": str(e)
            }), 500

    def get_health(self):
        """API endpoint for content API health check"""
        try:
            health = self.article_model.check_health()
            status = 200 if health['content_api_connected'] else 503
            return jsonify({
                "success": health['content_api_connected'],
                "data": health
            }), status
        except Exception as e:
            return jsonify({
                "success": False,
                "error": str(e)
            }), 500
