"""
Entity models - Typed records for the CMS content types.

Each model is built from a raw delivery API entry (``{"sys": ..., "fields": ...}``)
through its ``from_entry`` constructor. All records are read-only snapshots of
content edited in the CMS.
"""
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, field_validator

ARTICLE_CONTENT_TYPE = 'catCareHub'
PRODUCT_CONTENT_TYPE = 'productRecommendation'
GALLERY_CONTENT_TYPE = 'galleryImage'


def _entry_id(entry: Dict[str, Any]) -> Optional[str]:
    sys_info = entry.get('sys')
    return sys_info.get('id') if isinstance(sys_info, dict) else None


def _entry_fields(entry: Dict[str, Any]) -> Dict[str, Any]:
    fields = entry.get('fields')
    return fields if isinstance(fields, dict) else {}


class Asset(BaseModel):
    """A media file attached to an entry."""

    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    content_type: Optional[str] = None

    @classmethod
    def from_link(cls, value: Any) -> Optional['Asset']:
        """Build an asset from a resolved asset link, or None for a bare/missing link."""
        if not isinstance(value, dict) or not isinstance(value.get('fields'), dict):
            return None

        fields = value['fields']
        file_info = fields.get('file')
        if not isinstance(file_info, dict):
            file_info = {}
        return cls(
            id=_entry_id(value),
            title=fields.get('title'),
            url=file_info.get('url'),
            content_type=file_info.get('contentType'),
        )


class Article(BaseModel):
    """A cat care article."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    slug: str
    category: str = 'general'
    excerpt: str = ''
    content: Optional[Dict[str, Any]] = None
    featured_image: Optional[Asset] = None
    publish_date: Optional[datetime] = None

    @field_validator('publish_date', mode='before')
    @classmethod
    def parse_publish_date(cls, value):
        """Accept ISO-8601 strings including date-only values; naive times are UTC."""
        if value is None or value == '':
            return None
        if isinstance(value, str):
            try:
                value = datetime.fromisoformat(value.replace('Z', '+00:00'))
            except ValueError:
                return None
        if isinstance(value, datetime) and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def from_entry(cls, entry: Dict[str, Any]) -> 'Article':
        fields = _entry_fields(entry)
        return cls.model_validate({
            'id': _entry_id(entry),
            'title': fields.get('title'),
            'slug': fields.get('slug'),
            'category': fields.get('category') or 'general',
            'excerpt': fields.get('excerpt') or '',
            'content': fields.get('content'),
            'featured_image': Asset.from_link(fields.get('featuredImage')),
            'publish_date': fields.get('publishDate'),
        })


class ProductRecommendation(BaseModel):
    """A recommended product with an affiliate link."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ''
    category: str = ''
    image_url: Optional[str] = None
    affiliate_link: str = ''
    rationale: str = ''

    @classmethod
    def from_entry(cls, entry: Dict[str, Any]) -> 'ProductRecommendation':
        fields = _entry_fields(entry)
        return cls.model_validate({
            'id': _entry_id(entry),
            'name': fields.get('name'),
            'description': fields.get('description') or '',
            'category': fields.get('category') or '',
            'image_url': fields.get('imageUrl'),
            'affiliate_link': fields.get('affiliateLink') or '',
            'rationale': fields.get('rationale') or '',
        })


class GalleryImage(BaseModel):
    """A captioned image in the photo gallery."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    image: Optional[Asset] = None
    caption: str = ''
    category: str = ''

    @classmethod
    def from_entry(cls, entry: Dict[str, Any]) -> 'GalleryImage':
        fields = _entry_fields(entry)
        return cls.model_validate({
            'id': _entry_id(entry),
            'title': fields.get('title'),
            'image': Asset.from_link(fields.get('image')),
            'caption': fields.get('caption') or '',
            'category': fields.get('category') or '',
        })
