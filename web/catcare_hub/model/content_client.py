"""
Content Client - Thin wrapper around the Contentful Content Delivery API
"""
import logging
from typing import Any, Dict, List, Optional
import requests
from requests.exceptions import RequestException, Timeout, ConnectionError
from ..config import ConfigurationError

logger = logging.getLogger(__name__)


class ContentClientError(Exception):
    """Raised when a content query cannot be completed."""
    pass


class ContentClient:
    """Read-only client for one Contentful space and environment"""

    def __init__(self, space_id: str, access_token: str, environment: str = 'master',
                 host: str = 'cdn.contentful.com', timeout: int = 10,
                 session: Optional[requests.Session] = None):
        """
        Initialize the client with its credentials.

        Args:
            space_id: Contentful space identifier
            access_token: Content Delivery API access token
            environment: Space environment to read from
            host: API host (cdn.contentful.com or preview.contentful.com)
            timeout: Request timeout in seconds
            session: Optional pre-built requests session

        Raises:
            ConfigurationError: If either credential is missing
        """
        if not space_id or not access_token:
            raise ConfigurationError(
                "CONTENTFUL_SPACE_ID and CONTENTFUL_ACCESS_TOKEN must be set"
            )

        self.space_id = space_id
        self.environment = environment
        self.timeout = timeout
        self.base_url = f"https://{host}/spaces/{space_id}/environments/{environment}"

        self.session = session or requests.Session()
        self.session.headers.update({
            'Authorization': f"Bearer {access_token}",
            'Accept': 'application/json',
        })
        logger.info(f"Content client ready for space {space_id} ({environment})")

    def _get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Perform a GET request and return the decoded JSON body"""
        url = f"{self.base_url}/{path}"

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except Timeout as e:
            raise ContentClientError(f"Request timeout for {path}") from e
        except ConnectionError as e:
            raise ContentClientError(f"Connection error for {path}") from e
        except RequestException as e:
            raise ContentClientError(f"Request error for {path}: {e}") from e

        if response.status_code != 200:
            raise ContentClientError(
                f"HTTP {response.status_code} for {path}: {self._error_message(response)}"
            )

        try:
            body = response.json()
        except ValueError as e:
            raise ContentClientError(f"Invalid JSON in response for {path}") from e

        if not isinstance(body, dict):
            raise ContentClientError(f"Unexpected response body for {path}: {type(body).__name__}")
        return body

    @staticmethod
    def _error_message(response) -> str:
        """Extract the API error message from an error response"""
        try:
            body = response.json()
        except ValueError:
            return response.text[:200]
        if not isinstance(body, dict):
            return response.text[:200]
        sys_info = body.get('sys')
        return body.get('message') or (sys_info.get('id', '') if isinstance(sys_info, dict) else '')

    @staticmethod
    def _items(body: Dict[str, Any], path: str) -> List[Dict[str, Any]]:
        """Return the body's item list, rejecting anything that is not a list of objects"""
        items = body.get('items', [])
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            raise ContentClientError(f"Malformed items in response for {path}")
        return items

    def get_entries(self, content_type: Optional[str] = None, **query) -> Dict[str, Any]:
        """
        Query entries, optionally restricted to one content type.

        Extra keyword arguments are passed through as query parameters,
        e.g. ``order='-fields.publishDate'`` or ``limit=1``. Field filters
        use their API names, so pass them with dict unpacking:
        ``get_entries('catCareHub', **{'fields.slug': 'feeding'})``.

        Returns:
            Dictionary with 'items' (entries with linked assets and entries
            resolved from the response includes) and 'total'
        """
        params = dict(query)
        if content_type:
            params['content_type'] = content_type

        logger.debug(f"Querying entries: {params}")
        body = self._get('entries', params=params)

        items = self._items(body, 'entries')
        includes = self._index_includes(body.get('includes'))
        resolved = [self._resolve_entry(item, includes) for item in items]

        return {
            'items': resolved,
            'total': body.get('total', len(resolved))
        }

    def get_content_types(self) -> Dict[str, Any]:
        """List content types defined in the environment"""
        body = self._get('content_types')
        return {
            'items': self._items(body, 'content_types'),
            'total': body.get('total', 0)
        }

    @staticmethod
    def _index_includes(includes: Any) -> Dict[tuple, Dict[str, Any]]:
        """Index included assets and entries by (link type, id); malformed includes are ignored"""
        index = {}
        if not isinstance(includes, dict):
            return index
        for link_type in ('Asset', 'Entry'):
            linked = includes.get(link_type)
            if not isinstance(linked, list):
                continue
            for item in linked:
                sys_info = item.get('sys') if isinstance(item, dict) else None
                item_id = sys_info.get('id') if isinstance(sys_info, dict) else None
                if item_id:
                    index[(link_type, item_id)] = item
        return index

    def _resolve_entry(self, entry: Dict[str, Any], includes: Dict[tuple, Dict[str, Any]]) -> Dict[str, Any]:
        """Replace link references in an entry's fields with included items (one level)"""
        fields = entry.get('fields')
        if not isinstance(fields, dict):
            return entry
        resolved_fields = {
            name: self._resolve_value(value, includes)
            for name, value in fields.items()
        }
        return {**entry, 'fields': resolved_fields}

    @staticmethod
    def _resolve_value(value: Any, includes: Dict[tuple, Dict[str, Any]]) -> Any:
        if isinstance(value, list):
            return [ContentClient._resolve_value(v, includes) for v in value]

        if isinstance(value, dict):
            sys_info = value.get('sys', {})
            if isinstance(sys_info, dict) and sys_info.get('type') == 'Link' and isinstance(sys_info.get('id'), str):
                key = (sys_info.get('linkType'), sys_info.get('id'))
                # Unresolvable links stay as bare references
                return includes.get(key, value)

        return value

    def close(self):
        """Close the underlying HTTP session"""
        self.session.close()
        logger.info("Content client closed")
