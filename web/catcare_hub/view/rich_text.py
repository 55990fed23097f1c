"""
Rich text rendering - Converts CMS rich text documents to HTML fragments.

A document is a tree of nodes: ``{"nodeType": ..., "content": [...], "data": {...}}``,
with ``text`` leaves carrying a ``value`` and a list of ``marks``.
"""
import logging
from typing import Any, Dict, Optional
from urllib.parse import urlparse
from markupsafe import Markup, escape

logger = logging.getLogger(__name__)

BLOCK_CLASSES = {
    'paragraph': ('p', 'mb-6 text-gray-700 leading-relaxed'),
    'heading-1': ('h1', 'text-4xl font-bold text-gray-900 mb-6 mt-8'),
    'heading-2': ('h2', 'text-3xl font-bold text-gray-900 mb-4 mt-8'),
    'heading-3': ('h3', 'text-2xl font-bold text-gray-900 mb-3 mt-6'),
    'heading-4': ('h4', None),
    'heading-5': ('h5', None),
    'heading-6': ('h6', None),
    'unordered-list': ('ul', 'list-disc list-inside mb-6 space-y-2 text-gray-700'),
    'ordered-list': ('ol', 'list-decimal list-inside mb-6 space-y-2 text-gray-700'),
    'list-item': ('li', 'ml-4'),
    'blockquote': ('blockquote', 'border-l-4 border-blue-500 pl-4 italic my-6 text-gray-700'),
}

MARK_TAGS = {
    'bold': 'b',
    'italic': 'i',
    'underline': 'u',
    'code': 'code',
}

HYPERLINK_CLASS = 'text-blue-600 hover:text-blue-800 underline'

SAFE_LINK_SCHEMES = ('http', 'https', 'mailto', '')


class RichTextRenderer:
    """Renders a rich text document node by node"""

    def render(self, document: Optional[Dict[str, Any]]) -> Markup:
        """Render a whole document; an empty or missing document renders as empty markup"""
        if not document:
            return Markup('')
        return self._render_children(document)

    def _render_children(self, node: Dict[str, Any]) -> Markup:
        return Markup('').join(self._render_node(child) for child in node.get('content') or [])

    def _render_node(self, node: Dict[str, Any]) -> Markup:
        node_type = node.get('nodeType')

        if node_type == 'text':
            return self._render_text(node)
        if node_type in BLOCK_CLASSES:
            tag, css_class = BLOCK_CLASSES[node_type]
            return self._wrap(tag, self._render_children(node), css_class)
        if node_type == 'hyperlink':
            return self._render_hyperlink(node)
        if node_type == 'hr':
            return Markup('<hr/>')

        # Unknown node types keep their text but lose their wrapper
        logger.debug(f"No renderer for rich text node type {node_type!r}, rendering children only")
        return self._render_children(node)

    @staticmethod
    def _wrap(tag: str, inner: Markup, css_class: Optional[str] = None) -> Markup:
        if css_class:
            return Markup('<{0} class="{1}">{2}</{0}>').format(tag, css_class, inner)
        return Markup('<{0}>{1}</{0}>').format(tag, inner)

    def _render_text(self, node: Dict[str, Any]) -> Markup:
        lines = str(node.get('value', '')).split('\n')
        html = Markup('<br/>').join(escape(line) for line in lines)

        for mark in node.get('marks') or []:
            tag = MARK_TAGS.get(mark.get('type'))
            if tag:
                html = self._wrap(tag, html)
        return html

    def _render_hyperlink(self, node: Dict[str, Any]) -> Markup:
        children = self._render_children(node)
        uri = str((node.get('data') or {}).get('uri') or '')

        try:
            scheme = urlparse(uri).scheme.lower()
        except ValueError:
            logger.warning(f"Dropping malformed hyperlink: {uri!r}")
            return children

        if scheme not in SAFE_LINK_SCHEMES:
            logger.warning(f"Dropping hyperlink with unsupported scheme: {uri!r}")
            return children

        return Markup(
            '<a href="{0}" class="{1}" target="_blank" rel="noopener noreferrer">{2}</a>'
        ).format(uri, HYPERLINK_CLASS, children)


_renderer = RichTextRenderer()


def render_rich_text(document: Optional[Dict[str, Any]]) -> Markup:
    """Render a rich text document to HTML markup"""
    return _renderer.render(document)
