"""Shared fixtures: fake content clients, fake HTTP sessions and sample entries."""

import pytest

from catcare_hub import create_app
from catcare_hub.model.article_model import ArticleModel
from catcare_hub.model.content_client import ContentClient, ContentClientError


def make_article_entry(entry_id, slug, publish_date, category="general", title=None, image=None):
    fields = {
        "title": title or slug.replace("-", " ").title(),
        "slug": slug,
        "category": category,
        "excerpt": f"About {slug}",
        "content": {
            "nodeType": "document",
            "data": {},
            "content": [
                {
                    "nodeType": "paragraph",
                    "data": {},
                    "content": [{"nodeType": "text", "value": f"Body of {slug}", "marks": [], "data": {}}],
                }
            ],
        },
        "publishDate": publish_date,
    }
    if image is not None:
        fields["featuredImage"] = image
    return {
        "sys": {"id": entry_id, "contentType": {"sys": {"id": "catCareHub"}}},
        "fields": fields,
    }


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=""):
        self.status_code = status_code
        self._body = body
        self.text = text

    def json(self):
        if self._body is None:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeSession:
    """Records GET requests and replays one canned response or transport error."""

    def __init__(self, response=None, error=None):
        self.headers = {}
        self.response = response
        self.error = error
        self.requests = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.requests.append({"url": url, "params": params, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


def make_client(session, **kwargs):
    return ContentClient("space123", "token456", session=session, **kwargs)


class FakeContentClient:
    """In-memory stand-in for ContentClient that honours the filters the model uses."""

    def __init__(self, entries=None, content_types=None, error=None):
        self.entries = entries or {}
        self.content_types = content_types or []
        self.error = error
        self.calls = []

    def get_entries(self, content_type=None, **query):
        self.calls.append((content_type, query))
        if self.error:
            raise self.error

        items = list(self.entries.get(content_type, []))
        slug = query.get("fields.slug")
        if slug is not None:
            items = [item for item in items if item["fields"].get("slug") == slug]
        if "limit" in query:
            items = items[: query["limit"]]
        return {"items": items, "total": len(items)}

    def get_content_types(self):
        if self.error:
            raise self.error
        return {"items": [{"sys": {"id": ct}} for ct in self.content_types], "total": len(self.content_types)}


@pytest.fixture
def articles():
    return [
        make_article_entry("1", "feeding-basics", "2024-01-10T00:00:00Z", category="care-tasks"),
        make_article_entry("2", "why-cats-purr", "2024-03-05", category="behavior"),
        make_article_entry("3", "litter-box-tips", "2023-11-20T08:30:00+00:00", category="mystery"),
    ]


@pytest.fixture
def fake_client(articles):
    return FakeContentClient(
        entries={"catCareHub": articles},
        content_types=["catCareHub", "productRecommendation", "galleryImage"],
    )


@pytest.fixture
def failing_client():
    return FakeContentClient(error=ContentClientError("HTTP 401 for entries: The access token you sent could not be found or is invalid."))


@pytest.fixture
def model(fake_client):
    return ArticleModel(fake_client)


@pytest.fixture
def app(fake_client):
    return create_app({"TESTING": True}, content_client=fake_client)


@pytest.fixture
def client(app):
    return app.test_client()
