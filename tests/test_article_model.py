"""Tests for ArticleModel: fail-soft listing, slug lookup, secondary content types."""

from conftest import FakeContentClient, FakeResponse, FakeSession, make_article_entry, make_client

from catcare_hub.model.article_model import ArticleModel


def test_get_all_articles_sorted_newest_first(model):
    articles = model.get_all_articles()
    assert [a.slug for a in articles] == ["why-cats-purr", "feeding-basics", "litter-box-tips"]


def test_get_all_articles_requests_publish_date_order(model, fake_client):
    model.get_all_articles()
    content_type, query = fake_client.calls[0]
    assert content_type == "catCareHub"
    assert query["order"] == "-fields.publishDate"


def test_get_all_articles_undated_last():
    client = FakeContentClient(entries={"catCareHub": [
        make_article_entry("1", "undated", None),
        make_article_entry("2", "dated", "2024-02-01"),
    ]})
    articles = ArticleModel(client).get_all_articles()
    assert [a.slug for a in articles] == ["dated", "undated"]


def test_get_all_articles_empty_store():
    assert ArticleModel(FakeContentClient()).get_all_articles() == []


def test_get_all_articles_unreachable_store(failing_client):
    assert ArticleModel(failing_client).get_all_articles() == []


def test_get_all_articles_skips_malformed_entries(articles):
    broken = {"sys": {"id": "bad"}, "fields": {"excerpt": "no title or slug"}}
    client = FakeContentClient(entries={"catCareHub": articles + [broken]})
    articles = ArticleModel(client).get_all_articles()
    assert len(articles) == 3
    assert all(a.id != "bad" for a in articles)


def test_get_article_by_slug_exact_match(model, articles):
    for entry in articles:
        slug = entry["fields"]["slug"]
        article = model.get_article_by_slug(slug)
        assert article is not None
        assert article.slug == slug
        assert article.id == entry["sys"]["id"]


def test_get_article_by_slug_query(model, fake_client):
    model.get_article_by_slug("why-cats-purr")
    content_type, query = fake_client.calls[0]
    assert content_type == "catCareHub"
    assert query == {"limit": 1, "fields.slug": "why-cats-purr"}


def test_get_article_by_slug_absent(model):
    assert model.get_article_by_slug("no-such-article") is None


def test_get_article_by_slug_empty_slug_skips_query(model, fake_client):
    assert model.get_article_by_slug("") is None
    assert fake_client.calls == []


def test_get_article_by_slug_error_returns_none(failing_client):
    assert ArticleModel(failing_client).get_article_by_slug("feeding-basics") is None


def test_get_article_by_slug_ignores_inexact_upstream_match():
    class LooseClient(FakeContentClient):
        def get_entries(self, content_type=None, **query):
            return {"items": [make_article_entry("1", "Feeding-Basics", "2024-01-01")], "total": 1}

    assert ArticleModel(LooseClient()).get_article_by_slug("feeding-basics") is None


def test_article_fields_parsed(model):
    article = model.get_article_by_slug("feeding-basics")
    assert article.title == "Feeding Basics"
    assert article.category == "care-tasks"
    assert article.excerpt == "About feeding-basics"
    assert article.content["nodeType"] == "document"
    assert article.featured_image is None
    assert article.publish_date.year == 2024
    assert article.publish_date.tzinfo is not None


def test_get_product_recommendations():
    client = FakeContentClient(entries={"productRecommendation": [
        {
            "sys": {"id": "p1"},
            "fields": {
                "name": "Scratching Post",
                "description": "Tall sisal post",
                "category": "furniture",
                "affiliateLink": "https://example.com/post",
                "rationale": "Saves the sofa",
            },
        }
    ]})
    products = ArticleModel(client).get_product_recommendations()
    assert len(products) == 1
    assert products[0].name == "Scratching Post"
    assert products[0].image_url is None
    assert products[0].affiliate_link == "https://example.com/post"


def test_get_gallery_images_resolves_image():
    client = FakeContentClient(entries={"galleryImage": [
        {
            "sys": {"id": "g1"},
            "fields": {
                "title": "Sleepy",
                "caption": "Nap time",
                "category": "cute",
                "image": {"sys": {"id": "a1"}, "fields": {"title": "nap", "file": {"url": "//images.ctfassets.net/nap.jpg"}}},
            },
        }
    ]})
    images = ArticleModel(client).get_gallery_images()
    assert images[0].image.url == "//images.ctfassets.net/nap.jpg"
    assert images[0].caption == "Nap time"


def test_secondary_content_types_fail_soft(failing_client):
    model = ArticleModel(failing_client)
    assert model.get_product_recommendations() == []
    assert model.get_gallery_images() == []


def test_check_health(model, failing_client):
    health = model.check_health()
    assert health["content_api_connected"] is True
    assert "catCareHub" in health["content_types"]

    down = ArticleModel(failing_client).check_health()
    assert down["content_api_connected"] is False
    assert "401" in down["error"]


def test_malformed_response_shapes_fail_soft():
    for response in [
        FakeResponse(503, body=["upstream unavailable"], text="Service Unavailable"),
        FakeResponse(200, body={"items": None}),
        FakeResponse(200, body=["not", "an", "object"]),
        FakeResponse(200, body={"items": ["e1", 42]}),
    ]:
        model = ArticleModel(make_client(FakeSession(response)))
        assert model.get_all_articles() == []
        assert model.get_article_by_slug("feeding-basics") is None
        assert model.get_product_recommendations() == []
        assert model.check_health()["content_api_connected"] is False


def test_non_object_items_are_skipped(articles):
    client = FakeContentClient(entries={"catCareHub": ["garbage", None, 7] + articles})
    assert len(ArticleModel(client).get_all_articles()) == 3


def test_entries_with_malformed_sys_or_fields_are_skipped(articles):
    broken = [
        {"sys": "not-a-dict", "fields": {"title": "T", "slug": "s"}},
        {"sys": {"id": "x"}, "fields": ["not", "a", "dict"]},
        {"sys": {"id": "y"}, "fields": {"title": "T", "slug": "t", "featuredImage": {"fields": {"file": "bad"}}}},
    ]
    client = FakeContentClient(entries={"catCareHub": articles + broken})
    slugs = [a.slug for a in ArticleModel(client).get_all_articles()]
    assert "s" not in slugs
    assert "t" in slugs
    assert len(slugs) == 4
