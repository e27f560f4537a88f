import logging

import pytest

from sitecontent.schemas.content import ContentRecord
from sitecontent.services.cache import ContentCache
from sitecontent.services.content import ContentService
from sitecontent.services.search import SearchService
from tests.conftest import FakeSource

@pytest.mark.asyncio
async def test_collection_is_fetched_once(cache: ContentCache, source: FakeSource):
    first = await cache.get_collection("post")
    source.collections["post"] = []  # a second real fetch would now differ
    second = await cache.get_collection("post")

    assert second is first
    assert len(first) == 4
    assert source.calls["post"] == 1

@pytest.mark.asyncio
async def test_records_are_normalized(cache: ContentCache):
    posts = await cache.get_posts()

    assert all(isinstance(post, ContentRecord) for post in posts)
    undated = posts[3]
    assert undated.tags == []
    assert undated.category is None
    assert undated.publish_date is None
    assert undated.featured is False

@pytest.mark.asyncio
async def test_fetch_failure_degrades_to_empty(caplog):
    source = FakeSource({"post": [{"slug": "a", "title": "A", "description": "a"}]}, failing=("post",))
    cache = ContentCache(source)

    with caplog.at_level(logging.WARNING, logger="sitecontent.services.cache"):
        posts = await cache.get_posts()

    assert posts == []
    assert "post collection not found" in caplog.text

    # The failure is cached, not retried
    source.failing.clear()
    assert await cache.get_posts() == []
    assert source.calls["post"] == 1

@pytest.mark.asyncio
async def test_failed_collection_empties_aggregators():
    cache = ContentCache(FakeSource(failing=("post", "page")))
    service = ContentService(cache)

    assert await service.get_categories() == []
    assert await service.get_tags() == []
    assert await service.get_recent_posts() == []
    assert await service.get_featured_posts() == []

@pytest.mark.asyncio
async def test_invalid_record_degrades_to_empty():
    # Missing title and description
    cache = ContentCache(FakeSource({"page": [{"slug": "broken"}]}))
    assert await cache.get_pages() == []

@pytest.mark.asyncio
async def test_reset_forces_refetch(cache: ContentCache, source: FakeSource):
    await cache.get_posts()
    await cache.get_pages()

    cache.reset("post")
    assert not cache.is_cached("post")
    assert cache.is_cached("page")

    source.collections["post"] = source.collections["post"][:1]
    assert len(await cache.get_posts()) == 1
    assert source.calls["post"] == 2

    cache.reset()
    assert not cache.is_cached("page")
    await cache.get_pages()
    assert source.calls["page"] == 2

@pytest.mark.asyncio
async def test_reset_allows_retry_after_failure():
    source = FakeSource({"post": [{"slug": "a", "title": "A", "description": "a"}]}, failing=("post",))
    cache = ContentCache(source)
    assert await cache.get_posts() == []

    source.failing.clear()
    cache.reset("post")
    posts = await cache.get_posts()
    assert [post.slug for post in posts] == ["a"]

@pytest.mark.asyncio
async def test_caches_are_independent(source: FakeSource):
    one = ContentCache(source)
    two = ContentCache(source)

    await one.get_posts()
    await two.get_posts()
    assert source.calls["post"] == 2

@pytest.mark.asyncio
async def test_unparsable_date_keeps_the_collection():
    source = FakeSource({"post": [
        {"slug": "a", "title": "Alpha", "description": "first", "publishDate": "January 5, 2024"},
        {"slug": "b", "title": "Beta", "description": "second", "publishDate": "sometime soon"},
        {"slug": "c", "title": "Gamma", "description": "third", "publishDate": "2024-02-01"},
    ]})
    cache = ContentCache(source)

    posts = await cache.get_posts()
    assert [p.slug for p in posts] == ["a", "b", "c"]
    assert posts[0].publish_date.month == 1
    assert posts[1].publish_date is None

    results = await SearchService(cache).search("alpha")
    assert [r.url for r in results] == ["/a"]

    recent = await ContentService(cache).get_recent_posts()
    assert [p.slug for p in recent] == ["c", "a", "b"]
