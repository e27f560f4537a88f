from typing import AsyncGenerator, Dict, List, Optional

import pytest
from httpx import ASGITransport, AsyncClient

from sitecontent.api.v1.dependencies import get_content_cache
from sitecontent.errors import ContentSourceError
from sitecontent.main import app
from sitecontent.services.cache import ContentCache
from sitecontent.sources.base import ContentSource


class FakeSource(ContentSource):
    """In-memory source that records how often each collection is fetched."""

    def __init__(self, collections: Optional[Dict[str, List[dict]]] = None, failing: tuple = ()):
        self.collections = collections or {}
        self.failing = set(failing)
        self.calls: Dict[str, int] = {}

    async def fetch_collection(self, name: str) -> List[dict]:
        self.calls[name] = self.calls.get(name, 0) + 1
        if name in self.failing:
            raise ContentSourceError(name, "collection not found")
        self.check_collection(name)
        return [dict(item) for item in self.collections.get(name, [])]


@pytest.fixture
def posts() -> List[dict]:
    return [
        {
            "slug": "intro-to-caching",
            "title": "Intro to Caching",
            "description": "Why caches matter",
            "body": "# Caching\n\nA cache keeps <em>hot</em> data close.",
            "category": "Technology",
            "tags": ["performance", "caching"],
            "author": "Kotacom Team",
            "publishDate": "2024-01-01",
            "featured": True,
        },
        {
            "slug": "caching-deep-dive",
            "title": "Caching Deep Dive",
            "description": "Eviction, invalidation and friends",
            "body": "Invalidation is hard.",
            "category": "Technology",
            "tags": ["caching"],
            "author": "Jane Doe",
            "publishDate": "2024-06-01",
            "featured": True,
        },
        {
            "slug": "seo-guide",
            "title": "Guide",
            "description": "Rank better",
            "body": "Everything about seo in one place.",
            "category": "Marketing",
            "tags": ["marketing"],
            "publishDate": "2024-03-15",
        },
        {
            "slug": "undated-note",
            "title": "Undated Note",
            "description": "A note without a date",
            "body": "Nothing to see.",
            "tags": "not-a-list",
        },
    ]


@pytest.fixture
def pages() -> List[dict]:
    return [
        {
            "slug": "seo-basics",
            "title": "SEO Basics",
            "description": "Search engine optimization for beginners",
            "body": "Start with keywords.",
            "category": "Marketing",
        },
        {
            "slug": "privacy",
            "title": "Privacy Policy",
            "description": "How we handle data",
            "body": "We keep very little.",
        },
    ]


@pytest.fixture
def source(posts, pages) -> FakeSource:
    return FakeSource({"post": posts, "page": pages})


@pytest.fixture
def cache(source: FakeSource) -> ContentCache:
    return ContentCache(source)


@pytest.fixture
async def client(cache: ContentCache) -> AsyncGenerator[AsyncClient, None]:
    app.dependency_overrides[get_content_cache] = lambda: cache
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()
