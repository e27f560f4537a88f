import logging
import time
from functools import cmp_to_key
from typing import Iterable, List, Tuple

from sitecontent.schemas.content import ContentRecord
from sitecontent.schemas.search import SearchResult
from sitecontent.services.cache import ContentCache

logger = logging.getLogger(__name__)

# Site navigation pages that have no content entry of their own
STATIC_PAGES = [
    SearchResult(
        title="Home",
        url="/",
        description="Welcome to Kotacom - Professional IT Services and Web Development",
        type="page",
        category="Main",
    ),
    SearchResult(
        title="About",
        url="/about",
        description="Learn about Kotacom and our mission",
        type="page",
        category="Main",
    ),
    SearchResult(
        title="Services",
        url="/services",
        description="Our comprehensive IT and web development services",
        type="page",
        category="Services",
    ),
    SearchResult(
        title="Portfolio",
        url="/portfolio",
        description="View our completed projects and work samples",
        type="page",
        category="Portfolio",
    ),
    SearchResult(
        title="Contact",
        url="/contact",
        description="Get in touch with our team",
        type="page",
        category="Contact",
    ),
    SearchResult(
        title="Blog",
        url="/blog",
        description="Latest insights, tutorials, and updates",
        type="page",
        category="Blog",
    ),
]


def matches(term: str, fields: Iterable[str]) -> bool:
    return any(term in (field or "").lower() for field in fields)


def post_fields(post: ContentRecord) -> Tuple[str, ...]:
    return (
        post.title,
        post.description,
        post.body,
        post.category or "",
        " ".join(post.tags),
        post.author or "",
    )


def page_fields(page: ContentRecord) -> Tuple[str, ...]:
    return (page.title, page.description, page.body)


def to_result(record: ContentRecord, type: str, default_category: str) -> SearchResult:
    return SearchResult(
        title=record.title,
        url=record.url,
        description=record.description,
        type=type,
        category=record.category or default_category,
        date=record.publish_date,
        author=record.author,
        image=record.image,
    )


def rank(results: List[SearchResult], term: str) -> List[SearchResult]:
    """
    Order results by title match, then posts before pages, then newest first.

    The date rule only applies when both results carry a date; otherwise the
    pair is left in its original order.
    """
    def compare(a: SearchResult, b: SearchResult) -> int:
        a_title = term in a.title.lower()
        b_title = term in b.title.lower()
        if a_title != b_title:
            return -1 if a_title else 1

        if a.type != b.type:
            return -1 if a.type == "post" else 1

        if a.date and b.date:
            if a.date > b.date:
                return -1
            if a.date < b.date:
                return 1
        return 0

    return sorted(results, key=cmp_to_key(compare))


class SearchService:
    def __init__(self, cache: ContentCache):
        self.cache = cache

    async def search(self, query: str) -> List[SearchResult]:
        posts = await self.cache.get_posts()
        pages = await self.cache.get_pages()

        term = query.lower()

        post_results = [to_result(post, "post", "Blog") for post in posts if matches(term, post_fields(post))]
        page_results = [to_result(page, "page", "Page") for page in pages if matches(term, page_fields(page))]
        static_results = [
            page.model_copy() for page in STATIC_PAGES
            if matches(term, (page.title, page.description, page.category))
        ]

        return rank([*post_results, *page_results, *static_results], term)

    async def search_timed(self, query: str) -> Tuple[List[SearchResult], float]:
        start_time = time.time()
        results = await self.search(query)
        duration_ms = (time.time() - start_time) * 1000
        logger.debug("Search %r matched %d results in %.2fms", query, len(results), duration_ms)
        return results, duration_ms
