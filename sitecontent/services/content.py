from collections import Counter
from typing import Iterable, List, Optional

from sitecontent.schemas.content import CategoryCount, ContentRecord, TagCount
from sitecontent.services.cache import ContentCache


def count_values(values: Iterable[str]) -> List[tuple]:
    # Counter keeps first-seen order and sorted() is stable, so ties stay in that order
    return sorted(Counter(values).items(), key=lambda item: item[1], reverse=True)


def newest_first(records: Iterable[ContentRecord]) -> List[ContentRecord]:
    return sorted(records, key=lambda record: record.sort_date, reverse=True)


class ContentService:
    def __init__(self, cache: ContentCache):
        self.cache = cache

    async def get_categories(self) -> List[CategoryCount]:
        posts = await self.cache.get_posts()
        pages = await self.cache.get_pages()

        categories = [record.category for record in [*posts, *pages] if record.category]
        return [CategoryCount(category=name, count=count) for name, count in count_values(categories)]

    async def get_tags(self) -> List[TagCount]:
        posts = await self.cache.get_posts()

        tags = [tag for post in posts for tag in post.tags if tag]
        return [TagCount(tag=name, count=count) for name, count in count_values(tags)]

    async def get_recent_posts(self, limit: int = 5) -> List[ContentRecord]:
        posts = await self.cache.get_posts()
        return newest_first(posts)[:limit]

    async def get_featured_posts(self, limit: int = 3) -> List[ContentRecord]:
        posts = await self.cache.get_posts()
        return newest_first(post for post in posts if post.featured)[:limit]

    async def get_post(self, slug: str) -> Optional[ContentRecord]:
        posts = await self.cache.get_posts()
        for post in posts:
            if post.slug == slug:
                return post
        return None

    async def get_posts_by_category(self, category: str) -> List[ContentRecord]:
        posts = await self.cache.get_posts()
        return newest_first(post for post in posts if post.category == category)

    async def get_posts_by_tag(self, tag: str) -> List[ContentRecord]:
        posts = await self.cache.get_posts()
        return newest_first(post for post in posts if tag in post.tags)
