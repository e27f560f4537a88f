import textwrap
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sitecontent.data.sample_posts import SAMPLE_POSTS
from sitecontent.sources.base import ContentSource


def post_from_sample(entry: Mapping[str, Any]) -> Dict[str, Any]:
    """Map a bundled sample post onto the post front matter shape."""
    return {
        "slug": entry["slug"],
        "title": entry["title"],
        "description": entry.get("excerpt", ""),
        "body": textwrap.dedent(entry.get("content", "")).strip(),
        "publishDate": entry.get("date"),
        "updateDate": entry.get("modified"),
        "author": entry.get("author"),
        "category": entry.get("category"),
        "tags": entry.get("tags"),
    }


class StaticContentSource(ContentSource):
    """Serves content embedded in the package; there are no static pages."""

    def __init__(
        self,
        posts: Optional[Sequence[Mapping[str, Any]]] = None,
        pages: Optional[Sequence[Mapping[str, Any]]] = None,
    ):
        self.posts = SAMPLE_POSTS if posts is None else posts
        self.pages = [] if pages is None else pages

    async def fetch_collection(self, name: str) -> List[Dict[str, Any]]:
        self.check_collection(name)
        if name == "post":
            return [post_from_sample(entry) for entry in self.posts]
        return [dict(entry) for entry in self.pages]
