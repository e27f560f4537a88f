"""
Markdown content source.

Reads `<content_dir>/<collection>/**/*.md` (and `.mdx`) files. Each file may
start with a YAML front matter block delimited by `---` lines; the rest of
the file is the body. The slug comes from a `slug` front matter key or from
the file path relative to the collection directory.
"""
import asyncio
import logging
import re
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Sequence, Tuple

import frontmatter
import yaml

from sitecontent.errors import ContentSourceError
from sitecontent.sources.base import ContentSource

logger = logging.getLogger(__name__)

SLUG_RE = re.compile(r"[^\w]+", re.UNICODE)


def slugify(text: str) -> str:
    text = SLUG_RE.sub("-", text.lower())
    return text.strip("-_").replace("_", "-")


def slug_from_path(relative: Path) -> str:
    parts = [slugify(part) for part in PurePosixPath(relative.with_suffix("").as_posix()).parts]
    return "/".join(part for part in parts if part)


def parse_front_matter(text: str) -> Tuple[Dict[str, Any], str]:
    post = frontmatter.loads(text.lstrip("\ufeff"))
    return dict(post.metadata), post.content


class MarkdownContentSource(ContentSource):
    def __init__(self, content_dir: Path, extensions: Sequence[str] = (".md", ".mdx")):
        self.content_dir = Path(content_dir)
        self.extensions = tuple(extensions)

    async def fetch_collection(self, name: str) -> List[Dict[str, Any]]:
        return await asyncio.to_thread(self.load_collection, name)

    def load_collection(self, name: str) -> List[Dict[str, Any]]:
        self.check_collection(name)
        root = self.content_dir / name
        if not root.is_dir():
            raise ContentSourceError(name, f"collection directory not found: {root}")

        paths = sorted(
            (p for p in root.rglob("*") if p.is_file() and p.suffix.lower() in self.extensions),
            key=lambda p: p.as_posix(),
        )
        entries = [self.load_entry(name, root, path) for path in paths]
        logger.debug("Loaded %d %s entries from %s", len(entries), name, root)
        return entries

    def load_entry(self, name: str, root: Path, path: Path) -> Dict[str, Any]:
        try:
            meta, body = parse_front_matter(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as exc:
            raise ContentSourceError(name, f"cannot read {path}: {exc}") from exc

        slug = str(meta.pop("slug", "") or "").strip() or slug_from_path(path.relative_to(root))
        return {**meta, "slug": slug, "body": body}
