"""
Formatting helpers shared by the content schema and the API layer.

Everything here is pure: no I/O, no access to the content cache.
"""
import re
from datetime import date, datetime, time, timezone
from typing import Any, Optional, Union

import markdown
from markdown.extensions.attr_list import AttrListExtension
from markdown.extensions.fenced_code import FencedCodeExtension
from markdown.extensions.sane_lists import SaneListExtension
from markdown.extensions.tables import TableExtension
from markdown.extensions.toc import TocExtension

TAG_RE = re.compile(r"<[^>]*>")

INVALID_DATE = "Invalid Date"

# Written-out dates accepted besides ISO 8601
DATE_FORMATS = ("%B %d, %Y", "%b %d, %Y", "%d %B %Y", "%d %b %Y", "%Y/%m/%d")

POST_BADGE_COLOR = "bg-blue-100 text-blue-800 dark:bg-blue-900 dark:text-blue-300"
PAGE_BADGE_COLOR = "bg-green-100 text-green-800 dark:bg-green-900 dark:text-green-300"


def coerce_datetime(value: Any) -> Optional[datetime]:
    """
    Turn a date-like value into a UTC-aware datetime.

    Accepts datetimes, dates, ISO 8601 strings ("2024-01-15",
    "2024-01-15T10:30:00Z") and written-out dates ("January 5, 2024").
    Naive values are taken as UTC. Empty values give None; anything
    unparsable raises ValueError, and offsets that push a date past the
    calendar's edge raise OverflowError.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return coerce_datetime(datetime.fromisoformat(text))
        except ValueError:
            pass
        for fmt in DATE_FORMATS:
            try:
                return coerce_datetime(datetime.strptime(text, fmt))
            except ValueError:
                continue
    raise ValueError(f"Not a date: {value!r}")


def format_date(value: Union[str, date, datetime, None]) -> str:
    """Format a date as "Jan 15, 2024"."""
    try:
        parsed = coerce_datetime(value)
    except (ValueError, OverflowError):
        return INVALID_DATE
    if parsed is None:
        return INVALID_DATE
    return f"{parsed:%b} {parsed.day}, {parsed.year}"


def strip_html(html: str, max_length: int = 120) -> str:
    # The ellipsis is always appended, even when nothing was cut
    return TAG_RE.sub("", html)[:max_length] + "..."


def get_type_badge_color(type: str) -> str:
    return POST_BADGE_COLOR if type == "post" else PAGE_BADGE_COLOR


def create_markdown_renderer() -> markdown.Markdown:
    """Create the Markdown renderer used for post bodies."""
    return markdown.Markdown(
        extensions=[
            FencedCodeExtension(),
            TableExtension(),
            TocExtension(permalink=True, permalink_class="anchor-link"),
            SaneListExtension(),
            AttrListExtension(),
        ]
    )


def render_markdown(body: str) -> str:
    return create_markdown_renderer().convert(body)
