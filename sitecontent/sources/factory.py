from sitecontent.config import Settings
from sitecontent.sources.base import ContentSource
from sitecontent.sources.filesystem import MarkdownContentSource
from sitecontent.sources.static import StaticContentSource


def build_content_source(settings: Settings) -> ContentSource:
    if settings.CONTENT_SOURCE == "static":
        return StaticContentSource()
    return MarkdownContentSource(settings.CONTENT_DIR)
