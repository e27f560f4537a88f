class SiteContentError(Exception):
    """Base error for the content layer."""


class ContentSourceError(SiteContentError):
    """A content source could not load a collection."""

    def __init__(self, collection: str, message: str):
        self.collection = collection
        super().__init__(f"{collection}: {message}")
