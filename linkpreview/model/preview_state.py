"""State owned by a LinkPreview and the snapshot it hands out."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from bs4 import BeautifulSoup


@dataclass
class PreviewState:
    """
    Source URL plus the document and meta table of the last successful fetch.

    ``document`` and ``meta`` are always replaced together; ``meta`` is empty
    while ``document`` is None.
    """

    url: Optional[str] = None
    document: Optional[BeautifulSoup] = None
    meta: Dict[str, str] = field(default_factory=dict)

    @property
    def is_fetched(self) -> bool:
        return self.document is not None

    def get_meta(self, key: str) -> str:
        """Get a meta tag value, empty string when missing."""
        return self.meta.get(key) or ""

    def __repr__(self) -> str:
        return f"PreviewState(url={self.url}, fetched={self.is_fetched}, meta_keys={list(self.meta.keys())})"


@dataclass(frozen=True)
class PreviewData:
    """The extracted preview facts for one URL."""

    title: str
    description: str
    url: str
    image: str = ""

    @property
    def has_image(self) -> bool:
        return bool(self.image)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "image": self.image,
        }
