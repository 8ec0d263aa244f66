"""Content-addressed parse cache for chatmark.

Provides (content_hash, config_hash) -> Document caching so a message list
that re-renders the same messages does not re-parse them. Keys are content
hashes, not message ids: an edited message gets a new entry automatically.

Thread Safety:
    DictParseCache is not thread-safe. For parallel parsing, use a cache
    implementation with internal locking (e.g. threading.Lock around get/put).

Example:
    >>> from chatmark import parse, DictParseCache
    >>> cache = DictParseCache()
    >>> doc1 = parse("*hi*", cache=cache)
    >>> doc2 = parse("*hi*", cache=cache)  # Cache hit, no re-parse
    >>> doc1 is doc2
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from chatmark.utils.hashing import hash_str

if TYPE_CHECKING:
    from chatmark.config import ParseConfig
    from chatmark.nodes import Document


class ParseCache(Protocol):
    """Protocol for content-addressed parse caches.

    Cache key is (content_hash, config_hash). Cached value is a Document,
    which is immutable and safe to share.
    """

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        ...

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        ...


class DictParseCache:
    """In-memory parse cache using a dict.

    Not thread-safe. For parallel parsing, wrap with a lock.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[tuple[str, str], Document] = {}

    def get(self, content_hash: str, config_hash: str) -> Document | None:
        """Return cached Document if present, else None."""
        return self._data.get((content_hash, config_hash))

    def put(self, content_hash: str, config_hash: str, doc: Document) -> None:
        """Store Document in cache."""
        self._data[(content_hash, config_hash)] = doc

    def clear(self) -> None:
        """Drop every cached document."""
        self._data.clear()

    def __len__(self) -> int:
        return len(self._data)


def hash_content(source: str) -> str:
    """Compute SHA256 hex digest of a message for the cache key."""
    return hash_str(source)


def hash_config(config: ParseConfig) -> str:
    """Compute hash of ParseConfig for the cache key.

    When text_transformer is set, returns an empty string to disable
    caching: the transformer may depend on state the cache cannot see.

    Returns:
        Hex digest of config hash, or "" if cache should be bypassed
    """
    if config.text_transformer is not None:
        return ""
    return hash_str("text_transformer=None")


__all__ = [
    "DictParseCache",
    "ParseCache",
    "hash_config",
    "hash_content",
]
