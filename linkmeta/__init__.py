"""
linkmeta — metadata records for arbitrary URLs.

Usage:
    from linkmeta import resolve_item, resolve_batch

    # Resolve a single URL
    item = await resolve_item("https://github.com/encode/httpx")
    item.title, item.meta["starsCount"]

    # Resolve several URLs concurrently (order preserved)
    results = await resolve_batch([
        "https://youtu.be/dQw4w9WgXcQ",
        "https://example.org/page",
    ])
"""

from .config import Settings
from .errors import ProcessingFailed
from .schemas import ItemType, NormalizedItem
from .service import ItemResolver, normalize, resolve_batch, resolve_item

__all__ = [
    "ItemResolver",
    "ItemType",
    "NormalizedItem",
    "ProcessingFailed",
    "Settings",
    "normalize",
    "resolve_batch",
    "resolve_item",
]
