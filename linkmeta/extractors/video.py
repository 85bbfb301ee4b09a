"""YouTube parser — video metadata from the YouTube Data API v3 payload.

Only the first entry of ``items`` is used; ``snippet`` and ``statistics``
must both be present.
"""

from __future__ import annotations

from typing import Any

from ..errors import StructuralMismatch
from ..schemas import ItemType, NormalizedItem
from . import Parser, first_non_empty, load_payload


def _thumbnail(snippet: dict[str, Any]) -> str | None:
    thumbnails = snippet.get("thumbnails") or {}
    # Prefer the high resolution thumbnail, degrade to smaller ones
    for size in ("high", "medium", "default"):
        url = (thumbnails.get(size) or {}).get("url")
        if url:
            return url
    return None


class YoutubeApiParser(Parser):
    def parse(self, url: str, body: str) -> NormalizedItem:
        payload = load_payload(body)
        try:
            video = payload["items"][0]
            snippet = video["snippet"]
            statistics = video["statistics"]
        except (KeyError, IndexError, TypeError) as exc:
            raise StructuralMismatch(f"YouTube payload has no usable items[0]: {exc!r}") from exc
        if not isinstance(snippet, dict) or not isinstance(statistics, dict):
            raise StructuralMismatch("YouTube snippet/statistics are not objects")

        return NormalizedItem(
            title=first_non_empty(snippet.get("title")),
            author=first_non_empty(snippet.get("channelTitle")),
            description=first_non_empty(snippet.get("description")),
            image_url=_thumbnail(snippet),
            product_url=url,
            provider="youtube",
            type=ItemType.VIDEO.value,
            meta={
                "viewCount": statistics.get("viewCount"),
                "likeCount": statistics.get("likeCount"),
            },
        )
