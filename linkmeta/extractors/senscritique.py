"""SensCritique parser — films, series, books, albums...

The kind of work is the first path segment (``/film/...``, ``/livre/...``),
so the item type comes from the URL rather than from the markup.
"""

from __future__ import annotations

from urllib.parse import urlparse

from ..errors import StructuralMismatch
from ..schemas import NormalizedItem
from . import Parser, first_non_empty, make_soup, select_all_text, select_attr, title_parts


def _kind(url: str) -> str:
    # urlparse needs a scheme to find the host; matchers accept bare hosts
    parsed = urlparse(url if "://" in url else f"//{url}")
    segments = [p for p in parsed.path.split("/") if p]
    if not segments:
        raise StructuralMismatch(f"No work kind in SensCritique url {url}")
    return segments[0].lower()


class SensCritiqueParser(Parser):
    def parse(self, url: str, body: str) -> NormalizedItem:
        soup = make_soup(body)
        parts = title_parts(soup)
        author = first_non_empty(
            select_all_text(soup, 'span[itemprop="creator"]'),
            select_all_text(soup, 'span[itemprop="director"]'),
        )
        return NormalizedItem(
            title=first_non_empty(parts[0]),
            author=author,
            product_url=url,
            type=_kind(url),
            image_url=select_attr(soup, ".lightview", "href"),
        )
