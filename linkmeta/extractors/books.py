"""Book parsers — Babelio and Fnac product pages."""

from __future__ import annotations

from ..schemas import ItemType, NormalizedItem
from . import Parser, first_non_empty, make_soup, meta_content, select_attr, select_text, title_parts


class BabelioParser(Parser):
    """Babelio titles read "<book> - <author> - Babelio"."""

    def parse(self, url: str, body: str) -> NormalizedItem:
        soup = make_soup(body)
        parts = title_parts(soup)
        return NormalizedItem(
            title=first_non_empty(parts[0]),
            author=first_non_empty(parts[1]) if len(parts) > 1 else None,
            product_url=url,
            type=ItemType.BOOK.value,
            image_url=meta_content(soup, prop="og:image"),
        )


class FnacParser(Parser):
    def parse(self, url: str, body: str) -> NormalizedItem:
        soup = make_soup(body)
        # Fnac only shows the author strate on some product layouts
        author = first_non_empty(
            select_text(soup, ".authorStrate__name"),
            select_text(soup, ".characteristicsDashboard__definition"),
        )
        return NormalizedItem(
            title=select_text(soup, ".f-productHeader-Title"),
            author=author,
            product_url=url,
            type=ItemType.BOOK.value,
            image_url=select_attr(soup, ".js-ProductVisuals-imagePreview", "src"),
        )
