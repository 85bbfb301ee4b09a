"""Medium parser — articles described through Open Graph tags."""

from __future__ import annotations

from ..schemas import ItemType, NormalizedItem
from . import Parser, make_soup, meta_content


class MediumParser(Parser):
    def parse(self, url: str, body: str) -> NormalizedItem:
        soup = make_soup(body)
        return NormalizedItem(
            title=meta_content(soup, prop="og:title"),
            author=meta_content(soup, name="author"),
            description=meta_content(soup, prop="og:description"),
            image_url=meta_content(soup, prop="og:image"),
            product_url=url,
            provider="medium",
            type=ItemType.ARTICLE.value,
        )
