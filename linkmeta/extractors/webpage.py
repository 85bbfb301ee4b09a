"""Website parser — the fallback for any URL no provider claims.

Pulls what most pages expose through <title> and social meta tags.
Fallback chains (first non-empty wins):
  description: meta description → og:description
  author:      twitter:creator → og:site_name → application-name
  image:       twitter:image:src → og:image → host + apple-touch-icon
"""

from __future__ import annotations

from urllib.parse import urlparse

from ..schemas import ItemType, NormalizedItem
from . import Parser, first_non_empty, make_soup, meta_content, select_attr, select_text


def _icon_url(url: str, href: str | None) -> str | None:
    """Join the page host with its touch icon link."""
    if not href:
        return None
    if href.startswith(("http://", "https://", "//")):
        return href
    host = urlparse(url).netloc
    if not host:
        return None
    return f"{host}/{href.lstrip('/')}"


class WebsiteParser(Parser):
    def parse(self, url: str, body: str) -> NormalizedItem:
        soup = make_soup(body)

        description = first_non_empty(
            meta_content(soup, name="description"),
            meta_content(soup, prop="og:description"),
        )
        author = first_non_empty(
            meta_content(soup, name="twitter:creator"),
            meta_content(soup, prop="og:site_name"),
            meta_content(soup, name="application-name"),
        )
        image_url = first_non_empty(
            meta_content(soup, name="twitter:image:src"),
            meta_content(soup, prop="og:image"),
            _icon_url(url, select_attr(soup, 'link[rel="apple-touch-icon"]', "href")),
        )

        return NormalizedItem(
            title=select_text(soup, "title"),
            author=author,
            description=description,
            image_url=image_url,
            product_url=url,
            type=ItemType.WEBSITE.value,
        )
