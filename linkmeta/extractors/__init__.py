"""Parsers — turn fetched markup or API payloads into a NormalizedItem.

Markup parsers query the page with CSS selectors and walk fallback chains,
since a provider's own pages are not consistent with each other. API parsers
read fixed field paths and fail on an unexpected payload shape.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from bs4 import BeautifulSoup

from ..errors import StructuralMismatch
from ..schemas import NormalizedItem


class Parser(ABC):
    """Builds a raw (not yet trimmed) item from a URL and its fetched content."""

    @abstractmethod
    def parse(self, url: str, body: str) -> NormalizedItem:
        ...


def first_non_empty(*candidates: str | None) -> str | None:
    """Return the first candidate holding more than whitespace."""
    for value in candidates:
        if value and value.strip():
            return value
    return None


def make_soup(body: str) -> BeautifulSoup:
    return BeautifulSoup(body, "html.parser")


def select_text(soup: BeautifulSoup, selector: str) -> str | None:
    """Text of the first element matching ``selector``."""
    node = soup.select_one(selector)
    if node is None:
        return None
    return first_non_empty(node.get_text())


def select_all_text(soup: BeautifulSoup, selector: str) -> str | None:
    """Concatenated text of every element matching ``selector``."""
    text = "".join(node.get_text() for node in soup.select(selector))
    return first_non_empty(text)


def select_attr(soup: BeautifulSoup, selector: str, attr: str) -> str | None:
    node = soup.select_one(selector)
    if node is None:
        return None
    value = node.get(attr)
    if isinstance(value, list):  # multi-valued attributes such as rel
        value = " ".join(value)
    return first_non_empty(value)


def meta_content(soup: BeautifulSoup, *, name: str | None = None, prop: str | None = None) -> str | None:
    """``content`` of a ``<meta name=...>`` or ``<meta property=...>`` tag."""
    if name is not None:
        return select_attr(soup, f'meta[name="{name}"]', "content")
    return select_attr(soup, f'meta[property="{prop}"]', "content")


def title_parts(soup: BeautifulSoup) -> list[str]:
    """``<title>`` split on " - ", as book and film sites format it."""
    title = select_text(soup, "title") or ""
    return title.split(" - ")


def load_payload(body: str) -> Any:
    try:
        return json.loads(body)
    except json.JSONDecodeError as exc:
        raise StructuralMismatch(f"payload is not valid JSON: {exc}") from exc
