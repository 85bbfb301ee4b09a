"""Normalized item schema — the record produced for every resolved URL."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemType(str, Enum):
    BOOK = "book"
    ARTICLE = "article"
    REPOSITORY = "repository"
    VIDEO = "video"
    WEBSITE = "website"


class NormalizedItem(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    title: Optional[str] = None
    author: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = Field(default=None, alias="imageUrl")
    product_url: str = Field(alias="productUrl")  # always the input URL, untouched
    provider: Optional[str] = None  # None for generic websites
    # ItemType value, or a path-derived kind for SensCritique ("film", "serie", ...)
    type: str
    meta: Optional[dict[str, Any]] = None
