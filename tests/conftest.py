"""Shared fixtures: a resolver wired to an in-memory HTTP transport."""

from __future__ import annotations

import json
from typing import Callable

import httpx
import pytest

from linkmeta.config import Settings
from linkmeta.service import ItemResolver

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings() -> Settings:
    return Settings(github_token="gh-token", youtube_api_key="yt-key")


@pytest.fixture
def make_resolver(settings: Settings):
    def _make(handler: Handler, **kwargs) -> ItemResolver:
        return ItemResolver(settings, transport=httpx.MockTransport(handler), **kwargs)

    return _make


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, text=json.dumps(payload),
                          headers={"Content-Type": "application/json"})


def html_response(body: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, text=body, headers={"Content-Type": "text/html"})
