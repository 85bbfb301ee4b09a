"""Fetchers — retrieve the raw content a parser works on.

Three strategies:
  * PageFetcher: plain GET of the URL with browser-like headers.
  * GithubApiFetcher: owner/repo from the URL, then the GitHub REST API.
  * YoutubeApiFetcher: video id from the URL, then the YouTube Data API.

None of them retry; a failure surfaces immediately to the orchestrator.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

import httpx

from .config import DEFAULT_USER_AGENT, GITHUB_API_BASE, YOUTUBE_API_BASE
from .errors import NotFound, TransportFailure
from .extractors.identifiers import github_repo, youtube_id

logger = logging.getLogger(__name__)


class Fetcher(ABC):
    """Retrieves raw content (markup or a JSON payload) for a URL."""

    @abstractmethod
    async def fetch(self, url: str, client: httpx.AsyncClient) -> str:
        ...


class PageFetcher(Fetcher):
    """GET the page itself. Some websites reject requests without a real user agent."""

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT):
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.9",
        }

    async def fetch(self, url: str, client: httpx.AsyncClient) -> str:
        logger.debug("Fetching page: %s", url)
        try:
            resp = await client.get(url, headers=self.headers, follow_redirects=True)
        except httpx.HTTPError as exc:
            raise TransportFailure(url, str(exc)) from exc

        if resp.status_code == 404:
            raise NotFound(url)
        if resp.status_code >= 400:
            # Lenient: the body still goes to the parser.
            logger.warning("Page %s answered %d, parsing body anyway", url, resp.status_code)
        return resp.text


async def _get_json_text(
    client: httpx.AsyncClient,
    url: str,
    api_url: str,
    headers: dict[str, str],
    params: dict[str, str] | None = None,
) -> str:
    try:
        resp = await client.get(api_url, headers=headers, params=params)
        resp.raise_for_status()
    except httpx.HTTPError as exc:
        raise TransportFailure(url, str(exc)) from exc
    return resp.text


class GithubApiFetcher(Fetcher):
    """Repository metadata from ``GET /repos/{owner}/{repo}``."""

    def __init__(self, token: str = "", api_base: str = GITHUB_API_BASE):
        self.api_base = api_base.rstrip("/")
        self.headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "linkmeta (url metadata resolver)",
        }
        if token:
            self.headers["Authorization"] = f"Bearer {token}"

    async def fetch(self, url: str, client: httpx.AsyncClient) -> str:
        owner, repo = github_repo(url)
        api_url = f"{self.api_base}/repos/{owner}/{repo}"
        logger.debug("Fetching GitHub API: %s", api_url)
        return await _get_json_text(client, url, api_url, self.headers)


class YoutubeApiFetcher(Fetcher):
    """Video snippet and statistics from the YouTube Data API v3."""

    def __init__(self, api_key: str = "", api_base: str = YOUTUBE_API_BASE):
        self.api_key = api_key
        self.api_base = api_base.rstrip("/")
        self.headers = {"Accept": "application/json"}

    async def fetch(self, url: str, client: httpx.AsyncClient) -> str:
        video_id = youtube_id(url)
        api_url = f"{self.api_base}/videos"
        logger.debug("Fetching YouTube API for video %s", video_id)
        params = {
            "part": "statistics,contentDetails,snippet",
            "id": video_id,
            "key": self.api_key,
        }
        return await _get_json_text(client, url, api_url, self.headers, params)
