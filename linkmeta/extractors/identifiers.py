"""Identifier extractors — pull provider ids out of a URL string."""

from __future__ import annotations

import re
from urllib.parse import parse_qs, urlparse

from ..errors import IdentifierNotFound

_TINY_YOUTUBE_RE = re.compile(r"youtu\.be/(?P<video_id>[^/:?#]+)(?:[/:?#]|$)")
_GITHUB_RE = re.compile(
    r"^(?:https?://)?(?:[^./]+\.)?github\.com/(?P<owner>[^/:?#]+)/(?P<repo>[^/:?#]+)"
)


def youtube_id(url: str) -> str:
    """Return the video id of a youtu.be link or a ``?v=`` style YouTube URL."""
    m = _TINY_YOUTUBE_RE.search(url)
    if m:
        return m.group("video_id")

    query = urlparse(url).query
    values = parse_qs(query).get("v") if query else None
    if not values or not values[0]:
        raise IdentifierNotFound(url, "a YouTube video id")
    return values[0]


def github_repo(url: str) -> tuple[str, str]:
    """Extract owner/repo from a GitHub URL."""
    m = _GITHUB_RE.match(url)
    if not m:
        raise IdentifierNotFound(url, "repository and username")
    owner = m.group("owner")
    repo = m.group("repo").removesuffix(".git")
    if not repo:
        raise IdentifierNotFound(url, "repository and username")
    return owner, repo
