"""Provider registry — routes URLs to a (fetcher, parser) pair.

Providers are tried in declared order and the first matching one wins; when
none matches, the fallback provider (plain page fetch + website parser) is
used. Keep a more specific pattern for a host above a more general one.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .config import Settings
from .extractors import Parser
from .extractors.books import BabelioParser, FnacParser
from .extractors.github import GithubApiParser
from .extractors.medium import MediumParser
from .extractors.senscritique import SensCritiqueParser
from .extractors.video import YoutubeApiParser
from .extractors.webpage import WebsiteParser
from .fetchers import Fetcher, GithubApiFetcher, PageFetcher, YoutubeApiFetcher

# Optional scheme, optional single subdomain label
_PREFIX = r"^(?:https?://)?(?:[^./]+\.)?"


def host_pattern(host: str, path: str = r"(?:[/?#].*)?") -> re.Pattern[str]:
    """Compile a matcher for ``host`` followed by a path pattern."""
    return re.compile(_PREFIX + re.escape(host) + path + "$")


@dataclass(frozen=True)
class ProviderDescriptor:
    name: str
    matcher: re.Pattern[str]
    fetcher: Fetcher
    parser: Parser

    def matches(self, url: str) -> bool:
        return self.matcher.search(url) is not None


def build_registry(settings: Settings | None = None) -> tuple[ProviderDescriptor, ...]:
    """The ordered provider table, with credentials from ``settings``."""
    settings = settings or Settings()
    page = PageFetcher(settings.user_agent)
    github = GithubApiFetcher(settings.github_token, settings.github_api_base)
    youtube = YoutubeApiFetcher(settings.youtube_api_key, settings.youtube_api_base)

    return (
        ProviderDescriptor("Babelio", host_pattern("babelio.com"), page, BabelioParser()),
        ProviderDescriptor("SC", host_pattern("senscritique.com"), page, SensCritiqueParser()),
        ProviderDescriptor("Medium", host_pattern("medium.com"), page, MediumParser()),
        ProviderDescriptor("Fnac", host_pattern("livre.fnac.com"), page, FnacParser()),
        # owner/repo required; github.com/<user> alone goes to the fallback
        ProviderDescriptor(
            "GithubApi",
            host_pattern("github.com", r"/[^/?#:]+/[^/?#:]+(?:[/?#].*)?"),
            github,
            GithubApiParser(),
        ),
        ProviderDescriptor(
            "YoutubeApi",
            host_pattern("youtube.com", r"/watch/?\?(?:.*&)?v=[^&#]+.*"),
            youtube,
            YoutubeApiParser(),
        ),
        ProviderDescriptor(
            "TinyYoutubeApi",
            host_pattern("youtu.be", r"/[\w-]+/?(?:[?#].*)?"),
            youtube,
            YoutubeApiParser(),
        ),
    )


def build_fallback(settings: Settings | None = None) -> ProviderDescriptor:
    settings = settings or Settings()
    return ProviderDescriptor(
        "Fallback", re.compile(r".*", re.DOTALL), PageFetcher(settings.user_agent), WebsiteParser()
    )


def select_provider(
    url: str,
    registry: tuple[ProviderDescriptor, ...],
    fallback: ProviderDescriptor,
) -> ProviderDescriptor:
    """First provider in declared order matching ``url``, else the fallback."""
    for provider in registry:
        if provider.matches(url):
            return provider
    return fallback
