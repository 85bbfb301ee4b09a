"""linkmeta service — the entry point.

Callers hand ``resolve_item(url)`` any URL and get back a NormalizedItem.

Flow for one URL:
1. Dispatch: pick the first registered provider matching the URL (or the fallback)
2. Fetch: run the provider's fetcher (page GET or API call)
3. Parse: run the provider's parser on the fetched content
4. Normalize: trim title, author and description

Whatever fails in steps 2-3 is logged and re-raised as ProcessingFailed(url).
"""

from __future__ import annotations

import asyncio
import logging

import httpx

from .config import Settings
from .errors import ProcessingFailed
from .registry import ProviderDescriptor, build_fallback, build_registry, select_provider
from .schemas import NormalizedItem

logger = logging.getLogger(__name__)

_TRIMMED_FIELDS = ("title", "author", "description")


def normalize(item: NormalizedItem) -> NormalizedItem:
    """Strip surrounding whitespace from title, author and description.

    Fields that end up empty become None; every other field is left untouched.
    """
    updates = {}
    for field in _TRIMMED_FIELDS:
        value = getattr(item, field)
        if value is not None:
            value = value.strip() or None
        updates[field] = value
    return item.model_copy(update=updates)


class ItemResolver:
    """Resolves URLs against an immutable provider table.

    Safe to share between concurrent ``resolve`` calls: nothing on the
    instance is mutated after construction.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        registry: tuple[ProviderDescriptor, ...] | None = None,
        fallback: ProviderDescriptor | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.settings = settings or Settings()
        self.registry = tuple(registry) if registry is not None else build_registry(self.settings)
        self.fallback = fallback or build_fallback(self.settings)
        self._transport = transport

    def select(self, url: str) -> ProviderDescriptor:
        return select_provider(url, self.registry, self.fallback)

    async def resolve(self, url: str) -> NormalizedItem:
        provider = self.select(url)
        logger.info("Using provider %s for %s", provider.name, url)

        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self.settings.http_timeout,
            ) as client:
                body = await provider.fetcher.fetch(url, client)
            item = provider.parser.parse(url, body)
        except Exception as exc:
            logger.warning(
                "Provider %s failed for %s: %s: %s",
                provider.name, url, type(exc).__name__, exc,
            )
            raise ProcessingFailed(url) from exc

        return normalize(item)


_default_resolver: ItemResolver | None = None


def _get_default_resolver() -> ItemResolver:
    global _default_resolver
    if _default_resolver is None:
        _default_resolver = ItemResolver(Settings.from_env())
    return _default_resolver


async def resolve_item(url: str) -> NormalizedItem:
    """Resolve a URL with the process-wide resolver (configured from env/.env)."""
    return await _get_default_resolver().resolve(url)


async def resolve_batch(
    urls: list[str],
    resolver: ItemResolver | None = None,
) -> list[NormalizedItem | ProcessingFailed]:
    """Resolve independent URLs concurrently.

    Results keep the order of ``urls``; a URL that fails yields its
    ProcessingFailed instead of an item.
    """
    resolver = resolver or _get_default_resolver()
    results = await asyncio.gather(
        *(resolver.resolve(url) for url in urls),
        return_exceptions=True,
    )
    out: list[NormalizedItem | ProcessingFailed] = []
    for result in results:
        if isinstance(result, BaseException) and not isinstance(result, ProcessingFailed):
            raise result
        out.append(result)
    return out
