"""Error kinds raised along the resolution pipeline.

Only ``ProcessingFailed`` reaches callers of ``resolve_item``; the other kinds
are raised by fetchers and parsers and folded into it by the orchestrator.
"""

from __future__ import annotations


class LinkmetaError(Exception):
    """Base class for every error raised by linkmeta."""


class NotFound(LinkmetaError):
    """The generic page fetch got a 404."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Url {url} returned 404")


class IdentifierNotFound(LinkmetaError):
    """A provider identifier could not be located in the URL."""

    def __init__(self, url: str, what: str):
        self.url = url
        self.what = what
        super().__init__(f"Unable to find {what} in {url}")


class StructuralMismatch(LinkmetaError):
    """An API payload does not have the shape its parser expects."""


class TransportFailure(LinkmetaError):
    """Network, auth or HTTP status error from an outgoing request."""

    def __init__(self, url: str, detail: str):
        self.url = url
        self.detail = detail
        super().__init__(f"Request for {url} failed: {detail}")


class ProcessingFailed(LinkmetaError):
    """Unified failure reported for a URL, whatever went wrong underneath."""

    def __init__(self, url: str):
        self.url = url
        super().__init__(f"Something went wrong when parsing {url}")
