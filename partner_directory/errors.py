"""Exception hierarchy for the partner directory."""

from __future__ import annotations


class PartnerDirectoryError(Exception):
    """Base class for all errors raised by this package."""


class FetchError(PartnerDirectoryError):
    """A single upstream request failed (transport or status)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class EnvelopeError(PartnerDirectoryError):
    """Upstream body is not the expected JSON envelope."""


__all__ = ["EnvelopeError", "FetchError", "PartnerDirectoryError"]
