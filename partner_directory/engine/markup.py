"""Markup stripping for upstream description fields."""

from __future__ import annotations

from html import unescape

from selectolax.parser import HTMLParser


def strip_html(value: str | None) -> str | None:
    """Return the visible text of an HTML fragment with whitespace collapsed.

    Upstream descriptions arrive either as raw markup or entity-escaped markup
    (``&lt;p&gt;``), so entities are decoded before parsing.
    """

    if value is None:
        return None
    decoded = unescape(value)
    if "<" not in decoded:
        return " ".join(decoded.split())
    text = HTMLParser(decoded).text(separator=" ", strip=True)
    return " ".join(text.split())


__all__ = ["strip_html"]
