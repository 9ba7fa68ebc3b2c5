"""Raw upstream records and the joined output shape."""

from __future__ import annotations

from dataclasses import dataclass, field

from .markup import strip_html


def normalize_name(name: str | None) -> str:
    """Join key: trimmed, lower-cased name; ``None`` becomes the empty string."""

    if name is None:
        return ""
    return name.strip().lower()


@dataclass(slots=True)
class RawPartner:
    """Partner entry as published by the partner directory endpoint."""

    id: str | None
    name: str | None
    partner_level: str | None = None
    partner_type: str | None = None
    short_description: str | None = None
    company_overview: str | None = None

    def __post_init__(self) -> None:
        self.short_description = strip_html(self.short_description)
        self.company_overview = strip_html(self.company_overview)

    @property
    def join_key(self) -> str:
        return normalize_name(self.name)


@dataclass(slots=True)
class RawSolution:
    """Solution entry as published by the application marketplace endpoint."""

    partner_name: str | None
    display_name: str | None = None
    short_description: str | None = None

    def __post_init__(self) -> None:
        self.short_description = strip_html(self.short_description)

    @property
    def joinable(self) -> bool:
        return bool(self.partner_name and self.partner_name.strip())

    @property
    def join_key(self) -> str:
        return normalize_name(self.partner_name)


@dataclass(frozen=True, slots=True)
class Solution:
    display_name: str | None
    short_description: str | None

    @classmethod
    def from_raw(cls, raw: RawSolution) -> "Solution":
        return cls(display_name=raw.display_name, short_description=raw.short_description)


@dataclass(frozen=True, slots=True)
class PartnerSolution:
    """A partner together with every solution published under its name."""

    partner_name: str | None
    partner_id: str | None
    partner_level: str | None
    partner_type: str | None
    short_description: str | None
    company_overview: str | None
    solutions: tuple[Solution, ...] = field(default_factory=tuple)

    @property
    def has_solutions(self) -> bool:
        return bool(self.solutions)


__all__ = ["PartnerSolution", "RawPartner", "RawSolution", "Solution", "normalize_name"]
