"""Response models for the HTTP API (camelCase on the wire)."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..engine import PartnerSolution, Solution
from ..service import Page


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SolutionOut(_CamelModel):
    display_name: str | None = None
    short_description: str | None = None

    @classmethod
    def from_record(cls, record: Solution) -> "SolutionOut":
        return cls(display_name=record.display_name, short_description=record.short_description)


class PartnerSolutionOut(_CamelModel):
    partner_name: str | None = None
    partner_id: str | None = None
    partner_level: str | None = None
    partner_type: str | None = None
    short_description: str | None = None
    company_overview: str | None = None
    solutions: list[SolutionOut] = Field(default_factory=list)

    @classmethod
    def from_record(cls, record: PartnerSolution) -> "PartnerSolutionOut":
        return cls(
            partner_name=record.partner_name,
            partner_id=record.partner_id,
            partner_level=record.partner_level,
            partner_type=record.partner_type,
            short_description=record.short_description,
            company_overview=record.company_overview,
            solutions=[SolutionOut.from_record(item) for item in record.solutions],
        )


class PartnerPageOut(_CamelModel):
    """Page envelope consumed by the directory frontend."""

    content: list[PartnerSolutionOut]
    total_elements: int
    total_pages: int
    number: int
    size: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool

    @classmethod
    def from_page(cls, page: Page) -> "PartnerPageOut":
        return cls(
            content=[PartnerSolutionOut.from_record(item) for item in page.items],
            total_elements=page.total,
            total_pages=page.total_pages,
            number=page.number,
            size=page.limit,
            number_of_elements=len(page.items),
            first=page.is_first,
            last=page.is_last,
            empty=not page.items,
        )


class HealthOut(_CamelModel):
    status: str
    loaded: bool
    partners: int
    last_refresh: datetime | None = None


class ErrorOut(BaseModel):
    timestamp: datetime
    status: int
    message: str
    details: Any = None


__all__ = ["ErrorOut", "HealthOut", "PartnerPageOut", "PartnerSolutionOut", "SolutionOut"]
