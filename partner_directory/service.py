"""Read-side queries over the joined cache."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .engine import JoinedCache, PartnerSolution


@dataclass(frozen=True, slots=True)
class Page:
    """A slice of the (optionally filtered) cache plus the matching total."""

    items: tuple[PartnerSolution, ...]
    total: int
    offset: int
    limit: int

    @property
    def number(self) -> int:
        return self.offset // self.limit

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.total else 0

    @property
    def is_first(self) -> bool:
        return self.number == 0

    @property
    def is_last(self) -> bool:
        return self.number + 1 >= self.total_pages


class QueryService:
    """Serve snapshots and pages of the current cache generation."""

    def __init__(self, cache: JoinedCache) -> None:
        self.cache = cache

    def get_all(self) -> list[PartnerSolution]:
        return list(self.cache.snapshot())

    def get_page(self, offset: int, limit: int, has_solutions_only: bool = False) -> Page:
        if offset < 0:
            raise ValueError("offset must be >= 0")
        if limit < 1:
            raise ValueError("limit must be >= 1")
        snapshot = self.cache.snapshot()
        if has_solutions_only:
            snapshot = tuple(item for item in snapshot if item.solutions)
        total = len(snapshot)
        if offset >= total:
            return Page(items=(), total=total, offset=offset, limit=limit)
        return Page(
            items=snapshot[offset : min(offset + limit, total)],
            total=total,
            offset=offset,
            limit=limit,
        )


__all__ = ["Page", "QueryService"]
