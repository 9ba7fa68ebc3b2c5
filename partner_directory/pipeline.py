"""Fetch-and-join task run by the refresh driver."""

from __future__ import annotations

import time
from dataclasses import dataclass, field

import structlog

from .config import Settings
from .engine import BatchFetcher, EnvelopeParser, PartnerSolution, ThreadPoolManager, join
from .logging_conf import component_logger


@dataclass(slots=True)
class RefreshResult:
    """Outcome of one pipeline run; publishing is left to the caller."""

    status: str
    items: list[PartnerSolution] = field(default_factory=list)
    partner_count: int = 0
    solution_count: int = 0
    duration: float = 0.0
    reason: str | None = None
    published: bool = False

    @property
    def ok(self) -> bool:
        return self.status == "success"

    @property
    def with_solutions(self) -> int:
        return sum(1 for item in self.items if item.solutions)


class RefreshPipeline:
    """Fetch partners and solutions concurrently, then join them."""

    def __init__(
        self,
        settings: Settings,
        batch_fetcher: BatchFetcher,
        thread_pool: ThreadPoolManager,
        parser: EnvelopeParser | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.settings = settings
        self.batch_fetcher = batch_fetcher
        self.thread_pool = thread_pool
        self.parser = parser or batch_fetcher.fetcher.parser
        self.logger = logger or component_logger("pipeline")

    def run(self) -> RefreshResult:
        started = time.monotonic()
        self.logger.info("pipeline_started")
        try:
            executor = self.thread_pool.get()
            partners_future = executor.submit(
                self.batch_fetcher.fetch_all, self.settings.partners, self.parser.extract_partners
            )
            solutions_future = executor.submit(
                self.batch_fetcher.fetch_all, self.settings.solutions, self.parser.extract_solutions
            )
            partners = partners_future.result()
            solutions = solutions_future.result()
            self.logger.info(
                "pipeline_fetched", partners=len(partners), solutions=len(solutions)
            )
            joined = join(partners, solutions)
        except Exception as exc:  # noqa: BLE001
            self.logger.error("pipeline_failed", error=str(exc), exc_info=True)
            return RefreshResult(
                status="failed",
                duration=time.monotonic() - started,
                reason=str(exc) or exc.__class__.__name__,
            )
        return RefreshResult(
            status="success",
            items=joined,
            partner_count=len(partners),
            solution_count=len(solutions),
            duration=time.monotonic() - started,
        )


__all__ = ["RefreshPipeline", "RefreshResult"]
