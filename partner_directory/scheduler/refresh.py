"""Refresh driver: runs the pipeline on a timer and publishes into the cache."""

from __future__ import annotations

from threading import Lock

import structlog

from ..config import RefreshConfig
from ..engine import JoinedCache
from ..logging_conf import component_logger
from ..pipeline import RefreshPipeline, RefreshResult
from .apsched_adapter import APSchedulerAdapter

REFRESH_JOB_ID = "refresh::partners"


class RefreshDriver:
    """Own the idle → fetching → publish/discard → idle cycle."""

    def __init__(
        self,
        pipeline: RefreshPipeline,
        cache: JoinedCache,
        scheduler: APSchedulerAdapter,
        config: RefreshConfig,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.pipeline = pipeline
        self.cache = cache
        self.scheduler = scheduler
        self.config = config
        self.logger = logger or component_logger("refresh")
        self.last_result: RefreshResult | None = None
        self._running = Lock()

    def start(self) -> None:
        """Schedule the periodic job; the first run fires immediately when configured."""

        self.scheduler.schedule_job(
            REFRESH_JOB_ID,
            self.refresh_once,
            self.config.schedule,
            run_immediately=self.config.run_on_startup,
        )
        self.scheduler.start()

    def shutdown(self) -> None:
        self.scheduler.remove_job(REFRESH_JOB_ID)
        self.scheduler.shutdown()

    def refresh_once(self) -> RefreshResult:
        if not self._running.acquire(blocking=False):
            self.logger.warning("refresh_skipped_overlap")
            return RefreshResult(status="skipped", reason="refresh already running")
        try:
            result = self.pipeline.run()
            self._apply(result)
        finally:
            self._running.release()
        self.last_result = result
        return result

    def _apply(self, result: RefreshResult) -> None:
        if not result.ok:
            self.logger.error("refresh_failed", reason=result.reason, cached=len(self.cache))
            return
        if not result.items and not self.config.publish_empty and self.cache.state().loaded:
            self.logger.warning("refresh_empty_suppressed", cached=len(self.cache))
            return
        state = self.cache.publish(result.items)
        result.published = True
        self.logger.info(
            "refresh_published",
            partners=result.partner_count,
            solutions=result.solution_count,
            cached=len(state.items),
            duration=round(result.duration, 3),
        )


__all__ = ["REFRESH_JOB_ID", "RefreshDriver"]
