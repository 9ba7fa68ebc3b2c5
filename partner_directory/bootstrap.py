"""Wiring of the long-lived service objects."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from .config import ConfigRepository, Settings
from .engine import BatchFetcher, Fetcher, JoinedCache, ThreadPoolManager
from .logging_conf import configure_logging
from .pipeline import RefreshPipeline
from .scheduler import APSchedulerAdapter, RefreshDriver
from .service import QueryService


@dataclass
class AppState:
    settings: Settings
    thread_pool: ThreadPoolManager
    fetcher: Fetcher
    cache: JoinedCache
    pipeline: RefreshPipeline
    driver: RefreshDriver
    queries: QueryService

    def close(self) -> None:
        self.fetcher.close()
        self.thread_pool.shutdown()


def build_state(
    verbose: bool = False,
    repository: ConfigRepository | None = None,
    settings: Settings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> AppState:
    configure_logging(verbose=verbose)
    if settings is None:
        settings = (repository or ConfigRepository()).load_settings()
    thread_pool = ThreadPoolManager()
    fetcher = Fetcher(settings.http, transport=transport)
    batch_fetcher = BatchFetcher(fetcher, thread_pool, settings.http.fetch_timeout)
    cache = JoinedCache()
    pipeline = RefreshPipeline(settings, batch_fetcher, thread_pool)
    driver = RefreshDriver(pipeline, cache, APSchedulerAdapter(), settings.refresh)
    return AppState(
        settings=settings,
        thread_pool=thread_pool,
        fetcher=fetcher,
        cache=cache,
        pipeline=pipeline,
        driver=driver,
        queries=QueryService(cache),
    )


__all__ = ["AppState", "build_state"]
