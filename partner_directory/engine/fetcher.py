"""HTTP fetching of paginated upstream endpoints."""

from __future__ import annotations

import time
from concurrent.futures import Future, TimeoutError as FuturesTimeout, as_completed
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

import httpx
import structlog

from ..config import EndpointConfig, HttpConfig
from ..errors import FetchError
from .parser import EnvelopeParser
from .thread_pool import ThreadPoolManager

T = TypeVar("T")

Extractor = Callable[[dict[str, Any]], list[T]]


@dataclass(frozen=True, slots=True)
class Batch:
    """One ``start``/``max`` window over an endpoint."""

    start: int
    size: int


def plan_batches(total: int, batch_size: int) -> list[Batch]:
    """Partition ``[0, total)`` into contiguous windows of ``batch_size``."""

    if batch_size < 1:
        raise ValueError("batch_size must be >= 1")
    return [
        Batch(start=start, size=min(batch_size, total - start))
        for start in range(0, max(total, 0), batch_size)
    ]


class Fetcher:
    """Issue single page requests and decode the JSON envelope."""

    def __init__(
        self,
        http_config: HttpConfig,
        parser: EnvelopeParser | None = None,
        transport: httpx.BaseTransport | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.http_config = http_config
        self.parser = parser or EnvelopeParser()
        self.logger = logger or structlog.get_logger("partner_directory.fetcher")
        self._client = httpx.Client(
            follow_redirects=True,
            timeout=httpx.Timeout(http_config.read_timeout, connect=http_config.connect_timeout),
            headers={"User-Agent": http_config.user_agent, "Accept": "application/json"},
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def fetch_page(self, endpoint: EndpointConfig, start: int, limit: int) -> dict[str, Any]:
        params = {"q": endpoint.query, "start": start, "max": limit, "sorter": endpoint.sorter}
        try:
            response = self._client.get(endpoint.url, params=params)
        except httpx.HTTPError as exc:
            raise FetchError(endpoint.url, str(exc) or exc.__class__.__name__) from exc
        if response.status_code >= 400:
            raise FetchError(endpoint.url, f"Unexpected status {response.status_code}")
        return self.parser.parse_json(response.text)


class BatchFetcher:
    """Probe an endpoint for its total, then pull every batch concurrently.

    Failures never escape :meth:`fetch_all`: a failed batch contributes no
    records, while a failed probe or an exhausted ``fetch_timeout`` yields an
    empty list for the whole endpoint.
    """

    def __init__(
        self,
        fetcher: Fetcher,
        thread_pool: ThreadPoolManager,
        fetch_timeout: float | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.thread_pool = thread_pool
        self.fetch_timeout = fetch_timeout or fetcher.http_config.fetch_timeout
        self.logger = logger or structlog.get_logger("partner_directory.fetcher")

    def fetch_all(self, endpoint: EndpointConfig, extract: Extractor[T]) -> list[T]:
        deadline = time.monotonic() + self.fetch_timeout
        log = self.logger.bind(endpoint=endpoint.name)
        try:
            envelope = self.fetcher.fetch_page(endpoint, 0, 1)
            total = self.fetcher.parser.parse_total(envelope)
        except Exception as exc:  # noqa: BLE001
            log.error("total_probe_failed", url=endpoint.url, error=str(exc))
            return []
        if total is None:
            log.error("total_unparseable", raw_total=repr(envelope.get("total")))
            return []
        log.info("total_discovered", total=total)
        if total == 0:
            return []

        batches = plan_batches(total, endpoint.batch_size)
        executor = self.thread_pool.get(endpoint.name, max_workers=endpoint.max_workers)
        futures: dict[Future[list[T]], Batch] = {
            executor.submit(self._fetch_batch, endpoint, batch, extract): batch for batch in batches
        }
        collected: dict[int, list[T]] = {}
        try:
            for future in as_completed(futures, timeout=max(deadline - time.monotonic(), 0.0)):
                collected[futures[future].start] = future.result()
        except FuturesTimeout:
            for future in futures:
                future.cancel()
            log.error(
                "fetch_timeout",
                timeout=self.fetch_timeout,
                completed=len(collected),
                batches=len(batches),
            )
            return []

        records: list[T] = []
        # Batch order, not completion order, keeps repeated runs list-equal
        for start in sorted(collected):
            records.extend(collected[start])
        log.info("fetch_complete", batches=len(batches), records=len(records))
        return records

    def _fetch_batch(self, endpoint: EndpointConfig, batch: Batch, extract: Extractor[T]) -> list[T]:
        try:
            envelope = self.fetcher.fetch_page(endpoint, batch.start, batch.size)
            return extract(envelope)
        except Exception as exc:  # noqa: BLE001
            self.logger.warning(
                "batch_fetch_failed",
                endpoint=endpoint.name,
                start=batch.start,
                size=batch.size,
                error=str(exc),
            )
            return []


__all__ = ["Batch", "BatchFetcher", "Fetcher", "plan_batches"]
