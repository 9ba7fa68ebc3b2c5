"""Worker pools for the refresh pipeline.

One shared pool runs the two top-level endpoint fetches side by side. Each
upstream endpoint then gets its own bounded pool for its batch requests, so a
slow endpoint can only tie up its own ``max_workers`` threads.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from threading import Lock
from typing import Dict


class ThreadPoolManager:
    """Lazily create and own the pipeline pool and the per-endpoint batch pools."""

    def __init__(self, default_workers: int = 4) -> None:
        self.default_workers = default_workers
        self._pipeline_executor = ThreadPoolExecutor(
            max_workers=default_workers, thread_name_prefix="refresh"
        )
        self._endpoint_executors: Dict[str, ThreadPoolExecutor] = {}
        self._lock = Lock()

    def get(self, endpoint_name: str | None = None, max_workers: int | None = None) -> ThreadPoolExecutor:
        """Return the pipeline pool, or the batch pool of ``endpoint_name``.

        ``max_workers`` only applies when the endpoint pool is first created;
        later calls return the existing pool unchanged.
        """

        if endpoint_name is None:
            return self._pipeline_executor
        with self._lock:
            executor = self._endpoint_executors.get(endpoint_name)
            if executor is None:
                executor = ThreadPoolExecutor(
                    max_workers=max_workers or self.default_workers,
                    thread_name_prefix=f"fetch-{endpoint_name}",
                )
                self._endpoint_executors[endpoint_name] = executor
            return executor

    def shutdown(self) -> None:
        # queued batches are dropped, running requests finish on their own timeouts
        self._pipeline_executor.shutdown(wait=False, cancel_futures=True)
        with self._lock:
            for executor in self._endpoint_executors.values():
                executor.shutdown(wait=False, cancel_futures=True)
            self._endpoint_executors.clear()


__all__ = ["ThreadPoolManager"]
