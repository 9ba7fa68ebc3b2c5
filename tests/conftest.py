"""Pytest configuration providing fake upstream endpoints and shared fixtures."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any, Callable, Iterable

import httpx
import pytest

os.environ.setdefault("PARTNER_DIRECTORY_HOME", tempfile.mkdtemp(prefix="partner-directory-"))

from partner_directory.config import (  # noqa: E402
    ConfigLocator,
    ConfigRepository,
    EndpointConfig,
    HttpConfig,
    RefreshConfig,
    Settings,
)
from partner_directory.engine import (  # noqa: E402
    BatchFetcher,
    Fetcher,
    PartnerSolution,
    Solution,
    ThreadPoolManager,
)

PARTNERS_URL = "https://upstream.test/partners.ajax"
SOLUTIONS_URL = "https://upstream.test/solutions.ajax"


def partner_asset(index: int, name: str | None = None, **fields: Any) -> dict:
    record = {
        "Id": f"P{index:04d}",
        "Name": name if name is not None else f"Partner {index}",
        "PartnerLevel__c": "Gold",
        "PartnerType__c": "Reseller",
        "Short_Description": f"<p>Partner <b>{index}</b></p>",
        "PartnerCompanyOverview__c": "Overview",
    }
    record.update(fields)
    return {"contentJson": {"Partners": {"Partner": record}}, "metadata": {"id": index}}


def solution_asset(partner_name: str | None, display_name: str, description: str = "<p>Does things</p>") -> dict:
    return {
        "contentJson": {
            "Solutions": {
                "Solution": {
                    "solutionpartnername": partner_name,
                    "solutiondisplayname": display_name,
                    "urlsolutionshortdescription": description,
                }
            }
        },
        "metadata": {"TeamSite/Metadata/SolutionProduct": "Content"},
    }


class FakeUpstream:
    """Serve paginated envelopes for the partner and solution endpoints."""

    def __init__(self) -> None:
        self.assets: dict[str, list[dict]] = {}
        self.totals: dict[str, Any] = {}
        self.fail_starts: dict[str, set[int]] = {}
        self.status_overrides: dict[str, int] = {}
        self.requests: list[tuple[str, int, int]] = []

    def serve(self, url: str, assets: Iterable[dict], total: Any = None) -> None:
        path = httpx.URL(url).path
        self.assets[path] = list(assets)
        if total is not None:
            self.totals[path] = total

    def fail_batch(self, url: str, start: int) -> None:
        self.fail_starts.setdefault(httpx.URL(url).path, set()).add(start)

    def handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        start = int(request.url.params.get("start", "0"))
        limit = int(request.url.params.get("max", "0"))
        self.requests.append((path, start, limit))
        if path in self.status_overrides:
            return httpx.Response(self.status_overrides[path], text="upstream error")
        if path not in self.assets:
            return httpx.Response(404, text="not found")
        if limit != 1 and start in self.fail_starts.get(path, set()):
            raise httpx.ConnectError("connection reset", request=request)
        assets = self.assets[path]
        total = self.totals.get(path, str(len(assets)))
        body: dict[str, Any] = {"results": {"assets": assets[start : start + limit]}}
        if total != "<missing>":
            body["total"] = total
        return httpx.Response(200, json=body)

    def batch_requests(self, url: str) -> list[tuple[int, int]]:
        path = httpx.URL(url).path
        return sorted((start, limit) for p, start, limit in self.requests if p == path and limit != 1)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def upstream() -> FakeUpstream:
    return FakeUpstream()


@pytest.fixture
def sample_settings() -> Callable[..., Settings]:
    def _builder(**overrides: Any) -> Settings:
        base: dict[str, Any] = {
            "partners": EndpointConfig(
                name="partners", url=PARTNERS_URL, sorter="Default_Sort", batch_size=200, max_workers=4
            ),
            "solutions": EndpointConfig(
                name="solutions", url=SOLUTIONS_URL, sorter="Name", batch_size=50, max_workers=4
            ),
            "http": HttpConfig(fetch_timeout=5.0),
            "refresh": RefreshConfig(run_on_startup=False),
        }
        base.update(overrides)
        return Settings(**base)

    return _builder


@pytest.fixture
def thread_pool() -> Iterable[ThreadPoolManager]:
    manager = ThreadPoolManager(default_workers=4)
    yield manager
    manager.shutdown()


@pytest.fixture
def batch_fetcher_factory(thread_pool: ThreadPoolManager) -> Iterable[Callable[..., BatchFetcher]]:
    fetchers: list[Fetcher] = []

    def _build(upstream: FakeUpstream, http: HttpConfig | None = None) -> BatchFetcher:
        http_config = http or HttpConfig(fetch_timeout=5.0)
        fetcher = Fetcher(http_config, transport=upstream.transport)
        fetchers.append(fetcher)
        return BatchFetcher(fetcher, thread_pool, http_config.fetch_timeout)

    yield _build
    for fetcher in fetchers:
        fetcher.close()


@pytest.fixture
def make_partner_solution() -> Callable[..., PartnerSolution]:
    def _builder(index: int, solutions: int = 0) -> PartnerSolution:
        return PartnerSolution(
            partner_name=f"Partner {index}",
            partner_id=f"P{index:04d}",
            partner_level="Gold",
            partner_type="Reseller",
            short_description="Short",
            company_overview="Overview",
            solutions=tuple(
                Solution(display_name=f"Solution {index}.{n}", short_description="Does things")
                for n in range(solutions)
            ),
        )

    return _builder


@pytest.fixture
def temp_config_repository(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterable[ConfigRepository]:
    monkeypatch.setenv("PARTNER_DIRECTORY_HOME", str(tmp_path))
    locator = ConfigLocator(project_root=tmp_path)
    repository = ConfigRepository(locator)
    yield repository
