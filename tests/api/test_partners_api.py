"""
Tests for the partner HTTP API.

Exercises GET /api/partners, /api/partners/joined-json and /api/health with
FastAPI TestClient over a pre-populated cache.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from partner_directory.api import create_app
from partner_directory.bootstrap import build_state


@pytest.fixture
def state(sample_settings):
    app_state = build_state(settings=sample_settings())
    yield app_state
    app_state.close()


@pytest.fixture
def client(state) -> TestClient:
    return TestClient(create_app(state, manage_refresh=False))


@pytest.fixture
def populated(state, make_partner_solution):
    state.cache.publish([make_partner_solution(i, solutions=1 if i % 2 else 0) for i in range(25)])
    return state


def test_health_before_first_refresh(client) -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    body = response.json()
    assert body["loaded"] is False
    assert body["partners"] == 0
    assert body["lastRefresh"] is None


def test_health_after_refresh(client, populated) -> None:
    body = client.get("/api/health").json()
    assert body["loaded"] is True
    assert body["partners"] == 25
    assert body["lastRefresh"] is not None


def test_partners_page_envelope(client, populated) -> None:
    response = client.get("/api/partners", params={"page": 0, "size": 10})
    assert response.status_code == 200
    body = response.json()
    assert len(body["content"]) == 10
    assert body["totalElements"] == 25
    assert body["totalPages"] == 3
    assert body["number"] == 0
    assert body["size"] == 10
    assert body["numberOfElements"] == 10
    assert body["first"] is True
    assert body["last"] is False
    assert body["empty"] is False
    first = body["content"][0]
    assert set(first) == {
        "partnerName",
        "partnerId",
        "partnerLevel",
        "partnerType",
        "shortDescription",
        "companyOverview",
        "solutions",
    }


def test_partners_last_and_out_of_range_pages(client, populated) -> None:
    last = client.get("/api/partners", params={"page": 2, "size": 10}).json()
    assert last["numberOfElements"] == 5
    assert last["last"] is True
    beyond = client.get("/api/partners", params={"page": 3, "size": 10}).json()
    assert beyond["content"] == []
    assert beyond["empty"] is True
    assert beyond["totalElements"] == 25


def test_partners_default_page_size(client, populated) -> None:
    body = client.get("/api/partners").json()
    assert body["size"] == 10
    assert len(body["content"]) == 10


def test_partners_has_solutions_filter(client, populated) -> None:
    body = client.get("/api/partners", params={"hasSolutions": "true", "size": 50}).json()
    assert body["totalElements"] == 12
    assert all(item["solutions"] for item in body["content"])
    assert body["content"][0]["solutions"][0] == {
        "displayName": "Solution 1.0",
        "shortDescription": "Does things",
    }


@pytest.mark.parametrize(
    "params",
    [{"page": -1}, {"size": 0}, {"page": "abc"}, {"hasSolutions": "maybe"}],
)
def test_invalid_parameters_return_400(client, params) -> None:
    response = client.get("/api/partners", params=params)
    assert response.status_code == 400
    body = response.json()
    assert body["status"] == 400
    assert body["message"] == "Invalid input"
    assert body["details"]
    assert "timestamp" in body


def test_joined_json_returns_full_snapshot(client, populated) -> None:
    response = client.get("/api/partners/joined-json")
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 25
    assert body[3]["partnerId"] == "P0003"


def test_joined_json_empty_cache(client) -> None:
    assert client.get("/api/partners/joined-json").json() == []


def test_cors_allows_frontend_origin(client) -> None:
    response = client.options(
        "/api/partners",
        headers={"Origin": "http://localhost:3000", "Access-Control-Request-Method": "GET"},
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
