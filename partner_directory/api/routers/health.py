"""
Health check API endpoint.

Routes: GET /health
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ...bootstrap import AppState
from ..deps import get_state
from ..schemas import HealthOut

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthOut)
def health_check(state: AppState = Depends(get_state)) -> HealthOut:
    """Cache status; ``loaded`` is false until the first refresh publishes."""
    cache_state = state.cache.state()
    return HealthOut(
        status="UP",
        loaded=cache_state.loaded,
        partners=len(cache_state.items),
        last_refresh=cache_state.loaded_at,
    )
