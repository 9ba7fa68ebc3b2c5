"""
Partner API endpoints.

Routes: GET /partners, GET /partners/joined-json
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...bootstrap import AppState
from ...service import QueryService
from ..deps import get_query_service, get_state
from ..schemas import PartnerPageOut, PartnerSolutionOut

router = APIRouter(prefix="/partners", tags=["partners"])


@router.get("", response_model=PartnerPageOut)
def list_partners(
    page: int = Query(0, ge=0),
    size: Optional[int] = Query(None, ge=1),
    has_solutions: bool = Query(False, alias="hasSolutions"),
    queries: QueryService = Depends(get_query_service),
    state: AppState = Depends(get_state),
) -> PartnerPageOut:
    """Paginated partners; ``hasSolutions=true`` keeps only partners with solutions."""
    limit = size or state.settings.api.default_page_size
    result = queries.get_page(page * limit, limit, has_solutions_only=has_solutions)
    return PartnerPageOut.from_page(result)


@router.get("/joined-json", response_model=list[PartnerSolutionOut])
def joined_json(queries: QueryService = Depends(get_query_service)) -> list[PartnerSolutionOut]:
    """Full joined snapshot."""
    return [PartnerSolutionOut.from_record(item) for item in queries.get_all()]
