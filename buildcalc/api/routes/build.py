"""
Build calculation API routes.
"""

from fastapi import APIRouter, Depends, HTTPException

from ..dependencies import get_build_service
from ..schemas.build import (
    BuildRequest,
    BuildStatsResponse,
    BuildSummaryResponse,
    CompareRequest,
    CompareResponse,
)
from ..services.build_service import BuildService

router = APIRouter()


@router.post("/stats", response_model=BuildStatsResponse)
async def calculate_stats(
    request: BuildRequest,
    service: BuildService = Depends(get_build_service),
):
    """Final stats of a build after level, items, runes and buffs."""
    try:
        return service.calculate_stats(request)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/summary", response_model=BuildSummaryResponse)
async def build_summary(
    request: BuildRequest,
    service: BuildService = Depends(get_build_service),
):
    """Total cost, gold efficiency and penetration of a build."""
    try:
        return service.summarize(request)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/compare", response_model=CompareResponse)
async def compare_builds(
    request: CompareRequest,
    service: BuildService = Depends(get_build_service),
):
    """
    Compare two builds.

    Differences are build B minus build A; unchanged stats are left out.
    """
    try:
        return service.compare(request.build_a, request.build_b)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
