from typing import Dict, Optional

from fastapi import APIRouter

from api.requests import AnalyzeRequest, CacheKeyRequest
from api.responses import CacheStats, CopAnalysisReport
from api.routes.exception import handle_exceptions
from services import analysis_service

router = APIRouter(tags=["COP Analysis"])


@router.post("/cop/analyze", response_model=CopAnalysisReport, summary="Full monthly COP analysis")
@handle_exceptions
async def analyze(req: AnalyzeRequest) -> CopAnalysisReport:
    return await analysis_service.run_analysis(req)


@router.delete("/cop/cache", summary="Invalidate one cached month")
@handle_exceptions
async def invalidate(
    category: str,
    unit: str,
    year: int,
    month: int,
    cement_type: Optional[str] = None,
) -> Dict[str, str]:
    req = CacheKeyRequest(category=category, unit=unit, year=year, month=month, cement_type=cement_type)
    await analysis_service.invalidate(req)
    return {"status": "invalidated"}


@router.post("/cop/cache/cleanup", summary="Purge expired cache entries")
@handle_exceptions
async def cleanup() -> Dict[str, int]:
    return {"removed": await analysis_service.cleanup_expired()}


@router.get("/cop/cache/stats", response_model=CacheStats, summary="Cache statistics")
@handle_exceptions
async def stats() -> CacheStats:
    return CacheStats(**await analysis_service.cache_stats())
