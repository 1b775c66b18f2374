from typing import List

from fastapi import APIRouter

from engine.correlation import CorrelationResult, classify_correlation, correlate, correlation_matrix
from api.requests import CorrelateRequest, CorrelationMatrixRequest
from api.responses import CorrelationResponse
from api.routes.exception import handle_exceptions

router = APIRouter(tags=["Correlation"])


@router.post("/correlation", response_model=CorrelationResponse, summary="Pearson correlation of two daily series")
@handle_exceptions
async def pair_correlation(req: CorrelateRequest) -> CorrelationResponse:
    r = correlate(req.series_a, req.series_b)
    return CorrelationResponse(correlation=r, strength=classify_correlation(r), valid=r is not None)


@router.post("/correlation/matrix", response_model=List[CorrelationResult], summary="All pairwise correlations")
@handle_exceptions
async def matrix(req: CorrelationMatrixRequest) -> List[CorrelationResult]:
    return correlation_matrix([(s.name, s.values) for s in req.series])
