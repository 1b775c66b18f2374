from fastapi import APIRouter

from engine.anomaly import detect_anomalies
from engine.stats import StatsSummary, compute_stats
from api.requests import AnomalyRequest, SamplesRequest
from api.responses import AnomalyResponse
from api.routes.exception import handle_exceptions

router = APIRouter(tags=["Statistics"])


@router.post("/stats", response_model=StatsSummary, summary="Descriptive statistics for a daily series")
@handle_exceptions
async def series_stats(req: SamplesRequest) -> StatsSummary:
    return compute_stats(req.samples)


@router.post("/anomalies", response_model=AnomalyResponse, summary="3-sigma outliers for a daily series")
@handle_exceptions
async def series_anomalies(req: AnomalyRequest) -> AnomalyResponse:
    stats = compute_stats(req.samples)
    report = detect_anomalies(req.samples, stats.mean, stats.std_dev, sigma=req.sigma)
    return AnomalyResponse(stats=stats, report=report)
