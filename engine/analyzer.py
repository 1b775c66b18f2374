from __future__ import annotations

import asyncio
import logging
from typing import List, Optional, Sequence

from engine import anomaly
from engine.comparison import compare_periods
from engine.correlation import correlation_matrix
from engine.enums import CorrelationStrength, QafBand, RangeStatus, Severity
from engine.forecast import predict
from engine.qaf import NormalizedRow, compute_qaf, normalize_series
from engine.quality import quality_metrics
from engine.stats import compute_stats, summarize_row
from store import analysis as analysis_store
from store.cache import ResultCache
from api.requests import AnalyzeRequest, ParameterInput
from api.responses import CopAnalysisReport, ParameterAnalysis
from config import settings

log = logging.getLogger(__name__)


async def normalize_parameters(
    parameters: Sequence[ParameterInput],
    cement_type: Optional[str],
) -> List[NormalizedRow]:
    limit = asyncio.Semaphore(max(1, settings.analyzer_max_parallel_cpu_tasks))

    async def _one(p: ParameterInput) -> NormalizedRow:
        async with limit:
            return await asyncio.to_thread(normalize_series, p.to_series(), cement_type)

    # gather keeps input order regardless of completion order
    return list(await asyncio.gather(*[_one(p) for p in parameters]))


def _analyze_parameter(row: NormalizedRow) -> ParameterAnalysis:
    raw = row.raw_values
    stats = compute_stats(raw)
    return ParameterAnalysis(
        parameter_id=row.parameter.id,
        parameter=row.parameter.name,
        unit=row.parameter.unit,
        target_min=row.min_value,
        target_max=row.max_value,
        stats=stats,
        anomalies=anomaly.detect_anomalies(raw, stats.mean, stats.std_dev),
        daily_status=[RangeStatus.from_percentage(v) for v in row.percentages],
    )


def _summary(report: CopAnalysisReport) -> str:
    if not report.rows:
        return "No parameters to analyze."
    parts = [f"{len(report.rows)} parameter(s)"]
    monthly = report.qaf.monthly
    if monthly.value is not None:
        parts.append(f"QAF {monthly.value:.1f}% ({monthly.in_range}/{monthly.total})")
    else:
        parts.append("QAF n/a")
    flagged = [p for p in report.parameters if p.anomalies.outliers]
    if flagged:
        parts.append(f"{sum(len(p.anomalies.outliers) for p in flagged)} outlier(s) in {len(flagged)} parameter(s)")
    at_risk = [i for i in report.insights if i.risk == Severity.high]
    if at_risk:
        parts.append(f"{len(at_risk)} forecast breach(es)")
    strong = [c for c in report.correlations if c.strength == CorrelationStrength.strong]
    if strong:
        parts.append(f"{len(strong)} strong correlation(s)")
    return f"[{report.monthly_band.value.upper()}] {' | '.join(parts)}."


async def run(req: AnalyzeRequest, cache: Optional[ResultCache] = None) -> CopAnalysisReport:
    if cache is None:
        cache = analysis_store.analysis_cache()

    rows: Optional[List[NormalizedRow]] = None
    if not req.refresh:
        rows = await analysis_store.load(cache, req.category, req.unit, req.year, req.month, req.cement_type)
        if rows is not None and [r.parameter.id for r in rows] != [p.id for p in req.parameters]:
            log.debug("Cached COP rows do not match request parameters, recomputing")
            rows = None

    cache_hit = rows is not None
    if rows is None:
        rows = await normalize_parameters(req.parameters, req.cement_type)
        await analysis_store.save(cache, req.category, req.unit, req.year, req.month, req.cement_type, rows)
    log.debug(
        "COP analysis %s/%s %d-%02d cache_hit=%s",
        req.category, req.unit, req.year, req.month, cache_hit,
    )

    qaf = compute_qaf(rows)
    comparison = []
    if req.previous_parameters:
        previous_rows = await normalize_parameters(req.previous_parameters, req.cement_type)
        comparison = compare_periods(rows, previous_rows)

    report = CopAnalysisReport(
        category=req.category,
        unit=req.unit,
        year=req.year,
        month=req.month,
        cement_type=req.cement_type,
        cache_hit=cache_hit,
        rows=rows,
        qaf=qaf,
        daily_bands=[QafBand.from_value(d.value) for d in qaf.daily],
        monthly_band=QafBand.from_value(qaf.monthly.value),
        parameters=[_analyze_parameter(r) for r in rows],
        table=[summarize_row(r) for r in rows],
        correlations=correlation_matrix([(r.parameter.name, r.raw_values) for r in rows]),
        quality=quality_metrics(rows),
        insights=[predict(r, req.horizon_days) for r in rows],
        comparison=comparison,
        summary="",
    )
    report.summary = _summary(report)
    return report
