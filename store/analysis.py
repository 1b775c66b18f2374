from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, List, Optional

from engine.qaf.bounds import ParameterSpec
from engine.qaf.normalize import DailyValue, NormalizedRow
from store import keys
from store.cache import ResultCache
from config import settings

log = logging.getLogger(__name__)


def _row_to_dict(row: NormalizedRow) -> dict:
    return asdict(row)


def _row_from_dict(d: dict) -> NormalizedRow:
    return NormalizedRow(
        parameter=ParameterSpec(**d["parameter"]),
        daily_values=tuple(
            DailyValue(value=day["value"], raw=day["raw"]) for day in d["daily_values"]
        ),
        monthly_average=d["monthly_average"],
        monthly_average_raw=d["monthly_average_raw"],
        min_value=d.get("min_value"),
        max_value=d.get("max_value"),
    )


def rows_from_payload(payload: Any) -> Optional[List[NormalizedRow]]:
    if not isinstance(payload, list):
        return None
    try:
        return [_row_from_dict(item) for item in payload]
    except (KeyError, TypeError, ValueError) as exc:
        log.debug("Cached COP rows unreadable: %s", exc)
        return None


def analysis_cache() -> ResultCache:
    return ResultCache(
        default_ttl_ms=settings.cop_analysis_ttl_ms,
        scan_pattern=keys.cop_analysis_pattern(),
    )


async def load(
    cache: ResultCache,
    category: str,
    unit: str,
    year: int,
    month: int,
    cement_type: Optional[str] = None,
) -> Optional[List[NormalizedRow]]:
    key = keys.cop_analysis(category, unit, year, month, cement_type)
    payload = await cache.get(key)
    if payload is None:
        return None
    rows = rows_from_payload(payload)
    if rows is None:
        await cache.delete(key)
    return rows


async def save(
    cache: ResultCache,
    category: str,
    unit: str,
    year: int,
    month: int,
    cement_type: Optional[str],
    rows: List[NormalizedRow],
) -> None:
    if not rows:
        return
    key = keys.cop_analysis(category, unit, year, month, cement_type)
    await cache.set(key, [_row_to_dict(r) for r in rows], ttl_ms=settings.cop_analysis_ttl_ms)


async def invalidate(
    cache: ResultCache,
    category: str,
    unit: str,
    year: int,
    month: int,
    cement_type: Optional[str] = None,
) -> None:
    await cache.delete(keys.cop_analysis(category, unit, year, month, cement_type))
