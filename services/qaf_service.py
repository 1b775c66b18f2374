"""
QAF service: normalizes a parameter set and aggregates its QAF, caching each distinct request body for the short per-request TTL.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import logging
from typing import Optional

from pydantic import ValidationError

from api.requests import QafRequest
from api.responses import QafResponse
from engine.enums import QafBand
from engine.qaf import compute_qaf, normalize_series
from store import keys
from store.cache import ResultCache
from config import settings

log = logging.getLogger(__name__)

QAF_PATH = "/qaf"

_cache: Optional[ResultCache] = None


def get_cache() -> ResultCache:
    global _cache
    if _cache is None:
        _cache = ResultCache(
            default_ttl_ms=settings.api_cache_ttl_ms,
            scan_pattern=keys.api_response_pattern(),
        )
    return _cache


def build_response(req: QafRequest) -> QafResponse:
    rows = [normalize_series(p.to_series(), req.cement_type) for p in req.parameters]
    summary = compute_qaf(rows)
    return QafResponse(
        rows=rows,
        qaf=summary,
        daily_bands=[QafBand.from_value(d.value) for d in summary.daily],
        monthly_band=QafBand.from_value(summary.monthly.value),
    )


async def qaf_summary(req: QafRequest) -> QafResponse:
    cache = get_cache()
    key = keys.api_response(f"{QAF_PATH}?{req.model_dump_json()}")

    cached = await cache.get(key)
    if cached is not None:
        try:
            return QafResponse.model_validate(cached)
        except ValidationError as exc:
            log.debug("Cached QAF response unreadable %s: %s", key, exc)
            await cache.delete(key)

    response = build_response(req)
    await cache.set(key, response.model_dump(mode="json"))
    return response


async def cleanup_expired() -> int:
    return await get_cache().cleanup()
