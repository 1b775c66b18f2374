"""
Analysis service that runs the COP analysis engine against the shared result cache.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

from typing import Dict, Optional

from api.requests import AnalyzeRequest, CacheKeyRequest
from api.responses import CopAnalysisReport
from engine.analyzer import run
from store import analysis as analysis_store
from store.cache import ResultCache

_cache: Optional[ResultCache] = None


def get_cache() -> ResultCache:
    global _cache
    if _cache is None:
        _cache = analysis_store.analysis_cache()
    return _cache


async def run_analysis(req: AnalyzeRequest) -> CopAnalysisReport:
    return await run(req, get_cache())


async def invalidate(req: CacheKeyRequest) -> None:
    await analysis_store.invalidate(get_cache(), req.category, req.unit, req.year, req.month, req.cement_type)


async def cleanup_expired() -> int:
    return await get_cache().cleanup()


async def cache_stats() -> Dict[str, int]:
    return await get_cache().stats()
