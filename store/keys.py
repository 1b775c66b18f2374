"""
Cache key construction for monthly COP analysis results and per-request responses.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import hashlib
import re
from typing import Optional

from config import API_CACHE_PREFIX, COP_CACHE_PREFIX

_WHITESPACE_RE = re.compile(r"\s+")


def _slug(value: str) -> str:
    # Internal cache keys do not require reversibility; use strong stable hashing.
    return hashlib.sha256(value.encode()).hexdigest()[:32]


def cop_analysis(
    category: str,
    unit: str,
    year: int,
    month: int,
    cement_type: Optional[str] = None,
) -> str:
    parts = [COP_CACHE_PREFIX, category, unit, str(year), str(month)]
    if cement_type:
        parts.append(cement_type)
    return _WHITESPACE_RE.sub("_", "_".join(parts).lower())


def cop_analysis_pattern() -> str:
    return f"{COP_CACHE_PREFIX}_*"


def api_response(url: str) -> str:
    return f"{API_CACHE_PREFIX}_{_slug(url)}"


def api_response_pattern() -> str:
    return f"{API_CACHE_PREFIX}_*"
