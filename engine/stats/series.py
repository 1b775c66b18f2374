"""
Series helpers for filtering optional numeric samples down to present, finite values while keeping track of their original day positions.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Iterator, List, Optional, Sequence, Tuple

Sample = Optional[float]


def clean(value: object) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def iter_present(samples: Sequence[Sample]) -> Iterator[Tuple[int, float]]:
    for idx, raw in enumerate(samples):
        value = clean(raw)
        if value is not None:
            yield idx, value


def present_values(samples: Sequence[Sample]) -> List[float]:
    return [v for _, v in iter_present(samples)]


def iter_pairs(
    series_a: Sequence[Sample],
    series_b: Sequence[Sample],
) -> Iterator[Tuple[int, float, float]]:
    for idx, (raw_a, raw_b) in enumerate(zip(series_a, series_b)):
        a = clean(raw_a)
        b = clean(raw_b)
        if a is None or b is None:
            continue
        yield idx, a, b
