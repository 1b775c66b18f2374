"""
Pairwise correlation matrix across all parameters of a month, ordered by correlation magnitude with undefined pairs last.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from engine.correlation.pearson import classify_correlation, correlate
from engine.enums import CorrelationStrength
from engine.stats.series import Sample


@dataclass(frozen=True)
class CorrelationResult:
    parameter_a: str
    parameter_b: str
    correlation: Optional[float]
    strength: CorrelationStrength


def _sort_key(result: CorrelationResult) -> Tuple[int, float]:
    if result.correlation is None:
        return (1, 0.0)
    return (0, -abs(result.correlation))


def correlation_matrix(series: Sequence[Tuple[str, Sequence[Sample]]]) -> List[CorrelationResult]:
    results: List[CorrelationResult] = []
    for i in range(len(series)):
        name_a, values_a = series[i]
        for j in range(i + 1, len(series)):
            name_b, values_b = series[j]
            r = correlate(values_a, values_b)
            results.append(CorrelationResult(
                parameter_a=name_a,
                parameter_b=name_b,
                correlation=r,
                strength=classify_correlation(r),
            ))
    return sorted(results, key=_sort_key)
