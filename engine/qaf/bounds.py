"""
Parameter definitions and target-range resolution, choosing cement-type specific bounds (OPC/PCC) with fallback to the parameter's default range.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from config import CEMENT_TYPE_OPC, CEMENT_TYPE_PCC


@dataclass(frozen=True)
class ParameterSpec:
    id: str
    name: str
    unit: str = ""
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    opc_min_value: Optional[float] = None
    opc_max_value: Optional[float] = None
    pcc_min_value: Optional[float] = None
    pcc_max_value: Optional[float] = None


def _first(*candidates: Optional[float]) -> Optional[float]:
    for value in candidates:
        if value is not None:
            return value
    return None


def resolve_bounds(
    parameter: ParameterSpec,
    cement_type: Optional[str] = None,
) -> Tuple[Optional[float], Optional[float]]:
    kind = (cement_type or "").strip().upper()
    if kind == CEMENT_TYPE_OPC:
        return (
            _first(parameter.opc_min_value, parameter.min_value),
            _first(parameter.opc_max_value, parameter.max_value),
        )
    if kind == CEMENT_TYPE_PCC:
        return (
            _first(parameter.pcc_min_value, parameter.min_value),
            _first(parameter.pcc_max_value, parameter.max_value),
        )
    return parameter.min_value, parameter.max_value


def valid_bounds(min_value: Optional[float], max_value: Optional[float]) -> bool:
    return min_value is not None and max_value is not None and max_value > min_value
