from __future__ import annotations

import calendar
from typing import List, Optional

from pydantic import BaseModel, Field, model_validator

from engine.qaf.bounds import ParameterSpec
from engine.qaf.normalize import ParameterSeries


class SamplesRequest(BaseModel):
    samples: List[Optional[float]] = Field(default_factory=list)


class AnomalyRequest(SamplesRequest):
    sigma: Optional[float] = Field(default=None, gt=0.0, le=10.0)


class CorrelateRequest(BaseModel):
    series_a: List[Optional[float]]
    series_b: List[Optional[float]]

    @model_validator(mode="after")
    def _same_length(self) -> CorrelateRequest:
        if len(self.series_a) != len(self.series_b):
            raise ValueError("series_a and series_b must have the same length")
        return self


class NamedSeries(BaseModel):
    name: str
    values: List[Optional[float]]


class CorrelationMatrixRequest(BaseModel):
    series: List[NamedSeries] = Field(default_factory=list)

    @model_validator(mode="after")
    def _same_length(self) -> CorrelationMatrixRequest:
        lengths = {len(s.values) for s in self.series}
        if len(lengths) > 1:
            raise ValueError("all series must have the same length")
        return self


class ParameterInput(BaseModel):
    id: str
    parameter: str
    unit: str = ""
    min_value: Optional[float] = None
    max_value: Optional[float] = None
    opc_min_value: Optional[float] = None
    opc_max_value: Optional[float] = None
    pcc_min_value: Optional[float] = None
    pcc_max_value: Optional[float] = None
    daily_values: List[Optional[float]] = Field(default_factory=list)

    model_config = {"extra": "ignore"}

    def to_spec(self) -> ParameterSpec:
        return ParameterSpec(
            id=self.id,
            name=self.parameter,
            unit=self.unit,
            min_value=self.min_value,
            max_value=self.max_value,
            opc_min_value=self.opc_min_value,
            opc_max_value=self.opc_max_value,
            pcc_min_value=self.pcc_min_value,
            pcc_max_value=self.pcc_max_value,
        )

    def to_series(self) -> ParameterSeries:
        return ParameterSeries(parameter=self.to_spec(), daily_values=tuple(self.daily_values))


class QafRequest(BaseModel):
    parameters: List[ParameterInput] = Field(default_factory=list)
    cement_type: Optional[str] = None

    @model_validator(mode="after")
    def _same_length(self) -> QafRequest:
        lengths = {len(p.daily_values) for p in self.parameters}
        if len(lengths) > 1:
            raise ValueError("all parameters must carry the same number of daily values")
        return self


class AnalyzeRequest(BaseModel):
    category: str
    unit: str
    year: int = Field(ge=1970, le=9999)
    month: int = Field(ge=1, le=12)
    cement_type: Optional[str] = None
    parameters: List[ParameterInput] = Field(default_factory=list)
    previous_parameters: Optional[List[ParameterInput]] = None
    horizon_days: int = Field(default=7, ge=1, le=31)
    refresh: bool = False

    @property
    def days_in_month(self) -> int:
        return calendar.monthrange(self.year, self.month)[1]

    @model_validator(mode="after")
    def _one_slot_per_day(self) -> AnalyzeRequest:
        expected = self.days_in_month
        for p in self.parameters:
            if len(p.daily_values) != expected:
                raise ValueError(
                    f"parameter {p.id!r} has {len(p.daily_values)} daily values, "
                    f"expected {expected} for {self.year}-{self.month:02d}"
                )
        return self


class CacheKeyRequest(BaseModel):
    category: str
    unit: str
    year: int
    month: int = Field(ge=1, le=12)
    cement_type: Optional[str] = None
