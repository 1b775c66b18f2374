"""
Constants and configuration for the COP Analytics engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os

from pydantic_settings import BaseSettings


REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
# TTLs are milliseconds
COP_ANALYSIS_TTL_MS: int = int(os.getenv("COP_ANALYSIS_TTL_MS", str(24 * 60 * 60 * 1000)))
API_CACHE_TTL_MS: int = int(os.getenv("API_CACHE_TTL_MS", str(30 * 60 * 1000)))

CEMENT_TYPE_OPC = "OPC"
CEMENT_TYPE_PCC = "PCC"

COP_CACHE_PREFIX = "cop_analysis"
API_CACHE_PREFIX = "api"


class Settings(BaseSettings):
    # anomaly detection (3-sigma rule)
    anomaly_sigma: float = 3.0
    anomaly_min_samples: int = 3
    anomaly_medium_max_outliers: int = 2

    # trend classification
    trend_min_samples: int = 3
    trend_stable_slope: float = 0.01

    # correlation
    correlation_min_pairs: int = 3
    correlation_weak: float = 0.3
    correlation_moderate: float = 0.5
    correlation_strong: float = 0.8

    # normalized range and QAF colour bands
    qaf_range_low: float = 0.0
    qaf_range_high: float = 100.0
    qaf_band_good: float = 95.0
    qaf_band_warning: float = 85.0

    # parameter summary table
    summary_round_digits: int = 2

    # predictive insights
    forecast_horizon_days: int = 7
    forecast_min_samples: int = 3
    forecast_risk_margin: float = 0.05

    # analyzer tuning
    analyzer_max_parallel_cpu_tasks: int = 4

    # cache
    cop_analysis_ttl_ms: int = COP_ANALYSIS_TTL_MS
    api_cache_ttl_ms: int = API_CACHE_TTL_MS
    store_redis_retry_cooldown_seconds: float = 10.0
    store_redis_op_timeout_seconds: float = 0.5
    store_fallback_max_items: int = 10_000
    cache_cleanup_interval_seconds: float = 300.0

    model_config = {
        "env_prefix": "COPA_",
        "extra": "ignore",
    }


settings = Settings()
