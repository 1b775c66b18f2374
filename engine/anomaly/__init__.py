"""
Anomaly detection for monthly parameter series, flagging readings that sit more than three standard deviations from the month's mean.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.anomaly.detection import AnomalyReport, detect_anomalies

__all__ = ["AnomalyReport", "detect_anomalies"]
