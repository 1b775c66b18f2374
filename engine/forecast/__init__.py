"""
Forecasting logic for monthly parameter rows, projecting the current trend a fixed number of days ahead and rating the risk of a target-range breach.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.insights import PredictiveInsight, predict

__all__ = ["PredictiveInsight", "predict"]
