"""
Correlation logic for relating COP parameters to one another over the same month, to highlight process variables that move together.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.correlation.pearson import classify_correlation, correlate
from engine.correlation.matrix import CorrelationResult, correlation_matrix

__all__ = ["classify_correlation", "correlate", "CorrelationResult", "correlation_matrix"]
