"""Visualization utilities for simulation results.

This module contains:
- Unit-scaled time printing
- Text report with outcome and amplitude tables
- Measurement outcome histogram
"""

from mimiq_visual.visualizations.histogram import DEFAULT_HIST_OUTCOMES, hist
from mimiq_visual.visualizations.report import (
    DEFAULT_REPORT_OUTCOMES,
    format_time,
    printreport,
    ptime,
)

__all__ = [
    "DEFAULT_HIST_OUTCOMES",
    "DEFAULT_REPORT_OUTCOMES",
    "format_time",
    "hist",
    "printreport",
    "ptime",
]
