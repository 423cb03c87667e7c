"""MIMIQ Visual: reports and histograms for quantum circuit simulation results."""

__version__ = "0.1.0"

from mimiq_visual.data.results import Results, ResultsError, load_results, to01
from mimiq_visual.data.styles import (
    QP_COLOR1,
    QP_COLOR2,
    QP_COLOR3,
    QP_COLOR4,
    QP_COLOR5,
    QP_COLOR6,
    QP_COLORS,
    init_display,
)
from mimiq_visual.visualizations import format_time, hist, printreport, ptime

__all__ = [
    "__version__",
    "QP_COLOR1",
    "QP_COLOR2",
    "QP_COLOR3",
    "QP_COLOR4",
    "QP_COLOR5",
    "QP_COLOR6",
    "QP_COLORS",
    "Results",
    "ResultsError",
    "format_time",
    "hist",
    "init_display",
    "load_results",
    "printreport",
    "ptime",
    "to01",
]
