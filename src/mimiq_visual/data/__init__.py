"""Data module for the results record and display styles."""

from mimiq_visual.data.results import (
    BitString,
    Results,
    ResultsError,
    load_results,
    to01,
    top_amplitudes,
    top_outcomes,
)
from mimiq_visual.data.styles import (
    HAS_IPYTHON,
    QP_COLOR1,
    QP_COLOR2,
    QP_COLOR3,
    QP_COLOR4,
    QP_COLOR5,
    QP_COLOR6,
    QP_COLORS,
    init_display,
    load_stylesheet,
)

__all__ = [
    "BitString",
    "HAS_IPYTHON",
    "QP_COLOR1",
    "QP_COLOR2",
    "QP_COLOR3",
    "QP_COLOR4",
    "QP_COLOR5",
    "QP_COLOR6",
    "QP_COLORS",
    "Results",
    "ResultsError",
    "init_display",
    "load_results",
    "load_stylesheet",
    "to01",
    "top_amplitudes",
    "top_outcomes",
]
