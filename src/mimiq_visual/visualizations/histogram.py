"""Histogram of measurement outcomes."""

from __future__ import annotations

import logging
import math
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from mimiq_visual.data.results import to01, top_outcomes
from mimiq_visual.data.styles import QP_COLOR1

logger = logging.getLogger(__name__)

DEFAULT_HIST_OUTCOMES = 15


def hist(res: Any, max_outcomes: int = DEFAULT_HIST_OUTCOMES) -> Figure:
    """
    Plot a histogram of the measurement outcomes in ``res``.

    The figure grows with the number of bars (width) and the bitstring
    length (height, to fit the rotated tick labels).

    Args:
        res: Results record (anything with a ``samples`` mapping).
        max_outcomes: Maximum number of unique outcomes to display, most
            frequent first.

    Returns:
        The matplotlib figure holding the chart.
    """
    n_samples = sum(res.samples.values())
    outcomes = top_outcomes(res.samples, max_outcomes)
    labels = [to01(bs) for bs, _ in outcomes]
    counts = [v for _, v in outcomes]
    n_bars = len(outcomes)

    # automatic scaling of the plot size
    label_len = len(labels[0]) if labels else 0
    w = 1 + math.sqrt(n_bars)
    h = 2 + 6.5 * label_len / 100
    logger.debug("Histogram with %d bars, figsize=(%.2f, %.2f)", n_bars, w, h)

    fig, ax = plt.subplots(figsize=(w, h))
    if n_bars:
        ax.bar(labels, counts, color=QP_COLOR1)
    ax.set_xlim(-1, n_bars)
    ax.set_ylabel(f"counts / {n_samples}")
    ax.tick_params(axis="x", labelrotation=90, labelsize=8)
    fig.tight_layout()

    return fig


__all__ = ["DEFAULT_HIST_OUTCOMES", "hist"]
