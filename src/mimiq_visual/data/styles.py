"""
Display Styles - Single Source of Truth

Color palette shared by the plots and the notebook stylesheet, and the hook
that injects the stylesheet into a running IPython session.
"""

from __future__ import annotations

import logging
from importlib import resources

logger = logging.getLogger(__name__)

# Try to import IPython for notebook display support
try:
    from IPython import get_ipython
    from IPython.display import HTML, display

    HAS_IPYTHON = True
except ImportError:
    get_ipython = None  # type: ignore[assignment,unused-ignore]
    HAS_IPYTHON = False


# =============================================================================
# COLOR PALETTE
# =============================================================================

QP_COLOR1 = "#0c7e8f"  # teal, histogram bars
QP_COLOR2 = "#EC7016"  # orange
QP_COLOR3 = "#A4598D"  # plum
QP_COLOR4 = "#006E51"  # green
QP_COLOR5 = "#96694A"  # brown
QP_COLOR6 = "#7E6A98"  # lavender

QP_COLORS: tuple[str, ...] = (
    QP_COLOR1,
    QP_COLOR2,
    QP_COLOR3,
    QP_COLOR4,
    QP_COLOR5,
    QP_COLOR6,
)

STYLESHEET_NAME = "custom.css"


# =============================================================================
# PUBLIC API
# =============================================================================


def load_stylesheet() -> str:
    """
    Read the packaged notebook stylesheet.

    Returns:
        CSS source wrapped in a ``<style>`` element
    """
    css = (
        resources.files("mimiq_visual")
        .joinpath("assets", STYLESHEET_NAME)
        .read_text(encoding="utf-8")
    )
    return f"<style>\n{css}</style>\n"


def init_display() -> bool:
    """
    Style notebook output for reports and histograms.

    Displays the packaged stylesheet and switches inline figures to SVG.
    Only has an effect inside a running IPython session.

    Returns:
        True if the stylesheet was displayed, False otherwise
    """
    if not HAS_IPYTHON:
        logger.debug("IPython not installed, skipping display styling")
        return False

    shell = get_ipython()
    if shell is None:
        logger.debug("No running IPython session, skipping display styling")
        return False

    display(HTML(load_stylesheet()))

    try:
        from matplotlib_inline.backend_inline import set_matplotlib_formats
    except ImportError:
        logger.debug("matplotlib-inline not available, keeping default figure format")
    else:
        set_matplotlib_formats("svg")

    return True


__all__ = [
    "HAS_IPYTHON",
    "QP_COLOR1",
    "QP_COLOR2",
    "QP_COLOR3",
    "QP_COLOR4",
    "QP_COLOR5",
    "QP_COLOR6",
    "QP_COLORS",
    "STYLESHEET_NAME",
    "init_display",
    "load_stylesheet",
]
