"""Text report for simulation results.

Prints run metadata (algorithm, timings, fidelity estimate) followed by
tables of the most frequent measurement outcomes and the largest
statevector amplitudes.

All output goes through a ``rich`` console. Every function takes an optional
``console`` so output can be redirected (e.g. ``Console(file=io.StringIO())``).
"""

from __future__ import annotations

from itertools import chain
from typing import TYPE_CHECKING, Any

from rich import box
from rich.console import Console
from rich.measure import Measurement
from rich.segment import Segments
from rich.table import Table

from mimiq_visual.data.results import to01, top_amplitudes, top_outcomes

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_REPORT_OUTCOMES = 8

# Ruled top edge and header separator, no vertical rules.
# The bottom row is blank and dropped when printing.
REPORT_BOX = box.Box(
    "== =\n"
    "    \n"
    "== =\n"
    "    \n"
    "    \n"
    "    \n"
    "    \n"
    "    \n"
)

_RULE = "=" * 27

_UNBOUNDED_WIDTH = 1 << 20

# (upper bound in seconds, scale, unit); first match wins
_TIME_UNITS: tuple[tuple[float, float, str], ...] = (
    (1e-6, 1e9, "ns"),
    (1e-3, 1e6, "µs"),
    (1e0, 1e3, "ms"),
)

console = Console()


def format_time(time: float) -> str:
    """Format a duration in seconds with 3 significant digits and a unit.

    A value exactly on a unit boundary (1e-6, 1e-3, 1) uses the larger unit.

    Args:
        time: Duration in seconds.

    Returns:
        String such as ``"12.3 µs"``.
    """
    for bound, scale, unit in _TIME_UNITS:
        if time < bound:
            return f"{time * scale:.3g} {unit}"
    return f"{time:.3g} s"


def ptime(time: float, console: Console | None = None) -> None:
    """Print ``time`` with appropriate units."""
    _echo(console, format_time(time))


def printreport(
    res: Any,
    max_outcomes: int = DEFAULT_REPORT_OUTCOMES,
    console: Console | None = None,
) -> None:
    """Print a report on the simulation results ``res``.

    Args:
        res: Results record (anything with ``results``, ``samples`` and
            ``amplitudes`` attributes).
        max_outcomes: Maximum number of measurement outcomes and amplitudes
            to list.
        console: Console to print to (module console if None).

    Raises:
        KeyError: If ``res.results`` lacks one of the expected keys.
    """
    meta = res.results
    timings = meta["time"]

    _echo(console, _RULE)
    _echo(console, "Simulation report")
    _echo(console, _RULE)
    _echo(console, f"Algorithm: \t {meta['algorithm']}")
    _echo(console, f"Execution time \t {format_time(timings['apply'])}")
    _echo(console, f"Sampling time \t {format_time(timings['sampling'])}")
    _echo(
        console,
        f"Fidelity est. \t {meta['fidelity']:.2f} "
        f"(avg. gate error {meta['averageGateError']:.4f})",
    )

    if len(res.samples) > 0:
        outcomes = top_outcomes(res.samples, max_outcomes)

        _echo(console, "")
        _echo(console, "Measurement results")
        _print_table(
            console,
            ("state", "samples"),
            ((to01(k), str(v)) for k, v in outcomes),
        )
        if len(res.samples) > max_outcomes:
            _echo(
                console,
                f"results limited to {max_outcomes} items, "
                "see `res.samples` for a full list",
            )

    if len(res.amplitudes) > 0:
        amplitudes = top_amplitudes(res.amplitudes, max_outcomes)

        _echo(console, "")
        _echo(console, "Statevector amplitudes")
        _print_table(
            console,
            ("state", "amplitude"),
            ((to01(k), f"{complex(v):.4f}") for k, v in amplitudes),
        )
        if len(res.amplitudes) > max_outcomes:
            _echo(
                console,
                f"results limited to {max_outcomes} items, "
                "see `res.amplitudes` for a full list",
            )


def _print_table(
    target: Console | None,
    header: tuple[str, str],
    rows: Iterable[tuple[str, str]],
) -> None:
    target = target or console
    table = Table(box=REPORT_BOX, show_edge=True, header_style="bold")
    table.add_column(header[0], no_wrap=True, overflow="ignore")
    table.add_column(header[1], justify="right", no_wrap=True, overflow="ignore")
    for row in rows:
        table.add_row(*row)

    # Render at natural width so long bitstrings are never cropped to the console
    unbounded = target.options.update_width(_UNBOUNDED_WIDTH)
    width = Measurement.get(target, unbounded, table).maximum
    lines = target.render_lines(
        table, target.options.update_width(width), pad=False, new_lines=True
    )
    target.print(Segments(chain.from_iterable(lines[:-1])), crop=False)


def _echo(target: Console | None, text: str) -> None:
    # Algorithm names may contain brackets; keep them out of rich markup
    (target or console).print(text, markup=False, highlight=False)


__all__ = [
    "DEFAULT_REPORT_OUTCOMES",
    "REPORT_BOX",
    "format_time",
    "printreport",
    "ptime",
]
