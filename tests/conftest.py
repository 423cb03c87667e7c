"""Shared fixtures for mimiq_visual tests."""

import io
import json
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402
from rich.console import Console  # noqa: E402

from mimiq_visual.data.results import Results  # noqa: E402

RUN_METADATA = {
    "algorithm": "mps",
    "time": {"apply": 2.5e-4, "sampling": 0.0123, "total": 0.0126},
    "fidelity": 0.98765,
    "averageGateError": 0.00123,
}

# Counts deliberately not in sorted order
GHZ_SAMPLES = {
    "000": 480,
    "001": 3,
    "010": 5,
    "011": 2,
    "100": 4,
    "101": 1,
    "110": 6,
    "111": 499,
}


@pytest.fixture(autouse=True)
def _close_figures():
    """Close all figures after each test."""
    yield
    plt.close("all")


@pytest.fixture
def ghz_results() -> Results:
    """Noisy 3-qubit GHZ run with samples and two amplitudes."""
    return Results(
        results=dict(RUN_METADATA),
        samples=dict(GHZ_SAMPLES),
        amplitudes={"000": complex(0.7071, 0.0), "111": complex(0.0, -0.7071)},
    )


@pytest.fixture
def empty_results() -> Results:
    """Run metadata only, no samples or amplitudes."""
    return Results(results=dict(RUN_METADATA))


@pytest.fixture
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(buffer: io.StringIO) -> Console:
    """Console writing plain text into ``buffer``."""
    return Console(file=buffer, width=100, color_system=None)


@pytest.fixture
def results_file(tmp_path: Path) -> Path:
    """GHZ results written in the JSON file layout."""
    path = tmp_path / "ghz.json"
    path.write_text(
        json.dumps(
            {
                "results": RUN_METADATA,
                "samples": GHZ_SAMPLES,
                "amplitudes": {"000": [0.7071, 0.0], "111": [0.0, -0.7071]},
            }
        )
    )
    return path
