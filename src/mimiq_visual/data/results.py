"""
Simulation Results Record

Read-only container for the output of a circuit simulation, plus the helpers
the report and histogram use to pick and label outcomes.

The record is produced elsewhere (by the simulator or a JSON file). Printing
and plotting functions accept any object exposing ``results``, ``samples``
and ``amplitudes`` attributes, so the dataclass here is only needed when the
data does not already come in such an object.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

import numpy as np

logger = logging.getLogger(__name__)

K = TypeVar("K")

BitString = str | tuple[bool, ...] | tuple[int, ...]


class ResultsError(ValueError):
    """Raised when a results file or dict cannot be turned into a Results."""


@dataclass(frozen=True, slots=True)
class Results:
    """Output of a single circuit simulation."""

    results: Mapping[str, Any] = field(default_factory=dict)
    """Run metadata: algorithm, time, fidelity, averageGateError."""

    samples: Mapping[Any, int] = field(default_factory=dict)
    """Measured bitstring -> occurrence count."""

    amplitudes: Mapping[Any, complex] = field(default_factory=dict)
    """Bitstring -> statevector amplitude."""

    @property
    def n_samples(self) -> int:
        """Total number of samples."""
        return sum(self.samples.values())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Results:
        """
        Build a Results from its JSON-shaped dict form.

        Args:
            data: Dict with ``results``, ``samples`` and ``amplitudes`` keys.
                Amplitudes may be ``[re, im]`` pairs, ``{"re", "im"}`` objects,
                numbers, or strings understood by ``complex()``.

        Returns:
            Results record

        Raises:
            ResultsError: If a section has the wrong type, a count is not a
                non-negative integer, or an amplitude cannot be parsed

        Example:
            >>> res = Results.from_dict({"samples": {"00": 3, "11": 5}})
            >>> res.n_samples
            8
        """
        if not isinstance(data, Mapping):
            raise ResultsError(
                f"Expected a JSON object at top level, got {type(data).__name__}"
            )

        sections: dict[str, Mapping[str, Any]] = {}
        for name in ("results", "samples", "amplitudes"):
            section = data.get(name) or {}
            if not isinstance(section, Mapping):
                raise ResultsError(
                    f"'{name}' must be an object, got {type(section).__name__}"
                )
            sections[name] = section

        samples = {
            str(k): _parse_count(k, v) for k, v in sections["samples"].items()
        }
        amplitudes = {
            str(k): _parse_amplitude(k, v) for k, v in sections["amplitudes"].items()
        }

        return cls(
            results=dict(sections["results"]),
            samples=samples,
            amplitudes=amplitudes,
        )


# =============================================================================
# PUBLIC API
# =============================================================================


def to01(bitstring: BitString | Iterable[Any]) -> str:
    """
    Render a bitstring key as a string of 0/1 characters.

    Args:
        bitstring: A str (returned unchanged) or an iterable of bools/ints,
            qubit 0 first.

    Returns:
        String such as ``"0110"``

    Example:
        >>> to01((True, False, True))
        '101'
    """
    if isinstance(bitstring, str):
        return bitstring
    return "".join("1" if bit else "0" for bit in bitstring)


def top_outcomes(samples: Mapping[K, int], max_outcomes: int) -> list[tuple[K, int]]:
    """
    Get the most frequent outcomes in descending count order.

    Ties keep the insertion order of ``samples``.

    Args:
        samples: Bitstring -> count mapping.
        max_outcomes: Maximum number of entries to return.

    Returns:
        At most ``max_outcomes`` (bitstring, count) pairs
    """
    ranked = sorted(samples.items(), key=lambda item: item[1], reverse=True)
    if len(ranked) > max_outcomes:
        logger.debug("Keeping %d of %d outcomes", max_outcomes, len(ranked))
    return ranked[: max(max_outcomes, 0)]


def top_amplitudes(
    amplitudes: Mapping[K, complex], max_outcomes: int
) -> list[tuple[K, complex]]:
    """
    Get the amplitudes with the largest probability ``|a|**2``.

    Ties keep the insertion order of ``amplitudes``.

    Args:
        amplitudes: Bitstring -> amplitude mapping.
        max_outcomes: Maximum number of entries to return.

    Returns:
        At most ``max_outcomes`` (bitstring, amplitude) pairs, most probable first
    """
    items = list(amplitudes.items())
    if not items:
        return []

    probabilities = np.abs(np.array([a for _, a in items], dtype=complex)) ** 2
    # Stable sort on the negated key keeps ties in insertion order
    order = np.argsort(-probabilities, kind="stable")[: max(max_outcomes, 0)]
    if len(items) > max_outcomes:
        logger.debug("Keeping %d of %d amplitudes", max_outcomes, len(items))
    return [items[i] for i in order]


def load_results(path: str | Path) -> Results:
    """
    Load a Results record from a JSON file.

    Args:
        path: JSON file in the ``Results.from_dict`` layout.

    Returns:
        Results record

    Raises:
        ResultsError: If the content does not describe a results record
        OSError: If the file cannot be read
        json.JSONDecodeError: If the file is not valid JSON
    """
    path = Path(path)
    logger.debug("Loading results from %s", path)
    with open(path) as f:
        data = json.load(f)
    return Results.from_dict(data)


# =============================================================================
# INTERNAL HELPERS
# =============================================================================


def _parse_count(key: Any, value: Any) -> int:
    """Parse one sample count, accepting ints and integral floats."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ResultsError(f"Invalid sample count for state '{key}': {value!r}")
    return value


def _parse_amplitude(key: Any, value: Any) -> complex:
    """Parse one amplitude value from its JSON form."""
    try:
        if isinstance(value, Mapping):
            return complex(float(value.get("re", 0.0)), float(value.get("im", 0.0)))
        if isinstance(value, (list, tuple)):
            if len(value) != 2:
                raise ValueError(f"expected [re, im], got {len(value)} values")
            return complex(float(value[0]), float(value[1]))
        if isinstance(value, str):
            return complex(value.replace(" ", "").replace("im", "j"))
        return complex(value)
    except (TypeError, ValueError) as exc:
        raise ResultsError(f"Invalid amplitude for state '{key}': {value!r}") from exc


__all__ = [
    "BitString",
    "Results",
    "ResultsError",
    "load_results",
    "to01",
    "top_amplitudes",
    "top_outcomes",
]
