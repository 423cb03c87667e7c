"""Generate demo results files for mimiq-visual.

This script writes a synthetic noisy GHZ run in the JSON layout read by
``mimiq-visual report`` and ``mimiq-visual hist``, then renders both
outputs next to it.

Output files land in experiments/demo/.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from mimiq_visual import Results, hist, printreport


def generate_ghz_results(
    n_qubits: int = 5,
    n_samples: int = 1000,
    flip_probability: float = 0.02,
    seed: int = 42,
) -> dict:
    """Build a JSON-serializable noisy GHZ results dict.

    Args:
        n_qubits: Number of qubits.
        n_samples: Number of measurement samples.
        flip_probability: Independent bit-flip probability per qubit.
        seed: Random seed for reproducibility.
    """
    rng = np.random.default_rng(seed)

    ideal = rng.integers(0, 2, size=n_samples)[:, None].repeat(n_qubits, axis=1)
    flips = rng.random((n_samples, n_qubits)) < flip_probability
    measured = ideal ^ flips

    samples: dict[str, int] = {}
    for row in measured:
        key = "".join(str(int(b)) for b in row)
        samples[key] = samples.get(key, 0) + 1

    amp = float(1 / np.sqrt(2))
    fidelity = (1 - flip_probability) ** n_qubits

    return {
        "results": {
            "algorithm": "mps",
            "time": {"apply": 3.4e-4, "sampling": 2.1e-2, "total": 2.14e-2},
            "fidelity": fidelity,
            "averageGateError": flip_probability / n_qubits,
            "timestamp": datetime.now(UTC).isoformat(),
        },
        "samples": samples,
        "amplitudes": {"0" * n_qubits: [amp, 0.0], "1" * n_qubits: [amp, 0.0]},
    }


def main() -> None:
    """Write the demo results file, print its report and save its histogram."""
    output_dir = Path(__file__).parent / "demo"
    output_dir.mkdir(parents=True, exist_ok=True)

    data = generate_ghz_results()
    results_file = output_dir / "ghz.json"
    with results_file.open("w") as f:
        json.dump(data, f, indent=2)
    print(f"Results saved to: {results_file}\n")

    res = Results.from_dict(data)
    printreport(res)

    fig = hist(res)
    hist_file = output_dir / "ghz_hist.svg"
    fig.savefig(hist_file)
    plt.close(fig)
    print(f"\nHistogram saved to: {hist_file}")


if __name__ == "__main__":
    main()
