"""
Scan of the calculation result over the scale q2.

Each scan point runs the full calculation on fresh copies of the inputs, so
the caller's momenta are never mutated.
"""

import numpy as np
import matplotlib.pyplot as plt

from .calculation import run_calculation


def scan_scale(a, b, c, q2_values):
    """
    Evaluate the calculation for every q2 in ``q2_values``.

    Parameters
    ----------
    a, b, c : FourMomentum
        Input momenta (left untouched).
    q2_values : array-like of float
        Scales to evaluate.

    Returns
    -------
    (q2, results) : tuple of numpy.ndarray
        Non-finite results are kept as nan/inf.
    """
    q2 = np.asarray(q2_values, dtype=float)
    results = np.empty_like(q2)

    for i, q2_i in enumerate(q2):
        out = run_calculation(a.copy(), b.copy(), c.copy(), q2_i)
        results[i] = out["result"]

    return q2, results


def log_spaced_scales(q2_min, q2_max, n_points=50):
    """Log-spaced scales between q2_min and q2_max (both > 0)."""
    if q2_min <= 0 or q2_max <= 0:
        raise ValueError("q2 range must be strictly positive for a log-spaced scan.")
    if n_points < 2:
        raise ValueError("Need at least two scan points.")
    return np.geomspace(q2_min, q2_max, n_points)


def plot_scale_scan(q2_values, results, output):
    """Plot result vs q2 (log x axis), skipping non-finite points. Returns ``output``."""
    q2 = np.asarray(q2_values, dtype=float)
    res = np.asarray(results, dtype=float)
    mask = np.isfinite(res)

    fig, ax = plt.subplots(figsize=(7, 5))
    ax.plot(q2[mask], res[mask], marker=".", label="HepCalc result")
    ax.set_xscale("log")
    ax.set_xlabel(r"$q^2\,\mathrm{[GeV^2]}$")
    ax.set_ylabel(r"$\log(p_\perp^2/q^2)\,\log(m^2/q^2)\;a\cdot(b+c)$")
    ax.set_title("Calculation result vs scale")
    ax.grid(alpha=0.3)
    ax.legend()
    fig.tight_layout()
    fig.savefig(output)
    plt.close(fig)
    return output
