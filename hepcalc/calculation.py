"""
The HepCalc calculation.

Steps:
  1. transform momenta a, b, c into t (pre_calc_transform)
  2. log_product = log(pperp2(t)/q2) * log(m2(t)/q2)
  3. b += c, in place on the caller's vector
  4. result = log_product * dot(a, b)

Non-finite intermediate values (spacelike t, q2 == 0, ...) are not trapped:
they flow through to the result, and a logger warning flags it.
"""

from __future__ import annotations
import logging
import math
from typing import Dict, Tuple
import numpy as np
from .kinematics import FourMomentum
from .algebra import dot
from .transform import pre_calc_transform

logger = logging.getLogger(__name__)


DEFAULT_Q2 = 100.0


def default_momenta() -> Tuple[FourMomentum, FourMomentum, FourMomentum]:
    """Fresh copies of the reference input momenta (a, b, c)."""
    return (
        FourMomentum(200.0, 0.0, 0.0, 200.0),
        FourMomentum(90.0, 30.0, 30.0, 2000.0),
        FourMomentum(45.0, 15.0, 20.0, 1000.0),
    )


def log_terms(transformed: FourMomentum, q2: float) -> Tuple[float, float]:
    """Return (log_soft, log_hard) for a transformed momentum at scale q2."""
    with np.errstate(all="ignore"):
        q2 = np.float64(q2)
        l_soft = np.log(transformed.pperp2() / q2)
        l_hard = np.log(transformed.m2() / q2)
    return l_soft, l_hard


def do_calculation(transformed: FourMomentum, q2: float) -> float:
    """
    Product of the logarithm of the transformed transverse momentum and the
    logarithm of the transformed mass, both normalised by the scale q2.
    """
    l_soft, l_hard = log_terms(transformed, q2)
    with np.errstate(all="ignore"):
        return l_soft * l_hard


def run_calculation(a: FourMomentum,
                    b: FourMomentum,
                    c: FourMomentum,
                    q2: float = DEFAULT_Q2) -> Dict[str, object]:
    """
    Run the full calculation and return a diagnostic dict.

    Note that ``b`` is updated in place to b + c after the transform, exactly
    once, so the caller sees the mutated vector. Pass a copy to keep it.

    Returns
    -------
    dict
        'transformed' : FourMomentum t
        'log_soft', 'log_hard', 'log_product' : float
        'dot' : float, a.(b + c)
        'result' : float, log_product * dot
        'finite' : bool, whether result is finite
    """
    t = pre_calc_transform(a, b, c)
    l_soft, l_hard = log_terms(t, q2)
    log_product = do_calculation(t, q2)

    b += c

    a_dot_b = dot(a, b)
    with np.errstate(all="ignore"):
        result = float(log_product * a_dot_b)

    finite = math.isfinite(result)
    if not finite:
        logger.warning(
            f"Calculation produced a non-finite result ({result}) "
            f"for q2={q2}: pperp2={float(t.pperp2()):.9g}, m2={float(t.m2()):.9g}"
        )

    return {
        "transformed": t,
        "log_soft": float(l_soft),
        "log_hard": float(l_hard),
        "log_product": float(log_product),
        "dot": float(a_dot_b),
        "result": result,
        "finite": finite,
    }
