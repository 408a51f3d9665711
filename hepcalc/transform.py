"""
Transformation of the input momenta before the calculation.

The rule below is reproduced exactly as in the reference calculation,
including the sin/cos cross terms between the sum and difference vectors.
"""

from __future__ import annotations
import numpy as np
from .kinematics import FourMomentum
from .algebra import add, subtract


def pre_calc_transform(a: FourMomentum, b: FourMomentum, c: FourMomentum) -> FourMomentum:
    """
    Combine three momenta into one transformed four-momentum.

    Parameters
    ----------
    a, b, c : FourMomentum
        Input momenta. None of them is modified.

    Returns
    -------
    FourMomentum
        With x = b + c and y = b - c:
          E  = a.E  + x.E
          px = a.px + x.pperp cos(x.phi) + y.pperp sin(y.phi)
          py = a.py + x.pperp sin(x.phi) + y.pperp cos(y.phi)
          pz = a.pz + y.pz
    """
    x = add(b, c)
    y = subtract(b, c)

    with np.errstate(all="ignore"):
        return FourMomentum(
            a.E + x.E,
            a.px + x.pperp() * np.cos(x.phi()) + y.pperp() * np.sin(y.phi()),
            a.py + x.pperp() * np.sin(x.phi()) + y.pperp() * np.cos(y.phi()),
            a.pz + y.pz,
        )
