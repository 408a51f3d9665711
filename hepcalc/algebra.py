# algebra.py
# Free functions acting on pairs of FourMomentum values.
#
# add/subtract never touch their arguments: they work on a private copy and
# return it. In-place combination (+=, -=) is left to callers that want the
# mutation to be visible.
import numpy as np


def dot(pa, pb):
    """
    Product of two four-vectors under the Minkowski metric (+, -, -, -).

    Parameters
    ----------
    pa, pb : FourMomentum

    Returns
    -------
    float
        pa.E*pb.E - pa.px*pb.px - pa.py*pb.py - pa.pz*pb.pz

    Examples
    --------
    >>> from hepcalc.kinematics import FourMomentum
    >>> a = FourMomentum(200, 0, 0, 200)
    >>> b = FourMomentum(135, 45, 50, 3000)
    >>> float(dot(a, b))
    -573000.0
    >>> float(dot(a, b)) == float(dot(b, a))
    True
    """
    with np.errstate(all="ignore"):
        return pa.E * pb.E - pa.px * pb.px - pa.py * pb.py - pa.pz * pb.pz


def add(pa, pb):
    """Return pa + pb as a new FourMomentum; neither argument is modified."""
    result = pa.copy()
    result += pb
    return result


def subtract(pa, pb):
    """Return pa - pb as a new FourMomentum; neither argument is modified."""
    result = pa.copy()
    result -= pb
    return result


def components_close(pa, pb, tol=1e-9):
    """
    Componentwise comparison of two four-vectors.

    Returns True if every |pa_i - pb_i| < tol. Any nan component makes the
    comparison False.
    """
    return bool(np.all(np.abs(pa.P() - pb.P()) < tol))

