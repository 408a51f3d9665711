"""
HepCalc: four-momentum kinematics and the log-scaled calculation built on it.

Usage:
    from hepcalc import default_momenta, run_calculation

    a, b, c = default_momenta()
    out = run_calculation(a, b, c, q2=100.0)   # b is updated to b + c
    print(out["result"])
"""
from .kinematics import FourMomentum
from .algebra import dot, add, subtract, components_close
from .transform import pre_calc_transform
from .calculation import DEFAULT_Q2, default_momenta, log_terms, do_calculation, run_calculation
