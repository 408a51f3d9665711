"""
Four-momentum value type for HepCalc.

Units: GeV (natural units c = 1).

Components are held as numpy float64 so that the kinematic formulas follow
IEEE-754 rules: sqrt of a negative mass squared, log of a non-positive
argument and division by zero give nan/inf instead of raising. No physical
validity is enforced on the components.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Sequence
import numpy as np


# -----------------------------
# FourMomentum
# -----------------------------
@dataclass
class FourMomentum:
    E: float
    px: float
    py: float
    pz: float

    def __post_init__(self):
        self.E = np.float64(self.E)
        self.px = np.float64(self.px)
        self.py = np.float64(self.py)
        self.pz = np.float64(self.pz)

    @classmethod
    def from_components(cls, components: Sequence[float]) -> "FourMomentum":
        """Build a FourMomentum from an ordered (E, px, py, pz) sequence."""
        components = list(components)
        if len(components) != 4:
            raise ValueError(
                f"FourMomentum needs exactly 4 components (E, px, py, pz), got {len(components)}."
            )
        return cls(*components)

    def P(self) -> np.ndarray:
        return np.array([self.E, self.px, self.py, self.pz], dtype=float)

    def copy(self) -> "FourMomentum":
        return replace(self)

    # -------------------- Derived quantities --------------------

    def pperp2(self) -> float:
        with np.errstate(all="ignore"):
            return self.px * self.px + self.py * self.py

    def pperp(self) -> float:
        with np.errstate(all="ignore"):
            return np.sqrt(self.pperp2())

    def rap(self) -> float:
        with np.errstate(all="ignore"):
            return 0.5 * np.log((self.E + self.pz) / (self.E - self.pz))

    def phi(self) -> float:
        return np.arctan2(self.py, self.px)

    def m2(self) -> float:
        with np.errstate(all="ignore"):
            return self.E * self.E - self.px * self.px - self.py * self.py - self.pz * self.pz

    def m(self) -> float:
        with np.errstate(all="ignore"):
            return np.sqrt(self.m2())

    # -------------------- Additive algebra --------------------

    def __iadd__(self, other: "FourMomentum") -> "FourMomentum":
        with np.errstate(all="ignore"):
            self.E += other.E
            self.px += other.px
            self.py += other.py
            self.pz += other.pz
        return self

    def __isub__(self, other: "FourMomentum") -> "FourMomentum":
        with np.errstate(all="ignore"):
            self.E -= other.E
            self.px -= other.px
            self.py -= other.py
            self.pz -= other.pz
        return self

    def __add__(self, other: "FourMomentum") -> "FourMomentum":
        result = self.copy()
        result += other
        return result

    def __sub__(self, other: "FourMomentum") -> "FourMomentum":
        result = self.copy()
        result -= other
        return result

    # -------------------- Representation --------------------

    def __repr__(self) -> str:
        return f"FourMomentum(E={self.E:.9g}, px={self.px:.9g}, py={self.py:.9g}, pz={self.pz:.9g})"

    def __str__(self) -> str:
        return (
            "Four Momentum with components\n"
            f"E = {self.E:.9g} px = {self.px:.9g} py = {self.py:.9g} pz = {self.pz:.9g}"
            f" || (mass)^2 = {self.m2():.9g}\n"
        )
