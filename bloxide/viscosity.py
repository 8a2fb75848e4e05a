"""Sutherland's law for the dynamic viscosity of air."""

from __future__ import annotations

import cmath
import math

MU_REF = 1.716e-05
T_REF = 273.0
S = 111.0


def _sqrt(value: float | complex) -> float | complex:
    if isinstance(value, complex):
        return cmath.sqrt(value)
    return math.sqrt(value) if value >= 0.0 else math.nan


def sutherland_mu(temp: float | complex) -> float | complex:
    """Dynamic viscosity (Pa s) at temperature ``temp`` (K).

    Works for real and complex temperatures, so it can be used with
    complex-step differentiation.
    """
    ratio = temp / T_REF
    return MU_REF * _sqrt(ratio) * ratio * (T_REF + S) / (temp + S)


def sutherland_mu_derivative(temp: float | complex) -> float | complex:
    """Derivative of :func:`sutherland_mu` with respect to temperature."""
    return (
        MU_REF
        * (T_REF + S)
        * _sqrt(temp / T_REF)
        * (3.0 * S + temp)
        / (2.0 * T_REF * (S + temp) * (S + temp))
    )