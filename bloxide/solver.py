"""Self-similar compressible boundary-layer solution by shooting and RKF45."""

from __future__ import annotations

import cmath
import math
from dataclasses import replace
from typing import Callable, Iterable, Optional, Sequence, Tuple, Union

from bloxide.parameters import Parameters
from bloxide.state import State
from bloxide.viscosity import sutherland_mu, sutherland_mu_derivative

Number = Union[float, complex]
OdeFunction = Callable[[float, State, Parameters], State]

NSTEPS = 500
ETA_FINAL = 5.0
SOFT_TEMPERATURE_FLOOR = 60.0
NEWTON_TOLERANCE = 1e-10
NEWTON_MAX_ITERATIONS = 100
COMPLEX_STEP = 1e-16


class ConvergenceError(RuntimeError):
    """Raised when the Newton shooting iteration fails to converge."""


def _sqrt(value: Number) -> Number:
    if isinstance(value, complex):
        return cmath.sqrt(value)
    return math.sqrt(value) if value >= 0.0 else math.nan


def _advance(base: State, h: float, *terms: Tuple[float, State]) -> State:
    """Return ``base + h * sum(coeff * k)`` over the given (coeff, k) pairs."""
    components = list(base)
    for coeff, k in terms:
        scale = coeff * h
        components = [a + scale * b for a, b in zip(components, k)]
    return State(*components)


def rkf45_step(
    f: OdeFunction, t0: float, h: float, y0: State, pm: Parameters
) -> Tuple[float, State, State]:
    """Take one Runge-Kutta-Fehlberg 4(5) step.

    Returns the new abscissa, the fifth-order estimate of the state and the
    absolute error estimate.
    """
    k1 = f(t0, y0, pm)
    k2 = f(t0 + h / 4.0, _advance(y0, h, (0.25, k1)), pm)
    k3 = f(
        t0 + 3.0 * h / 8.0,
        _advance(y0, h, (3.0 / 32.0, k1), (9.0 / 32.0, k2)),
        pm,
    )
    k4 = f(
        t0 + 12.0 * h / 13.0,
        _advance(
            y0, h,
            (1932.0 / 2197.0, k1), (-7200.0 / 2197.0, k2), (7296.0 / 2197.0, k3),
        ),
        pm,
    )
    k5 = f(
        t0 + h,
        _advance(
            y0, h,
            (439.0 / 216.0, k1), (-8.0, k2), (3680.0 / 513.0, k3),
            (-845.0 / 4104.0, k4),
        ),
        pm,
    )
    k6 = f(
        t0 + h / 2.0,
        _advance(
            y0, h,
            (-8.0 / 27.0, k1), (2.0, k2), (-3544.0 / 2565.0, k3),
            (1859.0 / 4104.0, k4), (-11.0 / 40.0, k5),
        ),
        pm,
    )
    y1 = _advance(
        y0, h,
        (16.0 / 135.0, k1), (6656.0 / 12825.0, k3), (28561.0 / 56430.0, k4),
        (-9.0 / 50.0, k5), (2.0 / 55.0, k6),
    )
    err = _advance(
        State(), h,
        (1.0 / 360.0, k1), (-128.0 / 4275.0, k3), (-2197.0 / 75240.0, k4),
        (1.0 / 50.0, k5), (2.0 / 55.0, k6),
    ).abs()
    return t0 + h, y1, err


def soft_max(a: Number, b: float) -> Number:
    """A smooth approximation of ``max(a, b)`` that stays differentiable."""
    da = a - b
    scale = 0.5 * (a + b)
    eps = 1e-3 * scale + 1e-3
    return scale + 0.5 * _sqrt(da * da + eps * eps)


def soft_max_derivative(a: Number, b: float) -> Number:
    """Derivative of :func:`soft_max` with respect to ``a``."""
    da = a - b
    scale = 0.5 * (a + b)
    eps = 1e-3 * scale + 1e-3
    sqrtval = _sqrt(da * da + eps * eps)
    return 0.5 + 0.25 / sqrtval * (2.0 * da + 2.0 * eps * 1e-3 / 2.0)


def density_viscosity_product(g: Number, pm: Parameters) -> Number:
    """Ratio of the local density-viscosity product to its edge value."""
    temp = g * pm.h_e / pm.C_p
    soft_temp = soft_max(temp, SOFT_TEMPERATURE_FLOOR)
    rho = pm.p_e / (pm.R * soft_temp)
    mu = sutherland_mu(soft_temp)
    return rho * mu / (pm.rho_e * pm.mu_e)


def density_viscosity_product_derivative2(g: Number, pm: Parameters) -> Number:
    """Finite-difference estimate of d(rho mu ratio)/dg."""
    deltag = 0.0001 * g
    c0 = density_viscosity_product(g, pm)
    c1 = density_viscosity_product(g + deltag, pm)
    return (c1 - c0) / deltag


def density_viscosity_product_derivative(g: Number, pm: Parameters) -> Number:
    """Analytic derivative of :func:`density_viscosity_product` in ``g``."""
    temp = g * pm.h_e / pm.C_p
    soft_temp = soft_max(temp, SOFT_TEMPERATURE_FLOOR)
    rho = pm.p_e / (pm.R * soft_temp)
    mu = sutherland_mu(soft_temp)

    dT_dg = pm.h_e / pm.C_p
    dST_dT = soft_max_derivative(temp, SOFT_TEMPERATURE_FLOOR)
    dmu_dg = sutherland_mu_derivative(soft_temp) * dST_dT * dT_dg

    drho_dST = -pm.p_e / pm.R / soft_temp / soft_temp
    drho_dg = drho_dST * dST_dT * dT_dg

    return (rho * dmu_dg + mu * drho_dg) / (pm.rho_e * pm.mu_e)


def self_similar_ode(t: float, z: State, pm: Parameters) -> State:
    """Right-hand side of the self-similar momentum and energy equations."""
    c = density_viscosity_product(z.g, pm)
    dc_dg = density_viscosity_product_derivative(z.g, pm)
    cd = dc_dg * z.gd

    fddd = 1.0 / c * (-z.f * z.fdd - cd * z.fdd)
    gdd = pm.Pr / c * (
        -z.gd * (cd / pm.Pr + z.f) - c * pm.u_e * pm.u_e / pm.h_e * z.fdd * z.fdd
    )
    yd = (
        math.sqrt(2.0 * pm.xi) / pm.u_e * pm.h_e / pm.p_e
        * (pm.gamma - 1.0) / pm.gamma * z.g
    )
    return State(f=z.fd, fd=z.fdd, fdd=fddd, g=z.gd, gd=gdd, y=yd)


def integrate_through_bl(state0: State, pm: Parameters) -> list[State]:
    """Integrate from the wall to the edge; returns every state, wall first."""
    eta = 0.0
    deta = ETA_FINAL / NSTEPS
    z = state0
    states = [z]
    for _ in range(NSTEPS):
        eta, z, _err = rkf45_step(self_similar_ode, eta, deta, z, pm)
        states.append(z)
    return states


def skin_friction(z: State, pm: Parameters) -> float:
    """Wall shear stress (N/m^2) from the wall state."""
    rhomu_ratio = density_viscosity_product(z.g.real, pm)
    rex = pm.rho_e * pm.u_e / pm.mu_e * pm.x
    cf = math.sqrt(2.0) * rhomu_ratio * z.fdd.real / math.sqrt(rex)
    return 0.5 * cf * pm.rho_e * pm.u_e * pm.u_e


def heat_transfer(z: State, pm: Parameters) -> float:
    """Wall heat flux (W/m^2) from the wall state."""
    rhomu_ratio = density_viscosity_product(z.g.real, pm)
    rex = pm.rho_e * pm.u_e / pm.mu_e * pm.x
    return (
        pm.u_e * pm.rho_e / math.sqrt(2.0) / pm.Pr
        * rhomu_ratio * pm.h_e * z.gd.real / math.sqrt(rex)
    )


def boundary_layer_size(states: Iterable[State]) -> Optional[float]:
    """Height at which the velocity first exceeds 99.9% of the edge value."""
    return next((z.y.real for z in states if z.fd.real > 0.999), None)


def reynolds_number(rho: float, vel: float, mu: float, x: float) -> float:
    """Reynolds number based on length ``x``."""
    return rho * vel * x / mu


def _edge_sensitivities(state0: State, pm: Parameters) -> Tuple[State, float, float]:
    """Integrate a complex-stepped wall state; return edge state and d(fd), d(g)."""
    edge = integrate_through_bl(state0, pm)[-1]
    return edge, edge.fd.imag / COMPLEX_STEP, edge.g.imag / COMPLEX_STEP


def _newton_shoot(
    make_state: Callable[[float, float], State], second: str, first_guess: float,
    second_guess: float, pm: Parameters,
) -> Tuple[float, float, int]:
    """Find wall values (fdd, second) that give fd = g = 1 at the edge."""
    fdd, other = first_guess, second_guess
    error = 1e99
    iterations = 0
    while error > NEWTON_TOLERANCE:
        base = make_state(fdd, other)
        _, dfd_dfdd, dg_dfdd = _edge_sensitivities(
            replace(base, fdd=complex(fdd, COMPLEX_STEP)), pm
        )
        perturbed = replace(
            base, **{second: complex(getattr(base, second).real, COMPLEX_STEP)}
        )
        edge, dfd_dother, dg_dother = _edge_sensitivities(perturbed, pm)

        fd_err = edge.fd.real - 1.0
        g_err = edge.g.real - 1.0
        error = math.sqrt(fd_err * fd_err + g_err * g_err)

        diff_fdd = (fd_err * dg_dother / dfd_dother - g_err) / (
            dg_dfdd - dg_dother * dfd_dfdd / dfd_dother
        )
        diff_other = (fd_err * dg_dfdd / dfd_dfdd - g_err) / (
            dg_dother - dg_dfdd * dfd_dother / dfd_dfdd
        )
        fdd += diff_fdd
        other += diff_other

        iterations += 1
        if iterations > NEWTON_MAX_ITERATIONS:
            raise ConvergenceError("Too many iterations of newton solve")
    return fdd, other, iterations


def solve_boundary_layer(pm: Parameters) -> list[State]:
    """Solve the boundary layer over a wall held at ``pm.T_wall``."""
    def make_state(fdd: float, gd: float) -> State:
        return State.wall_state(fdd, gd, pm.h_wall, pm.h_e)

    fdd, gd, iterations = _newton_shoot(make_state, "gd", 0.5, 1.0, pm)
    print(f"Solved fdd {fdd!r} gd {gd!r} in {iterations} iters")
    return integrate_through_bl(make_state(fdd, gd), pm)


def solve_adiabatic_boundary_layer(pm: Parameters) -> list[State]:
    """Solve the boundary layer over an adiabatic wall."""
    fdd, g, iterations = _newton_shoot(State.adiabatic_wall_state, "g", 0.5, 1.0, pm)
    print(f"Solved fdd {fdd!r} g {g!r} in {iterations} iters")
    return integrate_through_bl(State.adiabatic_wall_state(fdd, g), pm)


def _format_exp(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    mantissa, exponent = f"{value:.16e}".split("e")
    return f"{mantissa}e{int(exponent)}"


def write_dat_file(states: Sequence[State], filename: str, pm: Parameters) -> None:
    """Write height, velocity, temperature, density and pressure profiles."""
    with open(filename, "w", encoding="utf-8") as out:
        out.write("# y vel T rho p\n")
        for z in states:
            temp = z.g.real * pm.h_e / pm.C_p
            rho = pm.p_e / (pm.R * temp)
            row = (z.y.real, z.fd.real * pm.u_e, temp, rho, pm.p_e)
            out.write(" ".join(_format_exp(v) for v in row) + "\n")


def get_heat_transfer(x: float) -> float:
    """Simple linear heat-transfer estimate used by external callers."""
    return 1.65 * x