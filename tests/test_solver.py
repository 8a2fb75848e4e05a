import math
import re

import pytest

from bloxide.config import Config
from bloxide.parameters import Parameters
from bloxide.solver import (
    NSTEPS,
    boundary_layer_size,
    density_viscosity_product,
    density_viscosity_product_derivative,
    density_viscosity_product_derivative2,
    get_heat_transfer,
    heat_transfer,
    integrate_through_bl,
    reynolds_number,
    rkf45_step,
    skin_friction,
    soft_max,
    soft_max_derivative,
    solve_adiabatic_boundary_layer,
    solve_boundary_layer,
    write_dat_file,
)
from bloxide.state import State


@pytest.fixture(scope="module")
def pm():
    config = Config(
        R=287.0, gamma=1.4, Pr=0.71, p_e=10000.0, u_e=100.0,
        T_e=300.0, T_wall=300.0, x=0.5,
    )
    return Parameters.from_config(config)


@pytest.fixture(scope="module")
def solution(pm):
    return solve_boundary_layer(pm)


@pytest.fixture(scope="module")
def adiabatic_solution(pm):
    return solve_adiabatic_boundary_layer(pm)


def _growth(t, y, pm):
    return y


def test_rkf45_step_matches_exponential():
    y0 = State(1.0, 1.0, 1.0, 1.0, 1.0, 1.0)
    t1, y1, err = rkf45_step(_growth, 0.0, 0.1, y0, None)
    assert t1 == pytest.approx(0.1)
    for value in y1:
        assert value.real == pytest.approx(math.exp(0.1), rel=1e-8)
    for value in err:
        assert 0.0 <= value.real < 1e-6


def test_soft_max_approaches_larger_value():
    assert soft_max(300.0, 60.0) == pytest.approx(300.0, rel=1e-5)
    assert soft_max(0.0, 60.0) == pytest.approx(60.0, rel=1e-5)
    assert soft_max(300.0, 60.0) >= 300.0


def test_soft_max_derivative_matches_finite_difference():
    for a in (10.0, 59.0, 61.0, 250.0):
        h = 1e-5
        numeric = (soft_max(a + h, 60.0) - soft_max(a - h, 60.0)) / (2 * h)
        assert soft_max_derivative(a, 60.0) == pytest.approx(numeric, rel=1e-5)


def test_density_viscosity_product_is_one_at_edge(pm):
    assert density_viscosity_product(1.0, pm) == pytest.approx(1.0, rel=1e-4)


def test_density_viscosity_derivative_matches_complex_step(pm):
    step = 1e-30
    for g in (0.5, 1.0, 1.7):
        numeric = density_viscosity_product(complex(g, step), pm).imag / step
        analytic = density_viscosity_product_derivative(g, pm)
        assert analytic == pytest.approx(numeric, rel=1e-8)
        assert density_viscosity_product_derivative2(g, pm) == pytest.approx(
            analytic, rel=1e-3
        )


def test_density_viscosity_derivative2_zero_step_raises(pm):
    with pytest.raises(ZeroDivisionError):
        density_viscosity_product_derivative2(0.0, pm)


def test_integrate_through_bl_returns_every_step(pm):
    start = State.wall_state(0.47, 0.0, pm.h_wall, pm.h_e)
    states = integrate_through_bl(start, pm)
    assert len(states) == NSTEPS + 1
    assert states[0] == start
    heights = [z.y.real for z in states]
    assert heights == sorted(heights)


def test_boundary_layer_size_picks_first_state_over_threshold():
    states = [
        State(fd=0.5, y=0.1),
        State(fd=0.9995, y=0.2),
        State(fd=1.0, y=0.3),
    ]
    assert boundary_layer_size(states) == 0.2
    assert boundary_layer_size(states[:1]) is None


def test_reynolds_number_scales_with_length():
    assert reynolds_number(1.2, 50.0, 1.8e-5, 2.0) == pytest.approx(
        2.0 * reynolds_number(1.2, 50.0, 1.8e-5, 1.0)
    )


def test_get_heat_transfer():
    assert get_heat_transfer(1.0) == pytest.approx(1.65)
    assert get_heat_transfer(0.0) == 0.0


def test_solution_meets_edge_conditions(solution):
    edge = solution[-1]
    assert edge.fd.real == pytest.approx(1.0, abs=1e-8)
    assert edge.g.real == pytest.approx(1.0, abs=1e-8)
    assert len(solution) == NSTEPS + 1


def test_solution_wall_shear_near_blasius(solution):
    assert solution[0].fdd.real == pytest.approx(0.4696, abs=0.01)


def test_solution_wall_fluxes(solution, pm):
    wall = solution[0]
    assert skin_friction(wall, pm) > 0.0
    assert heat_transfer(wall, pm) > 0.0
    size = boundary_layer_size(solution)
    assert 0.0 < size <= solution[-1].y.real


def test_adiabatic_wall_temperature_bounds(adiabatic_solution, pm):
    wall = adiabatic_solution[0]
    assert wall.gd == 0
    t_wall = wall.g.real * pm.h_e / pm.C_p
    t_total = pm.T_e + pm.u_e ** 2 / (2.0 * pm.C_p)
    assert pm.T_e < t_wall < t_total
    assert adiabatic_solution[-1].g.real == pytest.approx(1.0, abs=1e-8)


def test_write_dat_file(tmp_path, pm):
    states = [
        State.wall_state(0.47, 0.1, pm.h_wall, pm.h_e),
        State(fd=1.0, g=1.0, y=0.001),
    ]
    path = tmp_path / "out.dat"
    write_dat_file(states, str(path), pm)
    lines = path.read_text().splitlines()
    assert lines[0] == "# y vel T rho p"
    assert len(lines) == 3
    pattern = re.compile(r"^-?\d\.\d{16}e-?\d+$")
    for line in lines[1:]:
        columns = line.split()
        assert len(columns) == 5
        assert all(pattern.match(c) for c in columns)
        assert float(columns[4]) == pm.p_e
    first = [float(c) for c in lines[1].split()]
    assert first[0] == 0.0
    assert first[1] == 0.0
    assert first[2] == pytest.approx(pm.T_wall)
    last = [float(c) for c in lines[2].split()]
    assert last[1] == pytest.approx(pm.u_e)
    assert last[3] == pytest.approx(pm.rho_e)