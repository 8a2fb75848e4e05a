# bloxide

bloxide analyses compressible laminar boundary layers. It solves the
self-similar flat-plate boundary layer equations for a calorically perfect
gas. Viscosity comes from Sutherland's law. The wall values `f''` and `g'` are
found by Newton shooting, with derivatives taken by complex steps. The
equations are integrated with fixed-step RKF45 from η = 0 to η = 5 in 500
steps.

From the converged wall state, bloxide reports:

- the skin friction
- the wall heat transfer
- the 99.9% boundary layer thickness
- the adiabatic wall temperature

It also writes the profile through the layer to a data file.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Configuration

A case is read from the first document of a YAML file. The file must hold all
of these keys. Each value may be an integer or a float, or a string that holds
a number.

```yaml
R: 287.0        # gas constant, J/(kg K)
gamma: 1.4      # ratio of specific heats
Pr: 0.71        # Prandtl number
p_e: 2300.0     # edge pressure, Pa
u_e: 2000.0     # edge velocity, m/s
T_e: 220.0      # edge temperature, K
T_wall: 300     # wall temperature, K
x: 0.5          # distance from the leading edge, m
```

`read_config_file` raises `bloxide.config.ConfigError` in these cases:

- the file cannot be opened
- the file is not valid YAML
- the first document is not a mapping
- a key is missing
- a value is not a number

## Usage

```
bloxide case.yaml
```

With no argument, the command reads `test.yaml` in the current directory. It
first prints the configuration. It then solves the boundary layer for the
given wall temperature and prints these results:

- the skin friction in N/m²
- the heat transfer in W/cm²
- the 99.9% boundary layer thickness in mm
- the Reynolds number at `x`, in millions
- the Reynolds number based on that thickness

Next it solves the adiabatic-wall case and prints the adiabatic wall
temperature in K. Each Newton solve also prints the wall values it converged
to and how many iterations it took.

The profile is written to a file named after the config file, with `.yaml`
replaced by `.dat`, so `case.yaml` gives `case.dat`. Give the config file a
`.yaml` name; otherwise the name is left unchanged and the config file itself
is overwritten. The file starts with a header line `# y vel T rho p`. Each line
after that holds one point of the profile: height, velocity, temperature,
density and pressure, in SI units.

When something goes wrong, the command prints `error: ...` to standard error
and exits with status 1. That happens for:

- a bad config file
- a Newton solve that does not converge
- a velocity that never reaches 99.9% of the edge value
- a file that cannot be written

## Library use

```python
from bloxide.config import read_config_file
from bloxide.parameters import Parameters
from bloxide.solver import (
    boundary_layer_size,
    heat_transfer,
    skin_friction,
    solve_adiabatic_boundary_layer,
    solve_boundary_layer,
    write_dat_file,
)

pm = Parameters.from_config(read_config_file("case.yaml"))
states = solve_boundary_layer(pm)
print(skin_friction(states[0], pm), heat_transfer(states[0], pm))
print(boundary_layer_size(states))
write_dat_file(states, "case.dat", pm)

adiabatic = solve_adiabatic_boundary_layer(pm)
print(adiabatic[0].g.real * pm.h_e / pm.C_p)
```

The modules are:

- `bloxide.config`: `Config`, `ConfigError`, `read_config_file`.
- `bloxide.parameters`: `Parameters`, built with `Parameters.from_config`. It
  holds the edge density, enthalpy, viscosity and thermal conductivity, `C_p`,
  `xi` and the wall enthalpy.
- `bloxide.state`: `State`, a frozen dataclass of complex components `f`,
  `fd`, `fdd`, `g`, `gd` and `y`. It supports element-wise arithmetic with
  other states and with numbers. `State.wall_state` and
  `State.adiabatic_wall_state` build wall conditions.
- `bloxide.viscosity`: `sutherland_mu` and `sutherland_mu_derivative`. Both
  accept real or complex temperatures.
- `bloxide.solver`: the integrator and the solvers.
  - Integration: `rkf45_step`, `self_similar_ode` and `integrate_through_bl`.
  - Gas properties: `soft_max`, `soft_max_derivative` and
    `density_viscosity_product` with its derivatives.
  - Solvers: `solve_boundary_layer` and `solve_adiabatic_boundary_layer`.
  - Results: `skin_friction`, `heat_transfer`, `boundary_layer_size`,
    `reynolds_number`, `write_dat_file` and `get_heat_transfer`.
- `bloxide.cli`: `main`, the command-line entry point.

`boundary_layer_size` returns `None` if the velocity never exceeds 99.9% of the
edge value. `solve_boundary_layer` and `solve_adiabatic_boundary_layer` raise
`bloxide.solver.ConvergenceError` if the Newton iteration has not converged
after 100 iterations.

## Tests

```
pytest
```