"""Command-line entry point for the boundary-layer analysis."""

from __future__ import annotations

import sys
from dataclasses import fields
from typing import Optional, Sequence

from bloxide.config import Config, ConfigError, read_config_file
from bloxide.parameters import Parameters
from bloxide.solver import (
    ConvergenceError,
    boundary_layer_size,
    heat_transfer,
    reynolds_number,
    skin_friction,
    solve_adiabatic_boundary_layer,
    solve_boundary_layer,
    write_dat_file,
)

DEFAULT_CONFIG = "test.yaml"


def _describe(config: Config) -> str:
    body = "".join(
        f"    {fld.name}: {getattr(config, fld.name)!r},\n" for fld in fields(config)
    )
    return f"Config {{\n{body}}}"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Solve the boundary layer described by a YAML file and report results."""
    args = list(sys.argv[1:] if argv is None else argv)
    print("bloxide: A compressible boundary layer analysis code.")
    config_file_name = args[0] if args else DEFAULT_CONFIG

    try:
        config = read_config_file(config_file_name)
        pm = Parameters.from_config(config)
        print(_describe(config))

        states = solve_boundary_layer(pm)
        wall = states[0]
        tauw = skin_friction(wall, pm)
        qw = heat_transfer(wall, pm)
        ybl = boundary_layer_size(states)
        if ybl is None:
            raise ConvergenceError("Cannot find bl size")
        rex = reynolds_number(pm.rho_e, pm.u_e, pm.mu_e, pm.x)
        ret = reynolds_number(pm.rho_e, pm.u_e, pm.mu_e, ybl)

        print(f"Skin Friction:  {tauw:5.5f} N/m2")
        print(f"Heat Transfer : {qw / 1e4:5.5f} W/cm2")
        print(f"99.9% BL size : {ybl * 1000.0:5.5f} mm")
        print(f"Rex: {rex / 1e6:5.5f} million   Ret: {ret:5.5f}")

        adiabatic = solve_adiabatic_boundary_layer(pm)
        t_wall = adiabatic[0].g.real * pm.h_e / pm.C_p
        print(f"Adiabatic Wall Temp: {t_wall:5.5f} K")

        write_dat_file(states, config_file_name.replace(".yaml", ".dat"), pm)
    except (ConfigError, ConvergenceError, OSError) as err:
        print(f"error: {err}", file=sys.stderr)
        return 1

    print("Done.")
    return 0


if __name__ == "__main__":
    sys.exit(main())