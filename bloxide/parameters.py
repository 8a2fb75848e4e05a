"""Quantities that stay fixed while the boundary layer is solved."""

from __future__ import annotations

from dataclasses import dataclass

from bloxide.config import Config
from bloxide.viscosity import sutherland_mu


@dataclass(frozen=True)
class Parameters:
    """Gas properties and edge conditions derived from a :class:`Config`."""

    R: float
    gamma: float
    C_p: float
    Pr: float
    p_e: float
    T_e: float
    rho_e: float
    h_e: float
    mu_e: float
    u_e: float
    k_e: float
    xi: float
    x: float
    T_wall: float
    h_wall: float

    @classmethod
    def from_config(cls, config: Config) -> Parameters:
        """Derive the edge state and wall enthalpy from the inputs."""
        R = config.R
        gamma = config.gamma
        Pr = config.Pr
        C_p = gamma / (gamma - 1.0) * R
        mu_e = sutherland_mu(config.T_e)
        rho_e = config.p_e / (R * config.T_e)
        return cls(
            R=R,
            gamma=gamma,
            C_p=C_p,
            Pr=Pr,
            p_e=config.p_e,
            T_e=config.T_e,
            rho_e=rho_e,
            h_e=C_p * config.T_e,
            mu_e=mu_e,
            u_e=config.u_e,
            k_e=mu_e * C_p / Pr,
            xi=rho_e * config.u_e * mu_e * config.x,
            x=config.x,
            T_wall=config.T_wall,
            h_wall=C_p * config.T_wall,
        )