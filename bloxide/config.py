"""Reading the YAML input file that describes the freestream and wall."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from typing import Any

import yaml

_NUMBER = re.compile(r"[-+]?(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?")


class ConfigError(ValueError):
    """Raised when a configuration file cannot be read or is invalid."""


@dataclass(frozen=True)
class Config:
    """Inputs to the boundary-layer calculation, in SI units."""

    R: float
    gamma: float
    Pr: float
    p_e: float
    u_e: float
    T_e: float
    T_wall: float
    x: float


def _coerce_to_float(key: str, value: Any) -> float:
    """Accept integers as well as reals, since users write ``287`` freely."""
    if isinstance(value, bool):
        raise ConfigError(f"Value for {key!r} is not a number: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str) and _NUMBER.fullmatch(value.strip()):
        return float(value)
    raise ConfigError(f"Value for {key!r} is not a number: {value!r}")


def read_config_file(filename: str) -> Config:
    """Load a :class:`Config` from the first document of a YAML file."""
    try:
        with open(filename, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as err:
        raise ConfigError(f"Unable to open yaml file {filename}") from err

    try:
        documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as err:
        raise ConfigError(f"Unable to parse yaml file {filename}: {err}") from err

    if not documents or not isinstance(documents[0], dict):
        raise ConfigError(f"Yaml file {filename} does not hold a mapping")
    document = documents[0]

    values = {}
    for fld in fields(Config):
        if fld.name not in document:
            raise ConfigError(f"Missing key {fld.name!r} in {filename}")
        values[fld.name] = _coerce_to_float(fld.name, document[fld.name])
    return Config(**values)