"""The boundary-layer state vector and its element-wise arithmetic."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, fields
from typing import Callable, Iterator


@dataclass(frozen=True)
class State:
    """Similarity variables f, f', f'', g, g' and the physical height y.

    Every component is held as a complex number so that derivatives can be
    taken by the complex-step method.
    """

    f: complex = 0j
    fd: complex = 0j
    fdd: complex = 0j
    g: complex = 0j
    gd: complex = 0j
    y: complex = 0j

    def __post_init__(self) -> None:
        for fld in fields(self):
            object.__setattr__(self, fld.name, complex(getattr(self, fld.name)))

    def __iter__(self) -> Iterator[complex]:
        return (getattr(self, fld.name) for fld in fields(self))

    def _map(self, fn: Callable[[complex], complex]) -> State:
        return State(*(fn(v) for v in self))

    def _zip(self, other: State, fn: Callable[[complex, complex], complex]) -> State:
        return State(*(fn(a, b) for a, b in zip(self, other)))

    def __add__(self, other: object) -> State:
        if isinstance(other, State):
            return self._zip(other, lambda a, b: a + b)
        if isinstance(other, numbers.Number):
            return self._map(lambda a: a + other)
        return NotImplemented

    def __radd__(self, other: object) -> State:
        if isinstance(other, numbers.Number):
            return self._map(lambda a: other + a)
        return NotImplemented

    def __sub__(self, other: object) -> State:
        if isinstance(other, State):
            return self._zip(other, lambda a, b: a - b)
        return NotImplemented

    def __mul__(self, other: object) -> State:
        if isinstance(other, State):
            return self._zip(other, lambda a, b: a * b)
        if isinstance(other, numbers.Number):
            return self._map(lambda a: a * other)
        return NotImplemented

    def __rmul__(self, other: object) -> State:
        if isinstance(other, numbers.Number):
            return self._map(lambda a: other * a)
        return NotImplemented

    def __truediv__(self, other: object) -> State:
        if isinstance(other, State):
            return self._zip(other, lambda a, b: a / b)
        if isinstance(other, numbers.Number):
            return self._map(lambda a: a / other)
        return NotImplemented

    def __rtruediv__(self, other: object) -> State:
        if isinstance(other, numbers.Number):
            return self._map(lambda a: other / a)
        return NotImplemented

    def abs(self) -> State:
        """Absolute value of each real part; imaginary parts are kept."""
        return self._map(lambda a: complex(abs(a.real), a.imag))

    @classmethod
    def wall_state(cls, fdd: float, gd: float, h_wall: float, h_e: float) -> State:
        """Wall conditions for a wall held at enthalpy ``h_wall``."""
        return cls(f=0.0, fd=0.0, fdd=fdd, g=h_wall / h_e, gd=gd, y=0.0)

    @classmethod
    def adiabatic_wall_state(cls, fdd: float, g: float) -> State:
        """Wall conditions for an adiabatic wall (zero enthalpy gradient)."""
        return cls(f=0.0, fd=0.0, fdd=fdd, g=g, gd=0.0, y=0.0)