"""Compressible laminar boundary layer analysis by self-similar solution."""

__version__ = "0.1.0"