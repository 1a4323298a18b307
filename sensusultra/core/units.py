# sensusultra/core/units.py
"""Physical constants and raw-unit conversions used by the parser."""
from __future__ import annotations

ATM = 101325.0  # Pa
BAR = 100000.0  # Pa
GRAVITY = 9.80665  # m/s^2
SEAWATER_DENSITY = 1025.0  # kg/m^3

KELVIN_OFFSET = 273.15


def pressure_to_depth(raw, atmospheric: float, hydrostatic: float):
    """Convert raw absolute pressure (millibar) to depth in metres.

    Works on scalars and numpy arrays alike.
    """
    return (raw * BAR / 1000.0 - atmospheric) / hydrostatic


def centikelvin_to_celsius(raw):
    return raw / 100.0 - KELVIN_OFFSET
