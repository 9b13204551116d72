"""
Unit registry and display helpers.

Catalogs are stored in the native units of their system (ft / psf or
m / kPa) and nothing is converted between systems. pint is used to attach
units to values for display and to keep span and load quantities
dimensionally distinct.
"""

from typing import Union

import pint

from hollowcore.expressions import format_number
from hollowcore.models.inputs import UnitSystem

# Shared unit registry for the package
ureg = pint.UnitRegistry()
ureg.define("psf = pound_force / foot ** 2")

Q_ = ureg.Quantity

# pint unit names per system
SPAN_UNITS = {
    UnitSystem.IMPERIAL: "foot",
    UnitSystem.METRIC: "meter",
}
LOAD_UNITS = {
    UnitSystem.IMPERIAL: "psf",
    UnitSystem.METRIC: "kilopascal",
}


def span_quantity(value: float, system: UnitSystem) -> pint.Quantity:
    """Span as a length quantity in the system's unit."""
    return Q_(value, SPAN_UNITS[system])


def load_quantity(value: float, system: UnitSystem) -> pint.Quantity:
    """Superimposed load as a pressure quantity in the system's unit."""
    return Q_(value, LOAD_UNITS[system])


def magnitude_in(quantity: pint.Quantity, unit: str) -> float:
    """Get the magnitude of a quantity in specified units."""
    return quantity.to(unit).magnitude


def _display(quantity: pint.Quantity, suffix: str) -> str:
    value: Union[int, float] = format_number(quantity.magnitude)
    if isinstance(value, float):
        return f"{value:.2f} {suffix}"
    return f"{value} {suffix}"


def format_span(value: float, system: UnitSystem) -> str:
    """Span with its unit suffix, e.g. '24 ft' or '7.30 m'."""
    return _display(span_quantity(value, system), system.span_unit)


def format_load(value: float, system: UnitSystem) -> str:
    """Load or capacity with its unit suffix, e.g. '120 psf' or '5.75 kPa'."""
    return _display(load_quantity(value, system), system.load_unit)
