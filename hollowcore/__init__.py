"""
Hollow-Core Slab Selector (hollowcore)

Picks a precast hollow-core slab configuration (strand count, thickness)
that satisfies a required span and superimposed load from a catalog of
precomputed configurations, and exposes the capacity trend for a thickness.

Capacities are precomputed catalog values; this package performs no
structural computation.

Usage:
    python -m hollowcore calculate --thickness "8''" --span 24+4 --load 120
    python -m hollowcore evaluate "100*1.2"
    python -m hollowcore serve --port 8000
"""

__version__ = "0.1.0"
__author__ = "Hollow-Core Slab Selector"

from hollowcore.models.inputs import UnitSystem, Requirement, CalculationRequest
from hollowcore.models.records import ConfigurationRecord, RankedConfiguration
from hollowcore.models.outputs import (
    ExactMatch,
    InfeasibleRequest,
    AlternativeOptions,
    SelectionResult,
    CalculationReport,
)
from hollowcore.expressions import evaluate_expression
from hollowcore.catalog.normalize import normalize
from hollowcore.catalog.selector import select_configuration
from hollowcore.calculator import SlabCalculator, InvalidInputError

__all__ = [
    "UnitSystem",
    "Requirement",
    "CalculationRequest",
    "ConfigurationRecord",
    "RankedConfiguration",
    "ExactMatch",
    "InfeasibleRequest",
    "AlternativeOptions",
    "SelectionResult",
    "CalculationReport",
    "evaluate_expression",
    "normalize",
    "select_configuration",
    "SlabCalculator",
    "InvalidInputError",
]
