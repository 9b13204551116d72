"""
Pydantic models for slab selection inputs, catalog records and results.
"""

from hollowcore.models.inputs import (
    UnitSystem,
    Requirement,
    CalculationRequest,
    IMPERIAL_THICKNESSES,
    METRIC_THICKNESSES,
)
from hollowcore.models.records import ConfigurationRecord, RankedConfiguration
from hollowcore.models.outputs import (
    ExactMatch,
    InfeasibleRequest,
    AlternativeOptions,
    SelectionResult,
    ChartPoint,
    ChartSeries,
    CalculationReport,
    MAX_ALTERNATIVES,
)

__all__ = [
    "UnitSystem",
    "Requirement",
    "CalculationRequest",
    "IMPERIAL_THICKNESSES",
    "METRIC_THICKNESSES",
    "ConfigurationRecord",
    "RankedConfiguration",
    "ExactMatch",
    "InfeasibleRequest",
    "AlternativeOptions",
    "SelectionResult",
    "ChartPoint",
    "ChartSeries",
    "CalculationReport",
    "MAX_ALTERNATIVES",
]
