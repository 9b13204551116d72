"""
Output models for slab selection.

SelectionResult is a tagged union discriminated on ``kind``; exactly one
variant is produced per selection call.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field

from hollowcore.models.inputs import Requirement, UnitSystem
from hollowcore.models.records import ConfigurationRecord, RankedConfiguration


MAX_ALTERNATIVES = 3


class ExactMatch(BaseModel):
    """A configuration meeting both span and load at the requested thickness."""
    kind: Literal["exact"] = "exact"
    best: ConfigurationRecord = Field(..., description="Fewest strands, then shortest span")


class InfeasibleRequest(BaseModel):
    """The requested load exceeds every capacity in the catalog."""
    kind: Literal["infeasible"] = "infeasible"
    requested_load: float = Field(..., description="Load that was asked for")
    max_available_capacity: float = Field(
        ...,
        description="Highest capacity across the whole catalog (0 for an empty catalog)",
    )


class AlternativeOptions(BaseModel):
    """Closest same-thickness configurations when no exact match exists."""
    kind: Literal["alternatives"] = "alternatives"
    ranked: list[RankedConfiguration] = Field(
        default_factory=list,
        max_length=MAX_ALTERNATIVES,
        description="Ascending distance to the requested point",
    )


SelectionResult = Annotated[
    Union[ExactMatch, InfeasibleRequest, AlternativeOptions],
    Field(discriminator="kind"),
]


class ChartPoint(BaseModel):
    """A (span, capacity) point on a capacity curve."""
    span: float
    capacity: float
    strands: int


class ChartSeries(BaseModel):
    """
    Capacity trend for one thickness.

    Points are the same-thickness catalog records sorted by span, the same
    set the selector ranks alternatives from.
    """
    system: UnitSystem
    thickness: str
    points: list[ChartPoint] = Field(default_factory=list)
    target_span: Optional[float] = Field(default=None, description="Requested span, if any")
    target_load: Optional[float] = Field(default=None, description="Requested load, if any")

    @property
    def is_empty(self) -> bool:
        """True when the catalog has no records at this thickness."""
        return not self.points

    @property
    def has_target(self) -> bool:
        """Whether a target point should be highlighted."""
        return bool(self.target_span) and bool(self.target_load)


class CalculationReport(BaseModel):
    """Complete output of one calculator run."""
    requirement: Requirement
    result: SelectionResult
    chart: ChartSeries
    catalog_size: int = Field(..., ge=0, description="Number of records the selection ran over")
