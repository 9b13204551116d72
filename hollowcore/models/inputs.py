"""
Input models for slab selection requests.

A calculation starts from raw user strings (CalculationRequest), which are
evaluated into a numeric Requirement before they reach the selection engine.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator


# Thickness labels offered per unit system, in catalog order
IMPERIAL_THICKNESSES = ["8''", "10''", "12''", "14''"]
METRIC_THICKNESSES = ["200 mm", "250 mm", "300 mm", "350 mm"]


class UnitSystem(str, Enum):
    """Unit system of a catalog. Each system has its own catalog in native units."""
    IMPERIAL = "Imperial"
    METRIC = "Metric"

    @classmethod
    def _missing_(cls, value):
        # Accept "imperial", " METRIC " etc. from CLI flags and query strings
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None

    @property
    def span_unit(self) -> str:
        """Display unit for spans."""
        return "ft" if self is UnitSystem.IMPERIAL else "m"

    @property
    def load_unit(self) -> str:
        """Display unit for loads and capacities."""
        return "psf" if self is UnitSystem.IMPERIAL else "kPa"

    @property
    def thickness_options(self) -> list[str]:
        """Thickness labels offered for this system."""
        if self is UnitSystem.IMPERIAL:
            return list(IMPERIAL_THICKNESSES)
        return list(METRIC_THICKNESSES)

    @property
    def catalog_file_name(self) -> str:
        """File name of the catalog for this system, e.g. 'imperial_data.json'."""
        return f"{self.value.lower()}_data.json"


class Requirement(BaseModel):
    """
    Numeric requirement for one selection call.

    Span and load must already be finite; raw strings go through the
    expression evaluator first (see CalculationRequest).
    """
    thickness: str = Field(..., description="Thickness label, e.g. \"8''\" or '200 mm'")
    span: float = Field(..., allow_inf_nan=False, description="Required span (ft or m)")
    load: float = Field(..., allow_inf_nan=False, description="Superimposed load (psf or kPa)")
    system: UnitSystem = Field(default=UnitSystem.IMPERIAL, description="Unit system")

    model_config = {"frozen": True}


class CalculationRequest(BaseModel):
    """
    Raw calculator input as typed by a user.

    Span and load are arithmetic expressions such as "24+4" or "100*1.2".
    """
    system: UnitSystem = Field(default=UnitSystem.IMPERIAL, description="Unit system")
    thickness: str = Field(default="", description="Thickness label")
    span: str = Field(default="", description="Span expression")
    load: str = Field(default="", description="Superimposed load expression")
    normalized_distance: bool = Field(
        default=False,
        description="Rank alternatives with axis-normalized distance instead of raw distance",
    )

    @field_validator("span", "load", mode="before")
    @classmethod
    def coerce_numbers(cls, v):
        """Allow plain JSON numbers in place of expression strings."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            # Plain decimal notation; the evaluator has no exponent syntax
            return format(Decimal(repr(v)), "f") if isinstance(v, float) else str(v)
        return v

    model_config = {
        "json_schema_extra": {
            "example": {
                "system": "Imperial",
                "thickness": "8''",
                "span": "24+4",
                "load": "100*1.2",
            }
        }
    }

