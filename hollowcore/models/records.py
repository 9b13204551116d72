"""
Pydantic models for catalog configuration records.

Catalog files use the keys Thickness / Span / Capacity / Strands; the models
accept those as well as the snake_case field names on input and always
serialize with the snake_case names.
"""

from pydantic import AliasChoices, BaseModel, Field


class ConfigurationRecord(BaseModel):
    """
    One precomputed slab design point from a catalog.

    Capacity is the maximum superimposed load the configuration carries at
    its span. Values are in the native units of the catalog's unit system.
    """
    thickness: str = Field(
        ...,
        validation_alias=AliasChoices("Thickness", "thickness"),
        description="Thickness label, e.g. \"8''\"",
    )
    span: float = Field(
        ...,
        validation_alias=AliasChoices("Span", "span"),
        description="Span in ft or m",
    )
    capacity: float = Field(
        ...,
        validation_alias=AliasChoices("Capacity", "capacity"),
        description="Superimposed load capacity in psf or kPa",
    )
    strands: int = Field(
        ...,
        validation_alias=AliasChoices("Strands", "strands"),
        ge=0,
        description="Number of prestressing strands",
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "thickness": "8''",
                "span": 24,
                "capacity": 130,
                "strands": 7,
            }
        },
    }


class RankedConfiguration(ConfigurationRecord):
    """A configuration offered as an alternative, with its distance to the request."""
    distance: float = Field(..., ge=0, description="Distance to the requested (span, load) point")

    @classmethod
    def from_record(cls, record: ConfigurationRecord, distance: float) -> "RankedConfiguration":
        """Attach a ranking distance to a catalog record."""
        return cls(
            thickness=record.thickness,
            span=record.span,
            capacity=record.capacity,
            strands=record.strands,
            distance=distance,
        )
