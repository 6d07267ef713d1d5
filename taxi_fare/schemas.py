"""Validated trip request handed from the console to the fare calculator."""

from pydantic import BaseModel, Field, field_validator


class TripRequest(BaseModel):
    distance_km: float = Field(
        ..., gt=0,
        description="Trip distance in kilometers",
        examples=[12.5],
    )
    duration_min: float = Field(
        ..., gt=0,
        description="Estimated trip time in minutes",
        examples=[20],
    )
    category: str = Field(
        ...,
        description="Car type as typed; unknown values price as standard",
        examples=["comfort"],
    )
    band: str = Field(
        ...,
        description="Time of day as typed; unknown values price as day",
        examples=["night"],
    )

    @field_validator("category", "band")
    @classmethod
    def lower_case(cls, value: str) -> str:
        return value.strip().lower()
