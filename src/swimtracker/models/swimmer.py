"""Swimmer model."""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Generate an opaque identifier for a new swimmer or time record."""
    return str(uuid4())


class Swimmer(BaseModel):
    """A swimmer in the club or an individual athlete."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    id: str = Field(default_factory=new_id)
    name: str
    location: str = ""  # Team or region

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Swimmer name must not be empty")
        return v

    @field_validator("location", mode="before")
    @classmethod
    def default_location(cls, v: str | None) -> str:
        return (v or "").strip()

    def __str__(self) -> str:
        return self.name
