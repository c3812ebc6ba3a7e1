"""Multi-field vehicle search criteria."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from carlot.models.vehicle import Vehicle


class VehicleSearchCriteria(BaseModel):
    """Combined search filter. Unset fields place no constraint.

    Text fields match case-insensitively and exactly. Range bounds are
    inclusive; an inverted range is rejected when the criteria is built.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    make: Optional[str] = None
    model: Optional[str] = None
    color: Optional[str] = None
    vehicle_type: Optional[str] = None
    min_year: Optional[int] = None
    max_year: Optional[int] = None
    min_price: Optional[Decimal] = Field(default=None, ge=0)
    max_price: Optional[Decimal] = Field(default=None, ge=0)
    min_mileage: Optional[int] = Field(default=None, ge=0)
    max_mileage: Optional[int] = Field(default=None, ge=0)

    @field_validator("make", "model", "color", "vehicle_type", mode="before")
    @classmethod
    def blank_to_none(cls, v: object) -> object:
        """Treat blank text as 'not specified'."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def validate_ranges(self) -> "VehicleSearchCriteria":
        """Ensure min does not exceed max for every bounded range."""
        ranges = (
            ("year", self.min_year, self.max_year),
            ("price", self.min_price, self.max_price),
            ("mileage", self.min_mileage, self.max_mileage),
        )
        for label, low, high in ranges:
            if low is not None and high is not None and low > high:
                raise ValueError(
                    f"Minimum {label} cannot be greater than maximum {label}"
                )
        return self

    @property
    def is_empty(self) -> bool:
        """True when no constraint is set."""
        return not self.model_dump(exclude_none=True)

    def matches(self, vehicle: Vehicle) -> bool:
        """Check a single vehicle against every set constraint."""
        text_checks = (
            (self.make, vehicle.make),
            (self.model, vehicle.model),
            (self.color, vehicle.color),
            (self.vehicle_type, vehicle.vehicle_type),
        )
        for wanted, actual in text_checks:
            if wanted is not None and wanted.lower() != actual.lower():
                return False

        bound_checks = (
            (self.min_year, self.max_year, vehicle.year),
            (self.min_price, self.max_price, vehicle.price),
            (self.min_mileage, self.max_mileage, vehicle.odometer),
        )
        for low, high, actual in bound_checks:
            if low is not None and actual < low:
                return False
            if high is not None and actual > high:
                return False

        return True
