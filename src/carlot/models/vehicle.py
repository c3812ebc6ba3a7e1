"""Vehicle data model."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# First production automobile
MIN_MODEL_YEAR = 1886

CENTS = Decimal("0.01")

# Prices must stay well inside Decimal's 28-digit context once fees are added
MAX_PRICE = Decimal("1000000000000")

# Characters the pipe-delimited files cannot hold inside a value
RESERVED_CHARS = ("|", "\n", "\r")


def quantize_money(value: Decimal) -> Decimal:
    """Round a currency amount to cents, half-up."""
    return value.quantize(CENTS, rounding=ROUND_HALF_UP)


def max_model_year() -> int:
    """Latest model year accepted: next calendar year."""
    return date.today().year + 1


def ensure_storable(value: str) -> str:
    """Reject text that would break a line of the inventory or contract file."""
    if any(ch in value for ch in RESERVED_CHARS):
        raise ValueError("Must not contain '|' or line breaks")
    return value


class Vehicle(BaseModel):
    """A single vehicle in dealership inventory.

    Identity and descriptive fields are frozen once constructed. Odometer
    and price may be updated; assignments go through the same validation
    as construction.
    """

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    vin: int = Field(..., gt=0, frozen=True, description="Vehicle identification number")
    year: int = Field(..., frozen=True, description="Model year")
    make: str = Field(..., min_length=1, frozen=True)
    model: str = Field(..., min_length=1, frozen=True)
    vehicle_type: str = Field(
        ...,
        min_length=1,
        frozen=True,
        description="Body type, e.g. 'Sedan', 'SUV', 'Truck'",
    )
    color: str = Field(..., min_length=1, frozen=True)
    odometer: int = Field(..., ge=0, description="Odometer reading in miles")
    price: Decimal = Field(..., ge=0, lt=MAX_PRICE, description="Asking price in dollars")

    @field_validator("year")
    @classmethod
    def validate_year(cls, v: int) -> int:
        """Year must fall between the first car and next year's models."""
        latest = max_model_year()
        if v < MIN_MODEL_YEAR or v > latest:
            raise ValueError(f"Year must be between {MIN_MODEL_YEAR} and {latest}")
        return v

    @field_validator("make", "model", "vehicle_type", "color")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return ensure_storable(v)

    @field_validator("price", mode="before")
    @classmethod
    def coerce_float_price(cls, v: object) -> object:
        """Convert floats through their repr so 19.995 stays 19.995."""
        if isinstance(v, float):
            return Decimal(repr(v))
        return v

    @field_validator("price")
    @classmethod
    def round_price(cls, v: Decimal) -> Decimal:
        """Store price with exactly two decimal places."""
        return quantize_money(v)

    @property
    def description(self) -> str:
        """Short display name, e.g. '2021 Honda Civic'."""
        return f"{self.year} {self.make} {self.model}"

    @property
    def price_display(self) -> str:
        """Format price for display."""
        return f"${self.price:,.2f}"
