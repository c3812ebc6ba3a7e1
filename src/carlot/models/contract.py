"""Sale and lease contract models."""

import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, ClassVar, Literal, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field, TypeAdapter, field_validator

from carlot.models.vehicle import Vehicle, ensure_storable


class ContractKind(str, Enum):
    """Contract variants."""

    SALE = "SALE"
    LEASE = "LEASE"


def amortized_payment(principal: Decimal, annual_rate: Decimal, months: int) -> Decimal:
    """Fixed monthly payment that repays ``principal`` over ``months``.

    Uses payment = P * r / (1 - (1 + r) ** -n) with r = annual_rate / 12.
    """
    if months <= 0:
        raise ValueError("Term must be at least one month")
    monthly_rate = annual_rate / 12
    if monthly_rate == 0:
        return principal / months
    return principal * monthly_rate / (1 - (1 + monthly_rate) ** -months)


class ContractBase(BaseModel):
    """Fields shared by every contract."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    date: datetime.date = Field(default_factory=datetime.date.today)
    customer_name: str = Field(..., min_length=1)
    customer_email: EmailStr
    vehicle: Vehicle

    @field_validator("customer_name", "customer_email")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return ensure_storable(v)

    @property
    def price(self) -> Decimal:
        """Price of the vehicle under contract."""
        return self.vehicle.price


class SaleContract(ContractBase):
    """Outright sale, optionally financed by the dealership."""

    SALES_TAX_RATE: ClassVar[Decimal] = Decimal("0.05")
    RECORDING_FEE: ClassVar[Decimal] = Decimal("100.00")
    PROCESSING_FEE_LOW: ClassVar[Decimal] = Decimal("295.00")
    PROCESSING_FEE_HIGH: ClassVar[Decimal] = Decimal("495.00")
    # Price at or above which the higher processing fee and long loan apply
    HIGH_PRICE_THRESHOLD: ClassVar[Decimal] = Decimal("10000.00")

    LONG_LOAN_RATE: ClassVar[Decimal] = Decimal("0.0425")
    LONG_LOAN_MONTHS: ClassVar[int] = 48
    SHORT_LOAN_RATE: ClassVar[Decimal] = Decimal("0.0525")
    SHORT_LOAN_MONTHS: ClassVar[int] = 24

    kind: Literal["SALE"] = "SALE"
    financed: bool = False

    @property
    def is_high_price(self) -> bool:
        return self.price >= self.HIGH_PRICE_THRESHOLD

    @property
    def sales_tax_amount(self) -> Decimal:
        return self.price * self.SALES_TAX_RATE

    @property
    def recording_fee(self) -> Decimal:
        return self.RECORDING_FEE

    @property
    def processing_fee(self) -> Decimal:
        return self.PROCESSING_FEE_HIGH if self.is_high_price else self.PROCESSING_FEE_LOW

    @property
    def total_price(self) -> Decimal:
        """Price plus tax, recording fee and processing fee."""
        return self.price + self.sales_tax_amount + self.recording_fee + self.processing_fee

    @property
    def loan_terms(self) -> tuple[Decimal, int]:
        """(annual rate, months) used when the sale is financed."""
        if self.is_high_price:
            return self.LONG_LOAN_RATE, self.LONG_LOAN_MONTHS
        return self.SHORT_LOAN_RATE, self.SHORT_LOAN_MONTHS

    @property
    def monthly_payment(self) -> Decimal:
        """Loan payment on the total price, or zero for a cash sale."""
        if not self.financed:
            return Decimal("0")
        rate, months = self.loan_terms
        return amortized_payment(self.total_price, rate, months)


class LeaseContract(ContractBase):
    """Lease priced on the residual value plus a lease fee."""

    LEASE_FEE_RATE: ClassVar[Decimal] = Decimal("0.07")
    RESIDUAL_RATE: ClassVar[Decimal] = Decimal("0.50")
    INTEREST_RATE: ClassVar[Decimal] = Decimal("0.04")
    TERM_MONTHS: ClassVar[int] = 36

    # Vehicles older than this many model years cannot be leased
    MAX_AGE_YEARS: ClassVar[int] = 3

    kind: Literal["LEASE"] = "LEASE"

    @property
    def expected_ending_value(self) -> Decimal:
        return self.price * self.RESIDUAL_RATE

    @property
    def lease_fee(self) -> Decimal:
        return self.price * self.LEASE_FEE_RATE

    @property
    def total_price(self) -> Decimal:
        return self.expected_ending_value + self.lease_fee

    @property
    def monthly_payment(self) -> Decimal:
        return amortized_payment(self.total_price, self.INTEREST_RATE, self.TERM_MONTHS)


Contract = Annotated[Union[SaleContract, LeaseContract], Field(discriminator="kind")]

_contract_adapter = TypeAdapter(Contract)


def build_contract(kind: ContractKind | str, **fields: object) -> Contract:
    """Create the contract variant named by ``kind``.

    Raises:
        pydantic.ValidationError: If the kind is unknown or a field is invalid
    """
    if isinstance(kind, ContractKind):
        kind = kind.value
    elif isinstance(kind, str):
        kind = kind.strip().upper()
    return _contract_adapter.validate_python({"kind": kind, **fields})


def lease_cutoff_year(today: datetime.date | None = None) -> int:
    """Oldest model year that may still be leased."""
    today = today or datetime.date.today()
    return today.year - LeaseContract.MAX_AGE_YEARS
