"""Tests for sale and lease contracts."""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from carlot.models.contract import (
    ContractKind,
    LeaseContract,
    SaleContract,
    amortized_payment,
    build_contract,
    lease_cutoff_year,
)


def expected_payment(principal: float, annual_rate: float, months: int) -> float:
    r = annual_rate / 12
    return principal * r / (1 - (1 + r) ** -months)


@pytest.fixture
def customer():
    return {"customer_name": "Dana Smith", "customer_email": "dana@example.com"}


class TestAmortizedPayment:
    def test_formula(self):
        result = amortized_payment(Decimal("10000"), Decimal("0.06"), 60)
        assert float(result) == pytest.approx(expected_payment(10000, 0.06, 60))

    def test_zero_rate(self):
        assert amortized_payment(Decimal("1200"), Decimal("0"), 12) == Decimal("100")

    def test_bad_term(self):
        with pytest.raises(ValueError):
            amortized_payment(Decimal("1000"), Decimal("0.05"), 0)


class TestSaleContract:
    def test_financed_high_price(self, vehicle_factory, customer):
        contract = SaleContract(vehicle=vehicle_factory(price="12000.00"), financed=True, **customer)
        assert contract.sales_tax_amount == Decimal("600")
        assert contract.recording_fee == Decimal("100")
        assert contract.processing_fee == Decimal("495")
        assert contract.total_price == Decimal("13195.00")
        assert float(contract.monthly_payment) == pytest.approx(
            expected_payment(13195.00, 0.0425, 48)
        )

    def test_financed_low_price(self, vehicle_factory, customer):
        contract = SaleContract(vehicle=vehicle_factory(price="8000.00"), financed=True, **customer)
        assert contract.processing_fee == Decimal("295")
        assert contract.total_price == Decimal("8795.00")
        assert contract.loan_terms == (Decimal("0.0525"), 24)
        assert float(contract.monthly_payment) == pytest.approx(
            expected_payment(8795.00, 0.0525, 24)
        )

    def test_threshold_uses_high_fee(self, vehicle_factory, customer):
        contract = SaleContract(vehicle=vehicle_factory(price="10000.00"), **customer)
        assert contract.processing_fee == Decimal("495")
        assert contract.loan_terms == (Decimal("0.0425"), 48)

    def test_cash_sale_no_payment(self, vehicle_factory, customer):
        contract = SaleContract(vehicle=vehicle_factory(price="12000.00"), **customer)
        assert contract.financed is False
        assert contract.monthly_payment == 0

    def test_defaults(self, vehicle, customer):
        contract = SaleContract(vehicle=vehicle, **customer)
        assert contract.kind == ContractKind.SALE
        assert contract.date == date.today()

    def test_blank_customer_name(self, vehicle):
        with pytest.raises(ValidationError):
            SaleContract(vehicle=vehicle, customer_name=" ", customer_email="dana@example.com")

    def test_invalid_email(self, vehicle):
        with pytest.raises(ValidationError):
            SaleContract(vehicle=vehicle, customer_name="Dana", customer_email="not-an-email")

    def test_customer_name_with_delimiter(self, vehicle):
        with pytest.raises(ValidationError):
            SaleContract(
                vehicle=vehicle, customer_name="Dana|Smith", customer_email="dana@example.com"
            )

    def test_vehicle_required(self, customer):
        with pytest.raises(ValidationError):
            SaleContract(vehicle=None, **customer)


class TestLeaseContract:
    def test_lease_figures(self, vehicle_factory, customer):
        contract = LeaseContract(vehicle=vehicle_factory(price="20000.00"), **customer)
        assert contract.expected_ending_value == Decimal("10000")
        assert contract.lease_fee == Decimal("1400")
        assert contract.total_price == Decimal("11400.00")
        assert float(contract.monthly_payment) == pytest.approx(
            expected_payment(11400.00, 0.04, 36)
        )

    def test_kind(self, vehicle, customer):
        assert LeaseContract(vehicle=vehicle, **customer).kind == ContractKind.LEASE

    def test_no_age_check_on_model(self, vehicle_factory, customer):
        contract = LeaseContract(vehicle=vehicle_factory(year=1990), **customer)
        assert contract.vehicle.year == 1990

    def test_cutoff_year(self):
        assert lease_cutoff_year(date(2025, 6, 1)) == 2022


class TestBuildContract:
    def test_sale_by_name(self, vehicle, customer):
        contract = build_contract("sale", vehicle=vehicle, financed=True, **customer)
        assert isinstance(contract, SaleContract)
        assert contract.financed is True

    def test_lease_by_enum(self, vehicle, customer):
        contract = build_contract(ContractKind.LEASE, vehicle=vehicle, **customer)
        assert isinstance(contract, LeaseContract)

    def test_unknown_kind(self, vehicle, customer):
        with pytest.raises(ValidationError):
            build_contract("RENTAL", vehicle=vehicle, **customer)
