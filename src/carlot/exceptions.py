"""Custom exceptions for carlot."""

from typing import Optional


class CarlotError(Exception):
    """Base exception for all carlot errors."""

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


# ─────────────────────────────────────────────────────────────────────────────
# Config Errors
# ─────────────────────────────────────────────────────────────────────────────


class ConfigError(CarlotError):
    """Base class for configuration errors."""


class ConfigValidationError(ConfigError):
    """Configuration validation failed."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(
            f"Invalid configuration: {field}",
            reason,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Dealership Errors
# ─────────────────────────────────────────────────────────────────────────────


class DealershipError(CarlotError):
    """Base class for inventory and contract business-rule failures."""


class VehicleNotFoundError(DealershipError):
    """No vehicle with the given VIN is in inventory."""

    def __init__(self, vin: int) -> None:
        self.vin = vin
        super().__init__(
            f"Vehicle not found: VIN {vin}",
            "Check the VIN against the inventory list and try again.",
        )


class DuplicateVinError(DealershipError):
    """A vehicle with the given VIN is already in inventory."""

    def __init__(self, vin: int) -> None:
        self.vin = vin
        super().__init__(
            f"VIN {vin} is already in inventory",
            "Each vehicle must have a unique VIN.",
        )


class LeaseNotAllowedError(DealershipError):
    """Vehicle is too old to be leased."""

    def __init__(self, year: int, cutoff_year: int) -> None:
        self.year = year
        self.cutoff_year = cutoff_year
        super().__init__(
            "Vehicle cannot be leased",
            f"Only vehicles from {cutoff_year} or newer can be leased "
            f"(this one is a {year}).",
        )


# ─────────────────────────────────────────────────────────────────────────────
# File Errors
# ─────────────────────────────────────────────────────────────────────────────


class InventoryLineError(CarlotError):
    """An inventory line could not be parsed into a vehicle."""

    def __init__(self, reason: str, line: str = "") -> None:
        self.reason = reason
        self.line = line
        super().__init__(
            "Invalid inventory line",
            reason,
        )
