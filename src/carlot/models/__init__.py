"""Data models for carlot."""

from carlot.models.config import Settings
from carlot.models.contract import (
    Contract,
    ContractKind,
    LeaseContract,
    SaleContract,
    amortized_payment,
    build_contract,
)
from carlot.models.criteria import VehicleSearchCriteria
from carlot.models.dealership import Dealership
from carlot.models.results import LoadResult, SkippedLine
from carlot.models.vehicle import Vehicle

__all__ = [
    # Config
    "Settings",
    # Inventory
    "Vehicle",
    "Dealership",
    "VehicleSearchCriteria",
    # Contracts
    "Contract",
    "ContractKind",
    "SaleContract",
    "LeaseContract",
    "amortized_payment",
    "build_contract",
    # Results
    "LoadResult",
    "SkippedLine",
]
