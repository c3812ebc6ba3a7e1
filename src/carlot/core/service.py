"""Inventory and contract operations used by the CLI."""

import logging
from decimal import Decimal
from typing import Optional

from carlot.core.contract_file import ContractLedger
from carlot.core.inventory_file import InventoryFile
from carlot.exceptions import (
    DuplicateVinError,
    LeaseNotAllowedError,
    VehicleNotFoundError,
)
from carlot.models import (
    Contract,
    ContractKind,
    Dealership,
    LoadResult,
    Settings,
    Vehicle,
    VehicleSearchCriteria,
    build_contract,
)
from carlot.models.contract import lease_cutoff_year

logger = logging.getLogger(__name__)


class DealershipService:
    """Owns the loaded dealership and keeps the data files in step with it.

    Every mutation saves the inventory file immediately. A failed save is
    logged and reported through ``last_save_ok`` (``last_append_ok`` for
    the contract file); the in-memory state is
    kept either way.
    """

    def __init__(
        self,
        dealership: Dealership,
        inventory: InventoryFile,
        ledger: ContractLedger,
        load_result: Optional[LoadResult] = None,
    ) -> None:
        self.dealership = dealership
        self.inventory = inventory
        self.ledger = ledger
        self.load_result = load_result
        self.last_save_ok = True
        self.last_append_ok = True

    @classmethod
    def open(cls, settings: Settings) -> "DealershipService":
        """Load the inventory named in ``settings``."""
        inventory = InventoryFile(settings.inventory_path)
        result = inventory.load()
        return cls(
            dealership=result.dealership,
            inventory=inventory,
            ledger=ContractLedger(settings.contracts_path),
            load_result=result,
        )

    def save(self) -> bool:
        """Write the inventory file."""
        self.last_save_ok = self.inventory.save(self.dealership)
        return self.last_save_ok

    # --- Queries ---

    def list_all(self) -> list[Vehicle]:
        return list(self.dealership.vehicles)

    def query(self, criteria: VehicleSearchCriteria) -> list[Vehicle]:
        return self.dealership.search_criteria(criteria)

    def get(self, vin: int) -> Vehicle:
        """Return the vehicle with this VIN.

        Raises:
            VehicleNotFoundError: If no vehicle has the VIN
        """
        vehicle = self.dealership.find_by_vin(vin)
        if vehicle is None:
            raise VehicleNotFoundError(vin)
        return vehicle

    # --- Mutations ---

    def add(
        self,
        vin: int,
        year: int,
        make: str,
        model: str,
        vehicle_type: str,
        color: str,
        odometer: int,
        price: Decimal | float | str,
    ) -> Vehicle:
        """Create a vehicle, add it to inventory and save.

        Raises:
            pydantic.ValidationError: If any field is invalid
            DuplicateVinError: If the VIN is already in inventory
        """
        vehicle = Vehicle(
            vin=vin,
            year=year,
            make=make,
            model=model,
            vehicle_type=vehicle_type,
            color=color,
            odometer=odometer,
            price=price,
        )
        if self.dealership.find_by_vin(vehicle.vin) is not None:
            raise DuplicateVinError(vehicle.vin)

        self.dealership.add_vehicle(vehicle)
        logger.info("Added VIN %d (%s)", vehicle.vin, vehicle.description)
        self.save()
        return vehicle

    def remove(self, vin: int) -> bool:
        """Remove the vehicle with this VIN and save.

        Returns:
            False if no vehicle has the VIN
        """
        vehicle = self.dealership.find_by_vin(vin)
        if vehicle is None:
            return False

        self.dealership.remove_vehicle(vehicle)
        logger.info("Removed VIN %d", vin)
        self.save()
        return True

    def sell_or_lease(
        self,
        vin: int,
        customer_name: str,
        customer_email: str,
        kind: ContractKind | str,
        financed: bool = False,
    ) -> Contract:
        """Write a sale or lease contract and take the vehicle out of stock.

        Raises:
            VehicleNotFoundError: If no vehicle has the VIN
            LeaseNotAllowedError: If a lease is requested for a vehicle older
                than the lease age limit
            pydantic.ValidationError: If the kind or customer details are invalid
        """
        vehicle = self.get(vin)

        fields: dict = {
            "customer_name": customer_name,
            "customer_email": customer_email,
            "vehicle": vehicle,
        }
        kind_value = kind.value if isinstance(kind, ContractKind) else str(kind).strip().upper()
        if kind_value == ContractKind.LEASE.value:
            cutoff = lease_cutoff_year()
            if vehicle.year < cutoff:
                raise LeaseNotAllowedError(vehicle.year, cutoff)
        else:
            fields["financed"] = financed

        contract = build_contract(kind_value, **fields)

        self.last_append_ok = self.ledger.append(contract)
        self.dealership.remove_vehicle(vehicle)
        logger.info("VIN %d left inventory under %s contract", vin, contract.kind)
        self.save()
        return contract
