"""Dealership aggregate and inventory queries."""

from decimal import Decimal
from typing import Annotated, Callable, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    StringConstraints,
    field_validator,
    validate_call,
)

from carlot.models.criteria import VehicleSearchCriteria
from carlot.models.vehicle import Vehicle, ensure_storable

SearchText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

DEFAULT_NAME = "Default Dealership"
DEFAULT_ADDRESS = "Unknown Address"
DEFAULT_PHONE = "N/A"


class Dealership(BaseModel):
    """A dealership and the vehicles it currently has in stock.

    The inventory list is owned by the dealership. Callers read it through
    ``vehicles`` (an immutable snapshot) and change it only through
    ``add_vehicle`` / ``remove_vehicle``. Every query returns a new list.
    """

    model_config = ConfigDict(validate_assignment=True, str_strip_whitespace=True)

    name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)

    _inventory: list[Vehicle] = PrivateAttr(default_factory=list)

    @field_validator("name", "address", "phone")
    @classmethod
    def validate_text(cls, v: str) -> str:
        return ensure_storable(v)

    @classmethod
    def default(cls) -> "Dealership":
        """Placeholder dealership used when no usable header exists."""
        return cls(name=DEFAULT_NAME, address=DEFAULT_ADDRESS, phone=DEFAULT_PHONE)

    def __len__(self) -> int:
        return len(self._inventory)

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        """Read-only view of the inventory, in insertion order."""
        return tuple(self._inventory)

    # --- Inventory management ---

    @validate_call
    def add_vehicle(self, vehicle: Vehicle) -> None:
        """Append a vehicle to inventory."""
        self._inventory.append(vehicle)

    @validate_call
    def remove_vehicle(self, vehicle: Vehicle) -> bool:
        """Remove the first vehicle equal to ``vehicle``.

        Returns:
            True if a matching vehicle was removed, False otherwise
        """
        try:
            self._inventory.remove(vehicle)
        except ValueError:
            return False
        return True

    def find_by_vin(self, vin: int) -> Optional[Vehicle]:
        """Return the first vehicle with this VIN, or None."""
        for vehicle in self._inventory:
            if vehicle.vin == vin:
                return vehicle
        return None

    # --- Queries ---

    @validate_call
    def search(self, predicate: Callable[[Vehicle], bool]) -> list[Vehicle]:
        """Return all vehicles for which ``predicate`` is true."""
        return [v for v in self._inventory if predicate(v)]

    @validate_call
    def search_criteria(self, criteria: VehicleSearchCriteria) -> list[Vehicle]:
        """Return all vehicles matching every constraint in ``criteria``."""
        return self.search(criteria.matches)

    @validate_call
    def by_price(self, min_price: Decimal, max_price: Decimal) -> list[Vehicle]:
        return self.search_criteria(
            VehicleSearchCriteria(min_price=min_price, max_price=max_price)
        )

    @validate_call
    def by_year(self, min_year: int, max_year: int) -> list[Vehicle]:
        return self.search_criteria(
            VehicleSearchCriteria(min_year=min_year, max_year=max_year)
        )

    @validate_call
    def by_mileage(self, min_mileage: int, max_mileage: int) -> list[Vehicle]:
        return self.search_criteria(
            VehicleSearchCriteria(min_mileage=min_mileage, max_mileage=max_mileage)
        )

    @validate_call
    def by_make_model(self, make: SearchText, model: SearchText) -> list[Vehicle]:
        return self.search_criteria(VehicleSearchCriteria(make=make, model=model))

    @validate_call
    def by_color(self, color: SearchText) -> list[Vehicle]:
        return self.search_criteria(VehicleSearchCriteria(color=color))

    @validate_call
    def by_type(self, vehicle_type: SearchText) -> list[Vehicle]:
        return self.search_criteria(VehicleSearchCriteria(vehicle_type=vehicle_type))
