"""Interactive menu for carlot."""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Callable, Optional

from pydantic import ValidationError
from rich.prompt import Confirm, Prompt

from carlot import __version__
from carlot.cli.commands import open_service, report_save
from carlot.cli.commands.contracts import show_contract
from carlot.cli.ui import (
    console,
    create_vehicle_table,
    error_panel,
    success_panel,
    validation_messages,
    warning_panel,
)
from carlot.core.service import DealershipService
from carlot.exceptions import CarlotError
from carlot.models import ContractKind, Vehicle, VehicleSearchCriteria

logger = logging.getLogger(__name__)


class InvalidInput(Exception):
    """User typed something that is not the expected kind of value."""


class CarlotREPL:
    """Menu-driven session over one loaded inventory."""

    def __init__(self, service: DealershipService) -> None:
        self.service = service

    def run(self) -> None:
        """Main entry point."""
        self._show_banner()

        try:
            self._loop()
        except (KeyboardInterrupt, EOFError):
            console.print()
            console.print("[dim]Goodbye![/dim]")

    # --- Main loop ---

    def _loop(self) -> None:
        """Main menu loop."""
        while True:
            actions = self._build_actions()
            self._show_menu(actions)

            choice = Prompt.ask("  [bold]>[/bold]").strip().lower()

            if choice == "q":
                console.print()
                console.print("[dim]Goodbye![/dim]")
                break

            action = actions.get(choice)
            if not action:
                console.print("  [red]Invalid choice.[/red]")
                continue

            try:
                action["handler"]()
            except InvalidInput as e:
                console.print(f"  [red]{e}[/red]")
            except ValidationError as e:
                console.print(error_panel("Invalid input.", "\n".join(validation_messages(e))))
            except CarlotError as e:
                console.print(error_panel(e.message, e.details))

    def _show_banner(self) -> None:
        """Show app banner and dealership."""
        dealership = self.service.dealership
        console.print()
        console.print(f"[bold blue]carlot[/bold blue] [dim]v{__version__}[/dim]")
        console.print(
            f"  [bold]{dealership.name}[/bold] [dim]· {dealership.address} · "
            f"{dealership.phone}[/dim]"
        )
        console.print(f"  [dim]{len(dealership)} vehicle(s) in stock.[/dim]")

    # --- Menu ---

    def _build_actions(self) -> dict:
        """Build menu actions."""
        has_vehicles = len(self.service.dealership) > 0
        actions = {
            "p": {"label": "Search by price", "handler": self._action_by_price},
            "m": {"label": "Search by make & model", "handler": self._action_by_make_model},
            "y": {"label": "Search by year", "handler": self._action_by_year},
            "c": {"label": "Search by color", "handler": self._action_by_color},
            "o": {"label": "Search by mileage", "handler": self._action_by_mileage},
            "t": {"label": "Search by vehicle type", "handler": self._action_by_type},
            "l": {"label": "Show all vehicles", "handler": self._action_list},
            "a": {"label": "Add a vehicle", "handler": self._action_add},
        }

        if has_vehicles:
            actions["x"] = {"label": "Remove a vehicle", "handler": self._action_remove}
            actions["s"] = {"label": "Sell or lease a vehicle", "handler": self._action_contract}

        actions["q"] = {"label": "Quit", "handler": lambda: None}
        return actions

    def _show_menu(self, actions: dict) -> None:
        """Display the menu."""
        console.print()
        for key, action in actions.items():
            console.print(f"  [bold cyan]\\[{key}][/bold cyan] {action['label']}")
        console.print()

    # --- Input helpers ---

    @staticmethod
    def _ask_int(label: str) -> int:
        raw = Prompt.ask(f"  {label}").strip()
        try:
            return int(raw)
        except ValueError:
            raise InvalidInput(f"{label}: '{raw}' is not a whole number.")

    @staticmethod
    def _ask_decimal(label: str) -> Decimal:
        raw = Prompt.ask(f"  {label}").strip().lstrip("$").replace(",", "")
        try:
            return Decimal(raw)
        except InvalidOperation:
            raise InvalidInput(f"{label}: '{raw}' is not a number.")

    @staticmethod
    def _ask_text(label: str) -> str:
        return Prompt.ask(f"  {label}", default="", show_default=False)

    # --- Display ---

    def _show_vehicles(self, vehicles: list[Vehicle]) -> None:
        console.print()
        if not vehicles:
            console.print("  [dim]No vehicles found.[/dim]")
            return
        console.print(create_vehicle_table(vehicles))

    # --- Search actions ---

    def _search(self, query: Callable[[], list[Vehicle]]) -> None:
        self._show_vehicles(query())

    def _action_list(self) -> None:
        self._show_vehicles(self.service.list_all())

    def _action_by_price(self) -> None:
        low = self._ask_decimal("Minimum price")
        high = self._ask_decimal("Maximum price")
        self._search(lambda: self.service.dealership.by_price(low, high))

    def _action_by_make_model(self) -> None:
        make = self._ask_text("Make")
        model = self._ask_text("Model")
        self._search(lambda: self.service.dealership.by_make_model(make, model))

    def _action_by_year(self) -> None:
        low = self._ask_int("Minimum year")
        high = self._ask_int("Maximum year")
        self._search(lambda: self.service.dealership.by_year(low, high))

    def _action_by_color(self) -> None:
        color = self._ask_text("Color")
        self._search(lambda: self.service.dealership.by_color(color))

    def _action_by_mileage(self) -> None:
        low = self._ask_int("Minimum mileage")
        high = self._ask_int("Maximum mileage")
        self._search(lambda: self.service.dealership.by_mileage(low, high))

    def _action_by_type(self) -> None:
        vehicle_type = self._ask_text("Vehicle type (car/truck/SUV/van)")
        self._search(lambda: self.service.dealership.by_type(vehicle_type))

    # --- Inventory actions ---

    def _action_add(self) -> None:
        """Add a vehicle."""
        console.print()
        console.print("  [bold cyan]Add Vehicle[/bold cyan]")
        console.print()

        fields = {
            "vin": self._ask_int("VIN"),
            "year": self._ask_int("Year"),
            "make": self._ask_text("Make"),
            "model": self._ask_text("Model"),
            "vehicle_type": self._ask_text("Type"),
            "color": self._ask_text("Color"),
            "odometer": self._ask_int("Odometer"),
            "price": self._ask_decimal("Price"),
        }
        vehicle = self.service.add(**fields)

        console.print()
        console.print(success_panel(f"Vehicle {vehicle.vin} ({vehicle.description}) added."))
        report_save(self.service)

    def _action_remove(self) -> None:
        """Remove a vehicle by VIN."""
        vin = self._ask_int("VIN of vehicle to remove")
        vehicle = self.service.dealership.find_by_vin(vin)
        if vehicle is None:
            console.print("  [yellow]Vehicle not found.[/yellow]")
            return

        if not Confirm.ask(
            f"  Remove [bold]{vehicle.vin}[/bold] ({vehicle.description})?",
            default=False,
        ):
            console.print("  [dim]Cancelled.[/dim]")
            return

        self.service.remove(vin)
        console.print()
        console.print(success_panel(f"Vehicle {vin} removed."))
        report_save(self.service)

    def _action_contract(self) -> None:
        """Sell or lease a vehicle."""
        vin = self._ask_int("VIN of vehicle to sell/lease")
        vehicle = self.service.get(vin)
        console.print(f"  [dim]{vehicle.description}, {vehicle.price_display}[/dim]")

        name = self._ask_text("Customer name")
        email = self._ask_text("Customer email")
        kind = Prompt.ask(
            "  Sale or lease",
            choices=["sale", "lease"],
            default="sale",
        )

        financed = False
        if kind == "sale":
            financed = Confirm.ask("  Is the customer financing?", default=False)

        contract = self.service.sell_or_lease(
            vin,
            customer_name=name,
            customer_email=email,
            kind=ContractKind(kind.upper()),
            financed=financed,
        )
        logger.info("REPL %s: vin=%d", contract.kind, vin)

        show_contract(contract)
        if not self.service.last_append_ok:
            console.print(warning_panel(f"Could not write {self.service.ledger.path}."))
        report_save(self.service)


def run_repl(inventory: Optional[Path] = None, contracts: Optional[Path] = None) -> None:
    """Entry point for the interactive menu."""
    service = open_service(inventory, contracts)
    repl = CarlotREPL(service)
    repl.run()
