"""Inventory listing and search commands."""

import logging
from typing import Optional

import typer
from pydantic import ValidationError

from carlot.cli.commands import open_service
from carlot.cli.ui import console, create_vehicle_table, error_panel, validation_messages
from carlot.models import VehicleSearchCriteria

logger = logging.getLogger(__name__)


def run_list(inventory=None, contracts=None) -> None:
    """Show every vehicle in inventory."""
    service = open_service(inventory, contracts)
    dealership = service.dealership
    vehicles = service.list_all()

    console.print()
    console.print(f"[bold blue]{dealership.name}[/bold blue]")
    console.print(f"[dim]{dealership.address} · {dealership.phone}[/dim]")
    _print_vehicles(vehicles, "Inventory")


def run_search(
    criteria_fields: dict,
    inventory=None,
    contracts=None,
) -> None:
    """Show vehicles matching the given criteria."""
    try:
        criteria = VehicleSearchCriteria(**criteria_fields)
    except ValidationError as e:
        console.print(error_panel("Invalid search.", "\n".join(validation_messages(e))))
        raise typer.Exit(1)

    service = open_service(inventory, contracts)
    logger.info("Search: %s", criteria.model_dump(exclude_none=True))
    _print_vehicles(service.query(criteria), "Matching Vehicles")


def _print_vehicles(vehicles, title: Optional[str]) -> None:
    console.print()
    if not vehicles:
        console.print("[dim]  No vehicles found.[/dim]")
        return
    console.print(create_vehicle_table(vehicles, title=title))
    console.print(f"[dim]  {len(vehicles)} vehicle(s).[/dim]")
