"""Add and remove vehicle commands."""

import logging

import typer
from pydantic import ValidationError

from carlot.cli.commands import open_service, report_save
from carlot.cli.ui import (
    console,
    error_panel,
    success_panel,
    validation_messages,
)
from carlot.exceptions import DealershipError

logger = logging.getLogger(__name__)


def run_add(vehicle_fields: dict, inventory=None, contracts=None) -> None:
    """Add a vehicle to inventory."""
    service = open_service(inventory, contracts)

    try:
        vehicle = service.add(**vehicle_fields)
    except ValidationError as e:
        console.print(error_panel("Invalid vehicle.", "\n".join(validation_messages(e))))
        raise typer.Exit(1)
    except DealershipError as e:
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)

    console.print()
    console.print(success_panel(f"Vehicle {vehicle.vin} ({vehicle.description}) added."))
    report_save(service)


def run_remove(vin: int, inventory=None, contracts=None) -> None:
    """Remove a vehicle from inventory by VIN."""
    service = open_service(inventory, contracts)

    if not service.remove(vin):
        console.print()
        console.print(error_panel(
            f"Vehicle {vin} not found.",
            "Run 'carlot list' to see the VINs in inventory.",
        ))
        raise typer.Exit(1)

    console.print()
    console.print(success_panel(f"Vehicle {vin} removed."))
    report_save(service)
