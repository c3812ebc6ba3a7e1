"""Sell and lease commands."""

import logging

import typer
from pydantic import ValidationError
from rich.panel import Panel

from carlot.cli.commands import open_service, report_save
from carlot.cli.ui import (
    console,
    create_contract_table,
    error_panel,
    success_panel,
    validation_messages,
    warning_panel,
)
from carlot.exceptions import DealershipError
from carlot.models import ContractKind

logger = logging.getLogger(__name__)


def run_contract(
    kind: ContractKind,
    vin: int,
    customer_name: str,
    customer_email: str,
    financed: bool = False,
    inventory=None,
    contracts=None,
) -> None:
    """Record a sale or lease and remove the vehicle from inventory."""
    service = open_service(inventory, contracts)

    try:
        contract = service.sell_or_lease(
            vin,
            customer_name=customer_name,
            customer_email=customer_email,
            kind=kind,
            financed=financed,
        )
    except ValidationError as e:
        console.print(error_panel("Invalid contract.", "\n".join(validation_messages(e))))
        raise typer.Exit(1)
    except DealershipError as e:
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)

    show_contract(contract)
    if not service.last_append_ok:
        console.print(warning_panel(f"Could not write {service.ledger.path}."))
    report_save(service)


def show_contract(contract) -> None:
    """Print a contract summary."""
    label = "Sale" if contract.kind == ContractKind.SALE.value else "Lease"
    console.print()
    console.print(Panel(
        create_contract_table(contract),
        title=f"{label}: {contract.vehicle.description} to {contract.customer_name}",
        border_style="blue",
        padding=(1, 2),
    ))
    console.print(success_panel(
        f"{label} contract saved. Vehicle {contract.vehicle.vin} removed from inventory."
    ))
