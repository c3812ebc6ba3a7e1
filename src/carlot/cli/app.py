"""Main CLI application."""

from decimal import Decimal
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from carlot import __version__
from carlot.logging import setup_logging
from carlot.models import ContractKind

app = typer.Typer(
    name="carlot",
    help="Manage a dealership's vehicle inventory and sale/lease contracts.",
    rich_markup_mode="rich",
)

console = Console()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit.",
    ),
    inventory: Optional[Path] = typer.Option(
        None, "--inventory", "-i", help="Inventory file (overrides settings)"
    ),
    contracts: Optional[Path] = typer.Option(
        None, "--contracts", "-c", help="Contract file (overrides settings)"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Show log messages on stderr"
    ),
) -> None:
    """carlot - dealership inventory manager.

    Run without a command for the interactive menu.
    """
    if version:
        console.print(f"carlot v{__version__}")
        raise typer.Exit()

    setup_logging(verbose=verbose)
    ctx.obj = {"inventory": inventory, "contracts": contracts}

    if ctx.invoked_subcommand is None:
        from carlot.cli.repl import run_repl

        run_repl(inventory=inventory, contracts=contracts)


@app.command("list")
def list_vehicles(ctx: typer.Context) -> None:
    """Show all vehicles in inventory."""
    from carlot.cli.commands.inventory import run_list

    run_list(**ctx.obj)


@app.command()
def search(
    ctx: typer.Context,
    make: Optional[str] = typer.Option(None, "--make", help="Make (exact, any case)"),
    model: Optional[str] = typer.Option(None, "--model", help="Model (exact, any case)"),
    color: Optional[str] = typer.Option(None, "--color", help="Color (exact, any case)"),
    vehicle_type: Optional[str] = typer.Option(None, "--type", help="Vehicle type, e.g. SUV"),
    min_year: Optional[int] = typer.Option(None, "--min-year"),
    max_year: Optional[int] = typer.Option(None, "--max-year"),
    min_price: Optional[float] = typer.Option(None, "--min-price"),
    max_price: Optional[float] = typer.Option(None, "--max-price"),
    min_mileage: Optional[int] = typer.Option(None, "--min-mileage"),
    max_mileage: Optional[int] = typer.Option(None, "--max-mileage"),
) -> None:
    """Search inventory. All given filters must match."""
    from carlot.cli.commands.inventory import run_search

    run_search(
        {
            "make": make,
            "model": model,
            "color": color,
            "vehicle_type": vehicle_type,
            "min_year": min_year,
            "max_year": max_year,
            "min_price": _to_decimal(min_price),
            "max_price": _to_decimal(max_price),
            "min_mileage": min_mileage,
            "max_mileage": max_mileage,
        },
        **ctx.obj,
    )


@app.command()
def add(
    ctx: typer.Context,
    vin: int = typer.Option(..., "--vin", help="Vehicle identification number"),
    year: int = typer.Option(..., "--year", help="Model year"),
    make: str = typer.Option(..., "--make"),
    model: str = typer.Option(..., "--model"),
    vehicle_type: str = typer.Option(..., "--type", help="Vehicle type, e.g. SUV"),
    color: str = typer.Option(..., "--color"),
    odometer: int = typer.Option(..., "--odometer", help="Miles"),
    price: float = typer.Option(..., "--price", help="Dollars"),
) -> None:
    """Add a vehicle to inventory."""
    from carlot.cli.commands.vehicles import run_add

    run_add(
        {
            "vin": vin,
            "year": year,
            "make": make,
            "model": model,
            "vehicle_type": vehicle_type,
            "color": color,
            "odometer": odometer,
            "price": _to_decimal(price),
        },
        **ctx.obj,
    )


@app.command()
def remove(
    ctx: typer.Context,
    vin: int = typer.Argument(..., help="VIN of the vehicle to remove"),
) -> None:
    """Remove a vehicle from inventory."""
    from carlot.cli.commands.vehicles import run_remove

    run_remove(vin, **ctx.obj)


@app.command()
def sell(
    ctx: typer.Context,
    vin: int = typer.Argument(..., help="VIN of the vehicle to sell"),
    customer: str = typer.Option(..., "--customer", help="Customer name"),
    email: str = typer.Option(..., "--email", help="Customer email"),
    financed: bool = typer.Option(False, "--financed", help="Dealer financing"),
) -> None:
    """Sell a vehicle and record the sale contract."""
    from carlot.cli.commands.contracts import run_contract

    run_contract(ContractKind.SALE, vin, customer, email, financed=financed, **ctx.obj)


@app.command()
def lease(
    ctx: typer.Context,
    vin: int = typer.Argument(..., help="VIN of the vehicle to lease"),
    customer: str = typer.Option(..., "--customer", help="Customer name"),
    email: str = typer.Option(..., "--email", help="Customer email"),
) -> None:
    """Lease a vehicle and record the lease contract."""
    from carlot.cli.commands.contracts import run_contract

    run_contract(ContractKind.LEASE, vin, customer, email, **ctx.obj)


@app.command()
def config(
    inventory: Optional[Path] = typer.Option(
        None, "--set-inventory", help="Save a new default inventory file"
    ),
    contracts: Optional[Path] = typer.Option(
        None, "--set-contracts", help="Save a new default contract file"
    ),
    reset: bool = typer.Option(False, "--reset", help="Forget saved settings"),
) -> None:
    """Show or change where carlot keeps its files."""
    from carlot.cli.commands.config import run_config

    run_config(inventory=inventory, contracts=contracts, reset=reset)


def _to_decimal(value: Optional[float]) -> Optional[Decimal]:
    if value is None:
        return None
    return Decimal(repr(value))


if __name__ == "__main__":
    app()
