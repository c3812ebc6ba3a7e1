"""Rich console UI helpers."""

from decimal import Decimal
from typing import Iterable

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from carlot.models import Contract, LeaseContract, SaleContract, Vehicle

console = Console()


def success_panel(message: str) -> Panel:
    """Create a success message panel."""
    return Panel(
        f"[green]✓[/green] {message}",
        border_style="green",
        padding=(0, 1),
    )


def error_panel(message: str, details: str | None = None) -> Panel:
    """Create an error message panel."""
    content = f"[red]✗[/red] {message}"
    if details:
        content += f"\n\n[dim]{details}[/dim]"
    return Panel(
        content,
        title="Error",
        border_style="red",
        padding=(0, 1),
    )


def warning_panel(message: str) -> Panel:
    """Create a warning message panel."""
    return Panel(
        f"[yellow]⚠[/yellow] {message}",
        border_style="yellow",
        padding=(0, 1),
    )


def money(amount: Decimal) -> str:
    """Format a currency amount for display."""
    return f"${amount:,.2f}"


def validation_messages(error) -> list[str]:
    """Flatten a pydantic ValidationError into 'field: message' lines."""
    messages = []
    for err in error.errors():
        loc = err["loc"][-1] if err["loc"] else "value"
        messages.append(f"{loc}: {err['msg']}")
    return messages


def create_vehicle_table(vehicles: Iterable[Vehicle], title: str | None = None) -> Table:
    """Create a table listing vehicles."""
    table = Table(title=title, show_lines=False)
    table.add_column("VIN", style="bold", justify="right", no_wrap=True)
    table.add_column("Year", justify="right")
    table.add_column("Make")
    table.add_column("Model")
    table.add_column("Type")
    table.add_column("Color")
    table.add_column("Odometer", justify="right")
    table.add_column("Price", justify="right")

    for v in vehicles:
        table.add_row(
            str(v.vin),
            str(v.year),
            v.make,
            v.model,
            v.vehicle_type,
            v.color,
            f"{v.odometer:,}",
            v.price_display,
        )

    return table


def create_contract_table(contract: Contract) -> Table:
    """Create a table with a contract's price breakdown."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Description", style="white")
    table.add_column("Amount", style="white", justify="right")

    table.add_row("Vehicle price", money(contract.price))
    if isinstance(contract, SaleContract):
        table.add_row("Sales tax", money(contract.sales_tax_amount))
        table.add_row("Recording fee", money(contract.recording_fee))
        table.add_row("Processing fee", money(contract.processing_fee))
    elif isinstance(contract, LeaseContract):
        table.add_row("Expected ending value", money(contract.expected_ending_value))
        table.add_row("Lease fee", money(contract.lease_fee))
    table.add_row("[bold]Total[/bold]", f"[bold]{money(contract.total_price)}[/bold]")
    table.add_row("Monthly payment", money(contract.monthly_payment))

    return table
