"""Settings command implementation."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from carlot.cli.ui import console, error_panel, success_panel
from carlot.core.config import ConfigManager
from carlot.exceptions import ConfigError

logger = logging.getLogger(__name__)


def run_config(
    inventory: Optional[Path] = None,
    contracts: Optional[Path] = None,
    reset: bool = False,
) -> None:
    """Show or update where carlot keeps its files."""
    manager = ConfigManager()

    if reset:
        try:
            deleted = manager.delete()
        except ConfigError as e:
            console.print(error_panel(e.message, e.details))
            raise typer.Exit(1)
        if deleted:
            console.print(success_panel("Settings reset to defaults."))
        else:
            console.print("[dim]  No saved settings.[/dim]")
        return

    try:
        settings = manager.load()
    except ConfigError as e:
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)

    if inventory is not None or contracts is not None:
        settings = settings.with_paths(inventory_path=inventory, contracts_path=contracts)
        try:
            manager.save(settings)
        except ConfigError as e:
            console.print(error_panel(e.message, e.details))
            raise typer.Exit(1)
        logger.info("Settings updated: %s", settings.summary)
        console.print(success_panel("Settings saved."))

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="dim")
    table.add_column("Value")
    for field, value in settings.summary.items():
        table.add_row(field.capitalize(), value)
    table.add_row("Settings file", str(manager.config_path))

    console.print()
    console.print(table)
