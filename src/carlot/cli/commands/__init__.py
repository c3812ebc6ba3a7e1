"""CLI command implementations."""

import logging
from pathlib import Path
from typing import Optional

import typer

from carlot.cli.ui import console, error_panel, warning_panel
from carlot.core.config import ConfigManager
from carlot.core.service import DealershipService
from carlot.exceptions import ConfigError

logger = logging.getLogger(__name__)


def open_service(
    inventory: Optional[Path] = None,
    contracts: Optional[Path] = None,
    quiet: bool = False,
) -> DealershipService:
    """Load settings and inventory, reporting any load problems.

    Command-line paths override the configured ones.
    """
    try:
        settings = ConfigManager().load()
    except ConfigError as e:
        console.print(error_panel(e.message, e.details))
        raise typer.Exit(1)

    settings = settings.with_paths(inventory_path=inventory, contracts_path=contracts)
    service = DealershipService.open(settings)

    result = service.load_result
    if not quiet and result is not None and result.has_problems:
        lines = []
        if result.header_defaulted:
            lines.append("Dealership header was missing or invalid; using defaults.")
        lines.extend(f"Skipped {s.display}" for s in result.skipped)
        console.print(warning_panel("\n".join(lines)))

    return service


def report_save(service: DealershipService) -> None:
    """Warn if the last inventory write failed."""
    if not service.last_save_ok:
        console.print(warning_panel(
            f"Could not write {service.inventory.path}. "
            "Changes are kept in memory only."
        ))
