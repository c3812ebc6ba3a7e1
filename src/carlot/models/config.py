"""Application settings model."""

from pathlib import Path

import platformdirs
from pydantic import BaseModel, Field

INVENTORY_FILENAME = "inventory.csv"
CONTRACTS_FILENAME = "contracts.csv"


def default_data_dir() -> Path:
    """Directory holding the inventory and contract files by default."""
    return Path(platformdirs.user_data_dir("carlot"))


class Settings(BaseModel):
    """Where carlot keeps its data files."""

    # Schema version for future migrations
    version: int = Field(default=1, description="Settings schema version")

    inventory_path: Path = Field(
        default_factory=lambda: default_data_dir() / INVENTORY_FILENAME,
        description="Pipe-delimited inventory file",
    )
    contracts_path: Path = Field(
        default_factory=lambda: default_data_dir() / CONTRACTS_FILENAME,
        description="Append-only contract log",
    )

    def with_paths(
        self,
        inventory_path: Path | None = None,
        contracts_path: Path | None = None,
    ) -> "Settings":
        """Return new settings with any given path replaced."""
        update = {}
        if inventory_path is not None:
            update["inventory_path"] = Path(inventory_path)
        if contracts_path is not None:
            update["contracts_path"] = Path(contracts_path)
        return self.model_copy(update=update)

    @property
    def summary(self) -> dict:
        """Return dict for display."""
        return {
            "inventory": str(self.inventory_path),
            "contracts": str(self.contracts_path),
        }
