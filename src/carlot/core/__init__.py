"""Core services for carlot."""

from carlot.core.config import ConfigManager
from carlot.core.contract_file import ContractLedger, format_contract
from carlot.core.inventory_file import InventoryFile
from carlot.core.service import DealershipService

__all__ = [
    "ConfigManager",
    "ContractLedger",
    "DealershipService",
    "InventoryFile",
    "format_contract",
]
