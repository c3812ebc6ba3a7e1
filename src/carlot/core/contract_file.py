"""Append-only contract log."""

import logging
from pathlib import Path

from carlot.core.inventory_file import DELIMITER, format_money, vehicle_fields
from carlot.models import Contract, LeaseContract, SaleContract

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y%m%d"


def format_contract(contract: Contract) -> str:
    """Render a contract as one pipe-delimited line (no newline)."""
    if isinstance(contract, SaleContract):
        figures = [
            format_money(contract.sales_tax_amount),
            format_money(contract.recording_fee),
            format_money(contract.processing_fee),
            format_money(contract.total_price),
            "YES" if contract.financed else "NO",
            format_money(contract.monthly_payment),
        ]
    elif isinstance(contract, LeaseContract):
        figures = [
            format_money(contract.expected_ending_value),
            format_money(contract.lease_fee),
            format_money(contract.total_price),
            format_money(contract.monthly_payment),
        ]
    else:
        raise TypeError(f"Unsupported contract type: {type(contract).__name__}")

    fields = [
        contract.kind,
        contract.date.strftime(DATE_FORMAT),
        contract.customer_name,
        contract.customer_email,
        *vehicle_fields(contract.vehicle),
        *figures,
    ]
    return DELIMITER.join(fields)


class ContractLedger:
    """Appends contracts to the contract file. The file is never read back."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def append(self, contract: Contract) -> bool:
        """Append one contract line.

        Returns:
            True on success, False if the file could not be written
        """
        line = format_contract(contract)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("a", encoding="utf-8", newline="\n") as fh:
                fh.write(line + "\n")
        except OSError as e:
            logger.error("Failed to append contract to %s: %s", self.path, e)
            return False

        logger.info(
            "Recorded %s contract for VIN %d (%s)",
            contract.kind,
            contract.vehicle.vin,
            contract.customer_name,
        )
        return True
