"""Inventory file reading and writing.

The inventory file is UTF-8 text with ``|`` separated fields and no quoting.
The first line describes the dealership (``name|address|phone``); every
following line is one vehicle
(``vin|year|make|model|vehicle_type|color|odometer|price``).
"""

import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from carlot.exceptions import InventoryLineError
from carlot.models import Dealership, LoadResult, SkippedLine, Vehicle
from carlot.models.vehicle import quantize_money

logger = logging.getLogger(__name__)

DELIMITER = "|"
HEADER_FIELDS = 3
VEHICLE_FIELDS = 8


def format_money(amount: Decimal) -> str:
    """Format a currency amount with exactly two decimals."""
    return f"{quantize_money(amount):.2f}"


def vehicle_fields(vehicle: Vehicle) -> list[str]:
    """Vehicle as the eight inventory-file fields."""
    return [
        str(vehicle.vin),
        str(vehicle.year),
        vehicle.make,
        vehicle.model,
        vehicle.vehicle_type,
        vehicle.color,
        str(vehicle.odometer),
        format_money(vehicle.price),
    ]


def _parse_int(value: str, field: str) -> int:
    try:
        return int(value.strip())
    except ValueError:
        raise InventoryLineError(f"{field} is not a whole number: {value.strip()!r}")


def _parse_decimal(value: str, field: str) -> Decimal:
    try:
        return Decimal(value.strip())
    except InvalidOperation:
        raise InventoryLineError(f"{field} is not a number: {value.strip()!r}")


def parse_header(line: str) -> Optional[Dealership]:
    """Parse the dealership header line, or None if it is unusable."""
    fields = line.split(DELIMITER)
    if len(fields) < HEADER_FIELDS:
        return None
    try:
        return Dealership(name=fields[0], address=fields[1], phone=fields[2])
    except ValidationError:
        return None


def parse_vehicle_line(line: str) -> Vehicle:
    """Parse one vehicle line.

    Raises:
        InventoryLineError: If the field count is wrong, a number does not
            parse, or the values are rejected by Vehicle
    """
    fields = line.split(DELIMITER)
    if len(fields) != VEHICLE_FIELDS:
        raise InventoryLineError(
            f"Expected {VEHICLE_FIELDS} fields, found {len(fields)}", line
        )

    try:
        vin = _parse_int(fields[0], "VIN")
        year = _parse_int(fields[1], "Year")
        odometer = _parse_int(fields[6], "Odometer")
        price = _parse_decimal(fields[7], "Price")
    except InventoryLineError as e:
        raise InventoryLineError(e.reason, line)

    try:
        return Vehicle(
            vin=vin,
            year=year,
            make=fields[2],
            model=fields[3],
            vehicle_type=fields[4],
            color=fields[5],
            odometer=odometer,
            price=price,
        )
    except ValidationError as e:
        problems = "; ".join(
            f"{err['loc'][-1]}: {err['msg']}" for err in e.errors()
        )
        raise InventoryLineError(problems, line)


class InventoryFile:
    """Loads and saves a dealership inventory file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> LoadResult:
        """Read the inventory file.

        Never raises for bad content or a missing file. A missing file gives
        an empty default dealership; bad vehicle lines are skipped and
        reported in the result.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("Inventory file %s not found, starting empty", self.path)
            return LoadResult(
                dealership=Dealership.default(),
                header_defaulted=True,
                file_found=False,
            )
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read inventory file %s: %s", self.path, e)
            return LoadResult(dealership=Dealership.default(), header_defaulted=True)

        lines = text.splitlines()

        dealership = parse_header(lines[0]) if lines else None
        header_defaulted = dealership is None
        if dealership is None:
            logger.warning(
                "Dealership header missing or invalid in %s, using default", self.path
            )
            dealership = Dealership.default()

        skipped: list[SkippedLine] = []
        for line_number, line in enumerate(lines[1:], start=2):
            if not line.strip():
                continue
            try:
                vehicle = parse_vehicle_line(line)
            except InventoryLineError as e:
                logger.warning(
                    "Skipping inventory line %d (%s): %r", line_number, e.reason, line
                )
                skipped.append(
                    SkippedLine(line_number=line_number, line=line, reason=e.reason)
                )
                continue
            dealership.add_vehicle(vehicle)

        logger.info(
            "Loaded %d vehicles from %s (%d skipped)",
            len(dealership),
            self.path,
            len(skipped),
        )
        return LoadResult(
            dealership=dealership,
            skipped=skipped,
            header_defaulted=header_defaulted,
        )

    def save(self, dealership: Dealership) -> bool:
        """Rewrite the whole file from ``dealership``.

        Returns:
            True on success, False if the file could not be written
        """
        lines = [DELIMITER.join([dealership.name, dealership.address, dealership.phone])]
        lines.extend(DELIMITER.join(vehicle_fields(v)) for v in dealership.vehicles)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8", newline="\n") as fh:
                for line in lines:
                    fh.write(line + "\n")
        except OSError as e:
            logger.error("Failed to write inventory file %s: %s", self.path, e)
            return False

        logger.debug("Saved %d vehicles to %s", len(dealership), self.path)
        return True
