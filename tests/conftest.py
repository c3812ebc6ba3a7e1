"""Shared test fixtures for carlot."""

from datetime import date
from unittest.mock import patch

import pytest

from carlot.core.config import ConfigManager
from carlot.models import Dealership, Vehicle

CURRENT_YEAR = date.today().year

INVENTORY_TEXT = (
    "D & B Used Cars|111 Old Benbrook Rd|817-555-5555\n"
    f"10112|{CURRENT_YEAR - 1}|Honda|Civic|Sedan|Blue|12000|21500.00\n"
    "37846|2001|Ford|Ranger|Truck|Yellow|172544|1995.00\n"
    f"44901|{CURRENT_YEAR}|Subaru|Outback|SUV|Green|20|32900.00\n"
    "66500|2015|Honda|Accord|Sedan|Red|88000|9800.50\n"
)


def _make_vehicle(**overrides) -> Vehicle:
    fields = {
        "vin": 10112,
        "year": CURRENT_YEAR - 1,
        "make": "Honda",
        "model": "Civic",
        "vehicle_type": "Sedan",
        "color": "Blue",
        "odometer": 12000,
        "price": "21500.00",
    }
    fields.update(overrides)
    return Vehicle(**fields)


@pytest.fixture
def temp_config_dir(tmp_path):
    """Provide isolated config directory for tests."""
    config_dir = tmp_path / ".config" / "carlot"
    config_dir.mkdir(parents=True)
    return config_dir


@pytest.fixture
def vehicle_factory():
    """Build a valid Vehicle, overriding any fields."""
    return _make_vehicle


@pytest.fixture
def vehicle():
    return _make_vehicle()


@pytest.fixture
def dealership():
    d = Dealership(name="D & B Used Cars", address="111 Old Benbrook Rd", phone="817-555-5555")
    d.add_vehicle(_make_vehicle())
    d.add_vehicle(_make_vehicle(
        vin=37846, year=2001, make="Ford", model="Ranger", vehicle_type="Truck",
        color="Yellow", odometer=172544, price="1995.00",
    ))
    d.add_vehicle(_make_vehicle(
        vin=44901, year=CURRENT_YEAR, make="Subaru", model="Outback", vehicle_type="SUV",
        color="Green", odometer=20, price="32900.00",
    ))
    d.add_vehicle(_make_vehicle(
        vin=66500, year=2015, make="Honda", model="Accord", vehicle_type="Sedan",
        color="Red", odometer=88000, price="9800.50",
    ))
    return d


@pytest.fixture
def inventory_path(tmp_path):
    """Inventory file with a header and four vehicles."""
    path = tmp_path / "inventory.csv"
    path.write_text(INVENTORY_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def contracts_path(tmp_path):
    return tmp_path / "contracts.csv"


@pytest.fixture(autouse=True)
def no_file_logging():
    """Keep CLI runs from writing debug.log into the real config dir."""
    with patch("carlot.cli.app.setup_logging"):
        yield


@pytest.fixture
def isolated_config(temp_config_dir):
    """Point every ConfigManager() the CLI creates at an empty temp dir."""
    manager = ConfigManager(config_dir=temp_config_dir)
    with (
        patch("carlot.cli.commands.ConfigManager", return_value=manager),
        patch("carlot.cli.commands.config.ConfigManager", return_value=manager),
    ):
        yield manager
