"""E2E tests: drive the interactive menu the way a salesperson would.

Each test feeds keystrokes to the REPL and then checks the files on disk.
"""

import pytest
from typer.testing import CliRunner

from carlot.cli.app import app

runner = CliRunner()


def keys(*lines: str) -> str:
    return "\n".join(lines) + "\n"


@pytest.fixture
def run_menu(inventory_path, contracts_path, isolated_config):
    """Invoke the REPL against the test inventory with the given keystrokes."""

    def _run(text: str):
        return runner.invoke(
            app,
            ["--inventory", str(inventory_path), "--contracts", str(contracts_path)],
            input=text,
        )

    return _run


class TestSessionLifecycle:
    def test_banner_and_quit(self, run_menu):
        result = run_menu(keys("q"))
        assert result.exit_code == 0
        assert "D & B Used Cars" in result.output
        assert "4 vehicle(s) in stock" in result.output
        assert "Goodbye!" in result.output

    def test_end_of_input_exits_cleanly(self, run_menu):
        result = run_menu("")
        assert result.exit_code == 0
        assert "Goodbye!" in result.output

    def test_invalid_choice(self, run_menu):
        result = run_menu(keys("z", "q"))
        assert result.exit_code == 0
        assert "Invalid choice" in result.output

    def test_empty_lot_hides_remove_and_sell(self, tmp_path, isolated_config):
        empty = tmp_path / "empty.csv"
        empty.write_text("Lot|1 Main St|555-0100\n", encoding="utf-8")
        result = runner.invoke(app, ["--inventory", str(empty)], input=keys("s", "q"))
        assert "Sell or lease" not in result.output
        assert "Invalid choice" in result.output


class TestSearchFlows:
    def test_search_by_price(self, run_menu):
        result = run_menu(keys("p", "5000", "25000", "q"))
        assert result.exit_code == 0
        assert "10112" in result.output
        assert "66500" in result.output
        assert "37846" not in result.output

    def test_search_by_make_and_model_any_case(self, run_menu):
        result = run_menu(keys("m", "HONDA", "accord", "q"))
        assert "66500" in result.output
        assert "10112" not in result.output

    def test_search_by_type(self, run_menu):
        result = run_menu(keys("t", "truck", "q"))
        assert "37846" in result.output
        assert "44901" not in result.output

    def test_search_no_match(self, run_menu):
        result = run_menu(keys("c", "Purple", "q"))
        assert "No vehicles found" in result.output

    def test_bad_number_keeps_session(self, run_menu):
        result = run_menu(keys("o", "lots", "l", "q"))
        assert result.exit_code == 0
        assert "is not a whole number" in result.output
        assert "44901" in result.output

    def test_inverted_range_reported(self, run_menu):
        result = run_menu(keys("y", "2020", "2000", "q"))
        assert result.exit_code == 0
        assert "Invalid input" in result.output


class TestInventoryFlows:
    def test_add_vehicle(self, run_menu, inventory_path):
        result = run_menu(keys(
            "a", "50001", "2019", "Toyota", "Tacoma", "Truck", "Gray", "41000", "$27,999.99",
            "q",
        ))
        assert result.exit_code == 0
        assert "Vehicle 50001 (2019 Toyota Tacoma) added." in result.output
        assert "50001|2019|Toyota|Tacoma|Truck|Gray|41000|27999.99" in (
            inventory_path.read_text(encoding="utf-8")
        )

    def test_add_duplicate_vin_rejected(self, run_menu, inventory_path):
        before = inventory_path.read_text(encoding="utf-8")
        result = run_menu(keys(
            "a", "10112", "2019", "Toyota", "Tacoma", "Truck", "Gray", "41000", "100",
            "q",
        ))
        assert "already in inventory" in result.output
        assert inventory_path.read_text(encoding="utf-8") == before

    def test_add_price_too_large(self, run_menu, inventory_path):
        before = inventory_path.read_text(encoding="utf-8")
        result = run_menu(keys(
            "a", "50001", "2019", "Toyota", "Tacoma", "Truck", "Gray", "41000", "1e30",
            "l", "q",
        ))
        assert result.exit_code == 0
        assert "Invalid input" in result.output
        assert "Goodbye!" in result.output
        assert inventory_path.read_text(encoding="utf-8") == before

    def test_add_make_with_delimiter(self, run_menu, inventory_path):
        before = inventory_path.read_text(encoding="utf-8")
        result = run_menu(keys(
            "a", "50001", "2019", "Ford|Lincoln", "Navigator", "SUV", "Black", "100", "500",
            "q",
        ))
        assert result.exit_code == 0
        assert "Invalid input" in result.output
        assert inventory_path.read_text(encoding="utf-8") == before

    def test_remove_confirmed(self, run_menu, inventory_path):
        result = run_menu(keys("x", "37846", "y", "q"))
        assert "Vehicle 37846 removed." in result.output
        assert "37846" not in inventory_path.read_text(encoding="utf-8")

    def test_remove_cancelled(self, run_menu, inventory_path):
        result = run_menu(keys("x", "37846", "n", "q"))
        assert "Cancelled" in result.output
        assert "37846" in inventory_path.read_text(encoding="utf-8")

    def test_remove_unknown(self, run_menu):
        result = run_menu(keys("x", "99999", "q"))
        assert "Vehicle not found" in result.output


class TestContractFlows:
    def test_financed_sale(self, run_menu, inventory_path, contracts_path):
        result = run_menu(keys(
            "s", "10112", "Ann Buyer", "ann@example.com", "sale", "y", "q",
        ))
        assert result.exit_code == 0
        assert "Sale contract saved" in result.output
        assert "10112" not in inventory_path.read_text(encoding="utf-8")

        line = contracts_path.read_text(encoding="utf-8").strip()
        fields = line.split("|")
        assert fields[0] == "SALE"
        assert fields[2:4] == ["Ann Buyer", "ann@example.com"]
        assert fields[4] == "10112"
        assert "YES" in fields

    def test_lease(self, run_menu, inventory_path, contracts_path):
        result = run_menu(keys(
            "s", "44901", "Bo Lessee", "bo@example.com", "lease", "q",
        ))
        assert result.exit_code == 0
        assert "Lease contract saved" in result.output
        assert contracts_path.read_text(encoding="utf-8").startswith("LEASE|")
        assert "44901" not in inventory_path.read_text(encoding="utf-8")

    def test_old_vehicle_lease_refused(self, run_menu, inventory_path, contracts_path):
        result = run_menu(keys(
            "s", "37846", "Bo Lessee", "bo@example.com", "lease", "q",
        ))
        assert result.exit_code == 0
        assert "cannot be leased" in result.output
        assert "37846" in inventory_path.read_text(encoding="utf-8")
        assert not contracts_path.exists()

    def test_two_sales_append(self, run_menu, contracts_path):
        run_menu(keys(
            "s", "10112", "Ann Buyer", "ann@example.com", "sale", "n",
            "s", "66500", "Cy Cash", "cy@example.com", "sale", "n",
            "q",
        ))
        lines = contracts_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 2
        assert "|10112|" in lines[0]
        assert "|66500|" in lines[1]
