"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from artmarket.infrastructure.cli import main as cli_main
from artmarket.infrastructure.cli.main import cli

PRODUCTS = [
    {"id": "p1", "name": "Harbour Print", "price": "25.00", "seller_id": "s1", "status": "Available"},
    {"id": "p2", "name": "Brush Pack", "price": "8.50", "seller_id": "s1", "status": "Available"},
    {"id": "p3", "name": "Moon Bowl", "price": "42.00", "seller_id": "s2", "status": "Available"},
]
INVENTORY = [
    {"product_id": "p1", "quantity_on_hand": 10, "quantity_reserved": 0, "unlimited": False},
    {"product_id": "p2", "quantity_on_hand": 0, "quantity_reserved": 0, "unlimited": True},
    {"product_id": "p3", "quantity_on_hand": 3, "quantity_reserved": 0, "unlimited": False},
]


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    # Keep the CLI from re-pointing the root logger at CliRunner's streams.
    monkeypatch.setattr(cli_main, "configure_logging", lambda settings: None)


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "products.json").write_text(json.dumps(PRODUCTS))
    (tmp_path / "inventory.json").write_text(json.dumps(INVENTORY))
    return tmp_path


@pytest.fixture
def run(data_dir):
    runner = CliRunner()

    def _run(*args):
        return runner.invoke(
            cli, ["--data-dir", str(data_dir), *args], env={"ARTMARKET_ENV": "test"}
        )

    return _run


def _stock(data_dir, product_id):
    records = json.loads((data_dir / "inventory.json").read_text())
    return next(r for r in records if r["product_id"] == product_id)["quantity_on_hand"]


# ── Cart ─────────────────────────────────────────────────────────────────────


class TestCartCommands:

    def test_add_and_show(self, run):
        result = run("cart", "add", "--user", "u1", "--product", "p1", "--quantity", "3")
        assert result.exit_code == 0, result.output
        assert "Harbour Print" in result.output
        assert "$75.00" in result.output

        result = run("cart", "show", "--user", "u1")
        assert "(3 items)" in result.output

    def test_add_over_stock_fails(self, run):
        result = run("cart", "add", "--user", "u1", "--product", "p3", "--quantity", "4")
        assert result.exit_code != 0
        assert "Insufficient stock for product: Moon Bowl. Available: 3, Requested: 4" in result.output

    def test_count_and_clear(self, run):
        run("cart", "add", "--user", "u1", "--product", "p1", "--quantity", "2")
        run("cart", "add", "--user", "u1", "--product", "p2", "--quantity", "5")
        assert run("cart", "count", "--user", "u1").output.strip() == "7"

        assert "cleared" in run("cart", "clear", "--user", "u1").output
        assert run("cart", "count", "--user", "u1").output.strip() == "0"

    def test_update_and_remove(self, run):
        run("cart", "add", "--user", "u1", "--product", "p1", "--quantity", "2")
        result = run("cart", "update", "--user", "u1", "--product", "p1", "--quantity", "4")
        assert "$100.00" in result.output

        result = run("cart", "remove", "--user", "u1", "--product", "p1")
        assert "is empty" in result.output

    def test_remove_missing_line(self, run):
        result = run("cart", "remove", "--user", "u1", "--product", "p1")
        assert result.exit_code != 0
        assert "not found in cart" in result.output


# ── Orders ───────────────────────────────────────────────────────────────────


class TestOrderCommands:

    def _checkout(self, run, user="u1"):
        return run(
            "order", "checkout", "--user", user,
            "--address", "12 Quay Street", "--payment-token", "4111111111111111",
        )

    def test_checkout(self, run, data_dir):
        run("cart", "add", "--user", "u1", "--product", "p1", "--quantity", "3")
        result = self._checkout(run)
        assert result.exit_code == 0, result.output
        assert "Order placed successfully from cart." in result.output
        assert "Order #1  (status=Pending)" in result.output
        assert _stock(data_dir, "p1") == 7
        assert run("cart", "count", "--user", "u1").output.strip() == "0"

    def test_checkout_empty_cart(self, run):
        result = self._checkout(run)
        assert result.exit_code != 0
        assert "Cart is empty" in result.output

    def test_place_direct(self, run, data_dir):
        result = run(
            "order", "place", "--user", "u1", "--items", "p1:2, p3:1",
            "--address", "12 Quay Street", "--payment-token", "4242",
        )
        assert result.exit_code == 0, result.output
        assert "$92.00" in result.output
        assert _stock(data_dir, "p3") == 2

    def test_place_bad_items(self, run):
        result = run(
            "order", "place", "--user", "u1", "--items", "p1-2",
            "--address", "12 Quay Street", "--payment-token", "4242",
        )
        assert result.exit_code != 0
        assert "Invalid item format" in result.output

    def test_history_show_and_status(self, run):
        run("cart", "add", "--user", "u1", "--product", "p3", "--quantity", "1")
        self._checkout(run)

        assert "#1" in run("order", "history", "--user", "u1").output
        assert "No orders found." in run("order", "history", "--user", "u2").output
        assert "Moon Bowl" in run("order", "show", "--user", "u1", "--id", "1").output
        assert "permission" in run("order", "show", "--user", "u2", "--id", "1").output
        assert "#1" in run("order", "seller", "--seller", "s2").output

        result = run("order", "status", "--seller", "s1", "--id", "1", "--status", "Shipped")
        assert result.exit_code != 0
        assert "permission" in result.output

        result = run("order", "status", "--seller", "s2", "--id", "1", "--status", "shipped")
        assert "Order #1 status updated to Shipped." in result.output


# ── Catalog maintenance ──────────────────────────────────────────────────────


class TestCatalogCommands:

    def test_product_update_then_cart_add_refused(self, run):
        result = run("product", "update", "--id", "p1", "--status", "Sold Out")
        assert "Product p1 'Harbour Print': $25.00, Sold Out" in result.output

        result = run("cart", "add", "--user", "u1", "--product", "p1")
        assert result.exit_code != 0
        assert "Product is not available: Harbour Print" in result.output

    def test_product_list(self, run):
        assert "Moon Bowl" in run("product", "list").output

    def test_inventory_set_and_show(self, run, data_dir):
        assert "set to 20" in run("inventory", "set", "--product", "p3", "--quantity", "20").output
        assert _stock(data_dir, "p3") == 20
        assert "set to unlimited" in run("inventory", "set", "--product", "p1", "--unlimited").output
        assert "unlimited" in run("inventory", "show").output


class TestSettingsErrors:

    def test_unknown_log_level_is_a_clean_error(self, data_dir):
        result = CliRunner().invoke(
            cli,
            ["--data-dir", str(data_dir), "product", "list"],
            env={"ARTMARKET_ENV": "test", "LOG_LEVEL": "loud"},
        )
        assert result.exit_code == 1
        assert "Invalid LOG_LEVEL 'loud'" in result.output
        assert not isinstance(result.exception, ValueError)
