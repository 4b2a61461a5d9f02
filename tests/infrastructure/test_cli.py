"""End-to-end tests for the click CLI against a JSON data directory."""

import json

import pytest
from click.testing import CliRunner

from pos.infrastructure.cli.main import cli

PRODUCTS = [
    {"id": 1, "name": "Widget", "sku": "W-1", "price": "100.00", "stock_quantity": 5},
    {"id": 2, "name": "Gadget", "sku": "G-1", "price": "4.50", "stock_quantity": 0},
]

DISCOUNTS = [
    {"id": 1, "name": "Loyalty", "type": "percentage", "value": "10", "minimum_amount": "50"},
]


@pytest.fixture()
def run(tmp_path):
    (tmp_path / "products.json").write_text(json.dumps(PRODUCTS))
    (tmp_path / "discounts.json").write_text(json.dumps(DISCOUNTS))
    runner = CliRunner()
    env = {"POS_DATA_DIR": str(tmp_path), "POS_API_URL": ""}

    def _run(*args):
        return runner.invoke(cli, list(args), env=env)

    _run.data_dir = tmp_path
    return _run


class TestCatalogCommands:

    def test_product_list(self, run):
        result = run("product", "list")
        assert result.exit_code == 0
        assert "Widget" in result.output
        assert "$100.00" in result.output

    def test_product_search_without_match(self, run):
        result = run("product", "list", "--search", "nothing")
        assert result.exit_code == 0
        assert "No products found." in result.output

    def test_discount_list(self, run):
        result = run("discount", "list")
        assert result.exit_code == 0
        assert "Loyalty - 10%" in result.output
        assert "(minimum $50.00)" in result.output


class TestCheckoutQuote:

    def test_quote_without_discount(self, run):
        result = run("checkout", "quote", "--items", "1:2")
        assert result.exit_code == 0, result.output
        assert "$200.00" in result.output
        assert "$16.00" in result.output
        assert "$216.00" in result.output
        assert "Discount" not in result.output

    def test_quote_with_discount_and_tender(self, run):
        result = run("checkout", "quote", "--items", "1:2", "--discount", "1", "--paid", "300")
        assert result.exit_code == 0, result.output
        assert "-$20.00" in result.output
        assert "$194.40" in result.output
        assert "$105.60" in result.output

    def test_out_of_stock_item_is_an_error(self, run):
        result = run("checkout", "quote", "--items", "2:1")
        assert result.exit_code != 0
        assert "out of stock" in result.output

    def test_bad_item_format(self, run):
        result = run("checkout", "quote", "--items", "widget:two")
        assert result.exit_code != 0
        assert "Invalid item" in result.output


class TestCheckoutSell:

    def test_sell_records_transaction(self, run):
        result = run("checkout", "sell", "--items", "1:2", "--paid", "300", "--method", "card")
        assert result.exit_code == 0, result.output
        assert "$84.00" in result.output
        assert "completed" in result.output

        (saved,) = json.loads((run.data_dir / "transactions.json").read_text())
        assert saved["payment_method"] == "card"
        products = json.loads((run.data_dir / "products.json").read_text())
        assert products[0]["stock_quantity"] == 3

    def test_sell_with_insufficient_payment(self, run):
        result = run("checkout", "sell", "--items", "1:2", "--paid", "100")
        assert result.exit_code != 0
        assert "Insufficient payment" in result.output
        assert json.loads((run.data_dir / "transactions.json").read_text()) == []

    def test_sell_with_zero_quantity_sells_nothing(self, run):
        result = run("checkout", "sell", "--items", "1:0", "--paid", "200")
        assert result.exit_code != 0
        assert "Cart is empty" in result.output
        assert json.loads((run.data_dir / "transactions.json").read_text()) == []
        products = json.loads((run.data_dir / "products.json").read_text())
        assert products[0]["stock_quantity"] == 5
