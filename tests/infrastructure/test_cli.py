"""End-to-end tests for the click CLI against a temporary data directory."""

import json

import pytest
from click.testing import CliRunner

from storefront.domain.repository.cart_repository import CART_STORAGE_KEY
from storefront.infrastructure.bootstrap import DATA_DIR_ENV
from storefront.infrastructure.cli.main import cli


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path))
    runner = CliRunner()

    def _run(*args: str):
        return runner.invoke(cli, list(args), catch_exceptions=False)

    return _run


class TestProductsCommands:

    def test_list_filters_and_sorts(self, run):
        result = run("products", "list", "--category", "books", "--sort", "price-asc")
        assert result.exit_code == 0
        assert "Showing 2 of 12 products" in result.output
        assert result.output.index("The Pragmatic Gardener") < result.output.index("Mindful Cooking")

    def test_list_shows_labels(self, run):
        result = run("products", "list", "--category", "home", "--sort", "price-asc")
        assert "(sorted by Price: Low to High)" in result.output
        assert "Home & Living" in result.output

    def test_show_uses_category_label(self, run):
        assert "(#6, Books)" in run("products", "show", "6").output

    def test_list_no_match(self, run):
        result = run("products", "list", "--search", "submarine")
        assert "No products found" in result.output

    def test_show_unknown_product(self, run):
        result = run("products", "show", "999")
        assert result.exit_code != 0
        assert "not found" in result.output


class TestCartCommands:

    def test_add_merge_show(self, run):
        assert run("cart", "add", "2").exit_code == 0
        result = run("cart", "add", "2", "-q", "2")
        assert "3 items" in result.output

        shown = run("cart", "show")
        assert "Organic Cotton T-Shirt" in shown.output
        assert "$89.97" in shown.output
        assert "Free" in shown.output

    def test_update_to_zero_empties_cart(self, run):
        run("cart", "add", "6")
        run("cart", "update", "6", "0")
        assert "Your cart is empty." in run("cart", "show").output

    def test_out_of_stock_rejected(self, run):
        result = run("cart", "add", "5")
        assert result.exit_code != 0
        assert "out of stock" in result.output

    def test_remove_twice(self, run):
        run("cart", "add", "6")
        assert "removed" in run("cart", "remove", "6").output
        assert "was not in the cart" in run("cart", "remove", "6").output

    def test_in_cart_flag_in_listing(self, run):
        run("cart", "add", "6")
        result = run("products", "list", "--category", "books")
        assert "in cart" in result.output


    def test_malformed_saved_cart_reads_empty(self, run, tmp_path):
        payload = json.dumps([{"product": "oops", "quantity": 1}])
        (tmp_path / "storage.json").write_text(
            json.dumps({CART_STORAGE_KEY: payload}), encoding="utf-8"
        )
        assert run("products", "list").exit_code == 0
        assert "Your cart is empty." in run("cart", "show").output


class TestCheckoutFlow:

    def test_checkout_requires_login(self, run):
        run("cart", "add", "6")
        result = run(
            "order", "checkout", "--street", "1 Main", "--city", "Austin",
            "--state", "TX", "--zip", "73301",
        )
        assert result.exit_code != 0
        assert "log in" in result.output

    def test_login_checkout_and_list(self, run):
        assert run("auth", "login", "--email", "john@example.com", "--password", "secret1").exit_code == 0
        run("cart", "add", "6", "-q", "2")
        result = run(
            "order", "checkout", "--street", "1 Main", "--city", "Austin",
            "--state", "TX", "--zip", "73301",
        )
        assert result.exit_code == 0
        assert "Order ORD-001" in result.output
        assert "Your cart is empty." in run("cart", "show").output
        assert "ORD-001" in run("order", "list").output

    def test_bad_login(self, run):
        result = run("auth", "login", "--email", "john@example.com", "--password", "123")
        assert result.exit_code != 0
        assert "Not logged in." in run("auth", "whoami").output


class TestAdminCommands:

    def test_shopper_cannot_add(self, run):
        run("auth", "login", "--email", "john@example.com", "--password", "secret1")
        result = run(
            "admin", "add", "--name", "Lamp", "--description", "A warm desk lamp.",
            "--price", "39.00", "--category", "home",
        )
        assert result.exit_code != 0
        assert "Admin access required" in result.output

    def test_admin_add_update_delete(self, run):
        run("auth", "login", "--email", "admin@example.com", "--password", "secret1")
        added = run(
            "admin", "add", "--name", "Lamp", "--description", "A warm desk lamp.",
            "--price", "39.00", "--category", "home",
        )
        assert "Product #13 'Lamp' added at $39.00" in added.output

        updated = run("admin", "update", "13", "--price", "35")
        assert "$35.00" in updated.output

        newest = run("products", "list", "--sort", "newest")
        first_row = newest.output.splitlines()[4]
        assert first_row.startswith("13")

        assert run("admin", "delete", "13").exit_code == 0
        assert "Showing 12 of 12" in run("products", "list").output
