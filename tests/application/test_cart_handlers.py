"""Integration tests for the cart use cases.

Uses in-memory fake repositories — no file I/O.
"""

import pytest

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart import (
    ClearCartHandler,
    RemoveFromCartHandler,
    UpdateCartItemHandler,
)
from storefront.domain.exceptions import EntityNotFoundError, ValidationError
from storefront.domain.model.cart import ShoppingCart
from tests.fakes import FakeCartRepository, FakeProductRepository, make_product


def _setup() -> tuple[FakeCartRepository, FakeProductRepository]:
    products = FakeProductRepository([
        make_product("1", "Widget", "15.00"),
        make_product("2", "Gadget", "25.00"),
        make_product("3", "Sold Out", "5.00", in_stock=False),
    ])
    return FakeCartRepository(), products


class TestAddToCart:

    def test_adds_and_returns_item_count(self):
        cart_repo, products = _setup()
        handler = AddToCartHandler(cart_repo, products)
        assert handler.handle("1") == 1
        assert handler.handle("1", 2) == 3
        assert handler.handle("2") == 4

    def test_state_survives_between_handlers(self):
        cart_repo, products = _setup()
        AddToCartHandler(cart_repo, products).handle("2", 2)
        assert ShoppingCart(cart_repo).is_in_cart("2")

    def test_unknown_product_rejected(self):
        cart_repo, products = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            AddToCartHandler(cart_repo, products).handle("404")

    def test_out_of_stock_rejected(self):
        cart_repo, products = _setup()
        with pytest.raises(ValidationError, match="out of stock"):
            AddToCartHandler(cart_repo, products).handle("3")
        assert cart_repo.stored == []

    def test_stock_change_after_adding_keeps_line(self):
        cart_repo, products = _setup()
        AddToCartHandler(cart_repo, products).handle("1")
        products.save(products.get_by_id("1").revise(in_stock=False))
        assert ShowCartHandler(cart_repo).handle().item_count == 1


class TestUpdateRemoveClear:

    def test_update_replaces_quantity(self):
        cart_repo, products = _setup()
        AddToCartHandler(cart_repo, products).handle("1", 4)
        assert UpdateCartItemHandler(cart_repo).handle("1", 2) == 2

    def test_update_to_zero_removes(self):
        cart_repo, products = _setup()
        AddToCartHandler(cart_repo, products).handle("1")
        assert UpdateCartItemHandler(cart_repo).handle("1", 0) == 0
        assert cart_repo.stored == []

    def test_remove_reports_whether_present(self):
        cart_repo, products = _setup()
        AddToCartHandler(cart_repo, products).handle("1")
        handler = RemoveFromCartHandler(cart_repo)
        assert handler.handle("1") is True
        assert handler.handle("1") is False

    def test_clear(self):
        cart_repo, products = _setup()
        AddToCartHandler(cart_repo, products).handle("1")
        AddToCartHandler(cart_repo, products).handle("2")
        ClearCartHandler(cart_repo).handle()
        assert ShowCartHandler(cart_repo).handle().lines == []


class TestShowCart:

    def test_lines_and_summary_below_free_shipping(self):
        cart_repo, products = _setup()
        AddToCartHandler(cart_repo, products).handle("1", 2)
        dto = ShowCartHandler(cart_repo).handle()

        assert dto.item_count == 2
        assert dto.lines[0].line_total == "$30.00"
        assert dto.summary.subtotal == "$30.00"
        assert dto.summary.shipping == "$9.99"
        assert dto.summary.tax == "$2.40"
        assert dto.summary.total == "$42.39"
        assert dto.summary.amount_to_free_shipping == "$20.00"

    def test_free_shipping(self):
        cart_repo, products = _setup()
        AddToCartHandler(cart_repo, products).handle("2", 2)
        dto = ShowCartHandler(cart_repo).handle()
        assert dto.summary.shipping == "Free"
        assert dto.summary.amount_to_free_shipping is None
        assert dto.summary.total == "$54.00"
