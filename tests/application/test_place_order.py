"""Integration tests for checkout and order history."""

import pytest

from storefront.application.list_orders import ListOrdersHandler
from storefront.application.place_order import PlaceOrderHandler
from storefront.domain.exceptions import AuthenticationRequiredError, ValidationError
from storefront.domain.model.cart import ShoppingCart
from storefront.domain.model.order import ShippingAddress
from storefront.domain.model.value_objects import Money
from tests.fakes import (
    ADMIN,
    OTHER_SHOPPER,
    SHOPPER,
    FakeCartRepository,
    FakeOrderRepository,
    FakeProductRepository,
    make_product,
)

ADDRESS = ShippingAddress(street="123 Main St", city="Springfield", state="IL", zip_code="62701")


def _setup() -> tuple[PlaceOrderHandler, FakeOrderRepository, FakeCartRepository, FakeProductRepository]:
    products = FakeProductRepository([
        make_product("1", "Widget", "15.00"),
        make_product("2", "Gadget", "25.00"),
    ])
    order_repo = FakeOrderRepository()
    cart_repo = FakeCartRepository()
    return PlaceOrderHandler(order_repo, cart_repo), order_repo, cart_repo, products


def _fill_cart(cart_repo: FakeCartRepository, products: FakeProductRepository) -> None:
    cart = ShoppingCart(cart_repo)
    cart.add_item(products.get_by_id("1"), 2)
    cart.add_item(products.get_by_id("2"), 1)


class TestPlaceOrder:

    def test_totals_match_cart_summary(self):
        handler, _, cart_repo, products = _setup()
        _fill_cart(cart_repo, products)
        dto = handler.handle(SHOPPER, ADDRESS)
        assert dto.id == "ORD-001"
        assert dto.user_id == "u1"
        assert dto.status == "pending"
        assert dto.subtotal == "$55.00"
        assert dto.shipping == "$0.00"
        assert dto.tax == "$4.40"
        assert dto.total == "$59.40"
        assert dto.ship_to == "Springfield, IL"

    def test_clears_cart(self):
        handler, _, cart_repo, products = _setup()
        _fill_cart(cart_repo, products)
        handler.handle(SHOPPER, ADDRESS)
        assert ShoppingCart(cart_repo).is_empty

    def test_price_snapshot_at_checkout(self):
        handler, order_repo, cart_repo, products = _setup()
        _fill_cart(cart_repo, products)
        dto = handler.handle(SHOPPER, ADDRESS)

        products.save(products.get_by_id("1").revise(price=Money.of("99.99")))

        saved = order_repo.get_by_id(dto.id)
        assert saved.items[0].unit_price == Money.of("15.00")

    def test_requires_login(self):
        handler, _, cart_repo, products = _setup()
        _fill_cart(cart_repo, products)
        with pytest.raises(AuthenticationRequiredError):
            handler.handle(None, ADDRESS)
        assert not ShoppingCart(cart_repo).is_empty

    def test_empty_cart_rejected(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError, match="cart is empty"):
            handler.handle(SHOPPER, ADDRESS)


class TestListOrders:

    def test_users_see_only_their_orders(self):
        handler, order_repo, cart_repo, products = _setup()
        _fill_cart(cart_repo, products)
        handler.handle(SHOPPER, ADDRESS)
        _fill_cart(cart_repo, products)
        handler.handle(OTHER_SHOPPER, ADDRESS)

        mine = ListOrdersHandler(order_repo).handle(SHOPPER)
        assert [o.user_id for o in mine] == ["u1"]

    def test_admin_sees_all_orders(self):
        handler, order_repo, cart_repo, products = _setup()
        _fill_cart(cart_repo, products)
        handler.handle(SHOPPER, ADDRESS)
        _fill_cart(cart_repo, products)
        handler.handle(OTHER_SHOPPER, ADDRESS)

        assert len(ListOrdersHandler(order_repo).handle(ADMIN)) == 2

    def test_requires_login(self):
        with pytest.raises(AuthenticationRequiredError):
            ListOrdersHandler(FakeOrderRepository()).handle(None)
