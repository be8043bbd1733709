"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in memory. No file I/O, no side effects.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.domain.model.cart import LineItem
from storefront.domain.model.order import Order
from storefront.domain.model.product import Category, Product
from storefront.domain.model.user import Role, User
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import SessionRepository, UserRepository


def make_product(
    id: str = "1",
    name: str = "Widget",
    price: str = "10.00",
    category: Category = Category.ELECTRONICS,
    **overrides,
) -> Product:
    """Build a product with sensible defaults for tests."""
    fields = dict(
        description=f"{name} for testing purposes",
        rating=Decimal("4.0"),
        review_count=10,
        in_stock=True,
        featured=False,
    )
    fields.update(overrides)
    return Product(id=id, name=name, price=Money.of(price), category=category, **fields)


SHOPPER = User(id="u1", name="John Doe", email="john@example.com")
OTHER_SHOPPER = User(id="u2", name="Jane Smith", email="jane@example.com")
ADMIN = User(id="a1", name="Admin User", email="admin@example.com", role=Role.ADMIN)


class FakeCartRepository(CartRepository):

    def __init__(self, items: list[LineItem] | None = None) -> None:
        self.stored: list[LineItem] = list(items or [])
        self.save_count = 0

    def load(self) -> list[LineItem]:
        return list(self.stored)

    def save(self, items: list[LineItem]) -> None:
        self.stored = list(items)
        self.save_count += 1


class FakeProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self._store[p.id] = p

    def get_by_id(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[product.id] = product

    def delete(self, product_id: str) -> bool:
        return self._store.pop(product_id, None) is not None


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[str, Order] = {}

    def get_by_id(self, order_id: str) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return list(self._store.values())

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = f"ORD-{len(self._store) + 1:03d}"
        self._store[order.id] = order


class FakeUserRepository(UserRepository):

    def __init__(self, users: list[User] | None = None) -> None:
        self._users = list(users or [])

    def get_by_email(self, email: str) -> User | None:
        for user in self._users:
            if user.email.lower() == email.lower():
                return user
        return None


class FakeSessionRepository(SessionRepository):

    def __init__(self, user: User | None = None) -> None:
        self._user = user

    def current_user(self) -> User | None:
        return self._user

    def start(self, user: User) -> None:
        self._user = user

    def end(self) -> None:
        self._user = None
