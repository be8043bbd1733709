"""Application service: List Orders use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.domain.exceptions import AuthenticationRequiredError
from storefront.domain.model.user import User
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, user: User | None) -> list[OrderDTO]:
        """Return the user's orders, newest first.  Admins see every order."""
        if user is None:
            raise AuthenticationRequiredError("Please log in to see your orders")

        orders = [
            order
            for order in self._order_repo.list_all()
            if user.is_admin or order.user_id == user.id
        ]
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return [OrderDTO.from_order(order) for order in orders]
