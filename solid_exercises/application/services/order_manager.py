"""Order tracking service (Single Responsibility)."""
import logging
from typing import List, Sequence

from solid_exercises.domain.entities.product import Amount, Order, Product
from solid_exercises.domain.interfaces.order_manager import IOrderManager


class OrderManager(IOrderManager):
    """
    Owns the in-memory list of placed orders.

    The total cost is recorded as given; it is not checked
    against the product prices.
    """

    def __init__(self):
        self._orders: List[Order] = []
        self._logger = logging.getLogger(__name__)

    def place_order(
        self,
        customer_name: str,
        ordered_products: Sequence[Product],
        total_cost: Amount
    ) -> Order:
        order = Order(
            customer_name=customer_name,
            products=tuple(ordered_products),
            total_cost=total_cost
        )
        self._orders.append(order)
        self._logger.info(
            f"Placed order for {customer_name}: "
            f"{len(order.products)} product(s), total ${order.total_cost}"
        )
        return order

    def list_orders(self) -> List[Order]:
        return self._orders.copy()
