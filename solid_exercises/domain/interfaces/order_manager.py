"""Interface for order tracking (Single Responsibility)."""
from abc import ABC, abstractmethod
from typing import List, Sequence

from solid_exercises.domain.entities.product import Amount, Order, Product


class IOrderManager(ABC):
    """Interface for components that own placed orders."""

    @abstractmethod
    def place_order(
        self,
        customer_name: str,
        ordered_products: Sequence[Product],
        total_cost: Amount
    ) -> Order:
        """
        Create and record an order.

        Args:
            customer_name: Name of the ordering customer
            ordered_products: Products in the order
            total_cost: Total cost of the order (not checked against prices)

        Returns:
            The recorded order
        """
        pass

    @abstractmethod
    def list_orders(self) -> List[Order]:
        """Get all orders in placement order."""
        pass
