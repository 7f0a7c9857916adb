"""E-commerce coordinator (Single Responsibility, Open/Closed).

ECommerceSystem holds one collaborator per responsibility and only
delegates to them. New payment methods or notification channels are
added as new implementations supplied at construction time; this
class never changes for them.
"""
import logging
from typing import Sequence

from solid_exercises.domain.entities.product import Amount, Order, Product
from solid_exercises.domain.interfaces.product_manager import IProductManager
from solid_exercises.domain.interfaces.order_manager import IOrderManager
from solid_exercises.domain.interfaces.payment_processor import IPaymentProcessor
from solid_exercises.domain.interfaces.notification_service import INotificationService


logger = logging.getLogger(__name__)


class ECommerceSystem:
    """Coordinates catalog, orders, payments and notifications by delegation."""

    def __init__(
        self,
        product_manager: IProductManager,
        order_manager: IOrderManager,
        payment_processor: IPaymentProcessor,
        notification_service: INotificationService
    ):
        """
        Initialize coordinator with dependencies (Dependency Injection).

        Args:
            product_manager: Catalog component
            order_manager: Order tracking component
            payment_processor: Payment variant chosen by the caller
            notification_service: Notification variant chosen by the caller
        """
        self._product_manager = product_manager
        self._order_manager = order_manager
        self._payment_processor = payment_processor
        self._notification_service = notification_service

    @property
    def product_manager(self) -> IProductManager:
        return self._product_manager

    @property
    def order_manager(self) -> IOrderManager:
        return self._order_manager

    @property
    def payment_processor(self) -> IPaymentProcessor:
        return self._payment_processor

    @property
    def notification_service(self) -> INotificationService:
        return self._notification_service

    def add_product(self, name: str, price: Amount, quantity: int) -> Product:
        return self._product_manager.add_product(name, price, quantity)

    def place_order(
        self,
        customer_name: str,
        ordered_products: Sequence[Product],
        total_cost: Amount
    ) -> Order:
        return self._order_manager.place_order(customer_name, ordered_products, total_cost)

    def process_payment(self, amount: Amount) -> str:
        return self._payment_processor.process_payment(amount)

    def send_order_confirmation(self, order: Order) -> str:
        return self._notification_service.send_order_confirmation(order)

    def checkout(
        self,
        customer_name: str,
        ordered_products: Sequence[Product],
        total_cost: Amount
    ) -> Order:
        """
        Place an order, pay its total and send the confirmation.

        Args:
            customer_name: Name of the ordering customer
            ordered_products: Products in the order
            total_cost: Total cost of the order

        Returns:
            The placed order
        """
        order = self.place_order(customer_name, ordered_products, total_cost)
        self.process_payment(order.total_cost)
        self.send_order_confirmation(order)
        logger.info(f"Checkout completed for {customer_name}")
        return order
