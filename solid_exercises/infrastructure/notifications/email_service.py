"""Email notification service (Strategy Pattern)."""
import logging

from solid_exercises.domain.entities.product import Order
from solid_exercises.domain.interfaces.notification_service import INotificationService


class EmailService(INotificationService):
    """
    Sends order confirmations by email.

    Delivery is a stub: the formatted message is logged and returned.
    """

    def __init__(self):
        self._logger = logging.getLogger(__name__)

    @staticmethod
    def format_order_confirmation(order: Order) -> str:
        """
        Build the human-readable confirmation for an order.

        Args:
            order: Order to summarize

        Returns:
            Message with customer, total cost and one line per product
        """
        message = f"Order confirmation for {order.customer_name}:\n"
        message += f"Total Cost: ${order.total_cost}\n"
        message += "Products:\n"
        for product in order.products:
            message += f"- {product.name} (${product.price})\n"
        return message

    def send_order_confirmation(self, order: Order) -> str:
        message = self.format_order_confirmation(order)
        # Send email
        self._logger.info(message)
        return message
