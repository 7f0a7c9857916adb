"""Interface for order notifications (Strategy Pattern, Open/Closed).

This allows adding notification channels without touching the
order system:
- Email
- SMS
- Push notifications
- etc.
"""
from abc import ABC, abstractmethod

from solid_exercises.domain.entities.product import Order


class INotificationService(ABC):
    """Interface for sending order confirmations."""

    @abstractmethod
    def send_order_confirmation(self, order: Order) -> str:
        """
        Send a confirmation for a placed order.

        Args:
            order: Order to confirm

        Returns:
            The message that was dispatched
        """
        pass
