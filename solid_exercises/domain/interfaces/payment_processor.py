"""Interface for payment processors (Strategy Pattern, Open/Closed).

New payment methods are added as new implementations:
- Credit card
- PayPal
- Bank transfer
- etc.
"""
from abc import ABC, abstractmethod

from solid_exercises.domain.entities.product import Amount


class IPaymentProcessor(ABC):
    """
    Interface for payment processors following Strategy Pattern.

    Implementations can be swapped without changing the order system.
    """

    @abstractmethod
    def process_payment(self, amount: Amount) -> str:
        """
        Process a payment.

        Args:
            amount: Amount to charge

        Returns:
            Report of the action taken
        """
        pass
