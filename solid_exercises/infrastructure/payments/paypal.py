"""PayPal payment processor (Strategy Pattern)."""
import logging

from solid_exercises.domain.entities.product import Amount, to_amount
from solid_exercises.domain.interfaces.payment_processor import IPaymentProcessor


logger = logging.getLogger(__name__)


class PayPalPaymentProcessor(IPaymentProcessor):
    """Processes payments through a PayPal wallet. No real transaction takes place."""

    def process_payment(self, amount: Amount) -> str:
        report = f"Processing PayPal payment of ${to_amount(amount)}"
        logger.info(report)
        return report
