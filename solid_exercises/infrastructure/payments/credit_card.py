"""Credit card payment processor (Strategy Pattern)."""
import logging

from solid_exercises.domain.entities.product import Amount, to_amount
from solid_exercises.domain.interfaces.payment_processor import IPaymentProcessor


logger = logging.getLogger(__name__)


class CreditCardPaymentProcessor(IPaymentProcessor):
    """Processes payments by credit card. No real transaction takes place."""

    def process_payment(self, amount: Amount) -> str:
        report = f"Processing credit card payment of ${to_amount(amount)}"
        logger.info(report)
        return report
