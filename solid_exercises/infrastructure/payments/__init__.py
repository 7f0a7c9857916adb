"""Payment processors - IPaymentProcessor variants."""

from solid_exercises.infrastructure.payments.credit_card import CreditCardPaymentProcessor
from solid_exercises.infrastructure.payments.paypal import PayPalPaymentProcessor

__all__ = [
    "CreditCardPaymentProcessor",
    "PayPalPaymentProcessor",
]
