import logging

import pytest
from solid_exercises import configure_logging, create_system
from solid_exercises.config.settings import TestingConfig
from solid_exercises.infrastructure.payments import (
    CreditCardPaymentProcessor,
    PayPalPaymentProcessor,
)
from solid_exercises.infrastructure.service_container import ServiceContainer


class InvalidConfig(TestingConfig):
    NOTIFICATION_CHANNEL = "fax"


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_create_system_returns_configured_container():
    container = create_system(TestingConfig)

    assert isinstance(container, ServiceContainer)
    assert container.config is TestingConfig


def test_create_system_end_to_end():
    container = create_system(TestingConfig)
    system = container.get_ecommerce_system()

    widget = system.add_product("Widget", 9.99, 3)
    order = system.checkout("Alice", [widget], 9.99)

    assert container.get_order_manager().list_orders() == [order]


def test_create_system_rejects_invalid_config():
    with pytest.raises(ValueError, match="NOTIFICATION_CHANNEL='fax'"):
        create_system(InvalidConfig)


def test_configure_logging_debug_level():
    class DebugConfig(TestingConfig):
        DEBUG = True

    configure_logging(DebugConfig)

    assert logging.getLogger().level == logging.DEBUG


def test_configure_logging_uses_log_level():
    class QuietConfig(TestingConfig):
        DEBUG = False
        LOG_LEVEL = "WARNING"

    configure_logging(QuietConfig)

    assert logging.getLogger().level == logging.WARNING


def test_create_system_again_rebuilds_components_for_new_config():
    class PayPalConfig(TestingConfig):
        PAYMENT_METHOD = "paypal"

    first = create_system(TestingConfig).get_ecommerce_system()
    assert isinstance(first.payment_processor, CreditCardPaymentProcessor)

    container = create_system(PayPalConfig)
    second = container.get_ecommerce_system()

    assert container.config is PayPalConfig
    assert second is not first
    assert isinstance(second.payment_processor, PayPalPaymentProcessor)
