from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest
from solid_exercises.domain.entities import Order, Product, to_amount


def test_to_amount_goes_through_string_form():
    assert to_amount(9.99) == Decimal("9.99")
    assert to_amount(3) == Decimal("3")
    assert to_amount("12.50") == Decimal("12.50")


def test_to_amount_keeps_decimal_instance():
    value = Decimal("1.10")
    assert to_amount(value) is value


def test_product_normalizes_price():
    product = Product(name="Widget", price=9.99, quantity=3)

    assert product.price == Decimal("9.99")
    assert product.quantity == 3


def test_product_values_are_not_validated():
    product = Product(name="", price=-1, quantity=-5)

    assert product.price == Decimal("-1")
    assert product.quantity == -5


def test_order_freezes_product_sequence():
    widget = Product(name="Widget", price="9.99", quantity=1)
    products = [widget]

    order = Order(customer_name="Alice", products=products, total_cost=9.99)
    products.append(Product(name="Gadget", price=1, quantity=1))

    assert order.products == (widget,)
    assert order.total_cost == Decimal("9.99")


def test_order_is_immutable():
    order = Order(customer_name="Alice", products=[], total_cost=0)

    with pytest.raises(FrozenInstanceError):
        order.customer_name = "Bob"


def test_product_is_immutable_and_hashable():
    product = Product(name="Widget", price=9.99, quantity=1)

    with pytest.raises(FrozenInstanceError):
        product.price = Decimal("0")

    assert hash(product) == hash(Product(name="Widget", price="9.99", quantity=1))


def test_order_is_hashable():
    order = Order(customer_name="Alice", products=[Product(name="Widget", price=1, quantity=1)], total_cost=1)

    assert order in {order}
