"""Domain entities - core business objects."""
from solid_exercises.domain.entities.product import Product, Order, to_amount

__all__ = [
    "Product",
    "Order",
    "to_amount",
]
