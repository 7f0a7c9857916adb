"""Product and order domain entities."""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Sequence, Tuple, Union


Amount = Union[Decimal, int, float, str]


def to_amount(value: Amount) -> Decimal:
    """Convert a monetary value to Decimal through its string form (9.99 -> Decimal('9.99'))."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


@dataclass(frozen=True)
class Product:
    """Domain entity representing a catalog product. Immutable once created."""

    name: str
    price: Decimal
    quantity: int

    def __post_init__(self):
        """Normalize price to Decimal (values are not validated)."""
        object.__setattr__(self, "price", to_amount(self.price))


@dataclass(frozen=True)
class Order:
    """Domain entity representing a placed order. Immutable once created."""

    customer_name: str
    products: Tuple[Product, ...] = field(default_factory=tuple)
    total_cost: Decimal = Decimal("0")

    def __post_init__(self):
        """Freeze the product sequence and normalize the total."""
        products: Sequence[Product] = self.products
        object.__setattr__(self, "products", tuple(products))
        object.__setattr__(self, "total_cost", to_amount(self.total_cost))
