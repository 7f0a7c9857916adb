"""Product catalog service (Single Responsibility)."""
import logging
from typing import List

from solid_exercises.domain.entities.product import Amount, Product
from solid_exercises.domain.interfaces.product_manager import IProductManager


class ProductManager(IProductManager):
    """Owns the in-memory product catalog. No duplicate detection, no removal."""

    def __init__(self):
        self._products: List[Product] = []
        self._logger = logging.getLogger(__name__)

    def add_product(self, name: str, price: Amount, quantity: int) -> Product:
        product = Product(name=name, price=price, quantity=quantity)
        self._products.append(product)
        self._logger.info(f"Added product '{name}' (${product.price} x {quantity})")
        return product

    def list_products(self) -> List[Product]:
        return self._products.copy()
