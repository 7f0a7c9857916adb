"""Interface for product catalog management (Single Responsibility)."""
from abc import ABC, abstractmethod
from typing import List

from solid_exercises.domain.entities.product import Amount, Product


class IProductManager(ABC):
    """Interface for components that own the product catalog."""

    @abstractmethod
    def add_product(self, name: str, price: Amount, quantity: int) -> Product:
        """
        Add a product to the catalog.

        Args:
            name: Product name
            price: Unit price
            quantity: Units in stock

        Returns:
            The created product
        """
        pass

    @abstractmethod
    def list_products(self) -> List[Product]:
        """Get all products in insertion order."""
        pass
