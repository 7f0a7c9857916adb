"""Application services - single-purpose components."""

from solid_exercises.application.services.product_manager import ProductManager
from solid_exercises.application.services.order_manager import OrderManager
from solid_exercises.application.services.file_processor import FileProcessor

__all__ = [
    "ProductManager",
    "OrderManager",
    "FileProcessor",
]
