from .category import Category
from .supplier import Supplier
from .product import Product

__all__ = ["Category", "Supplier", "Product"]
