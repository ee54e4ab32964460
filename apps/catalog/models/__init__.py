"""
Catalog models for the affiliate storefront.

Model Hierarchy:
- Category: Hierarchical categories (Clothing > Shirts)
- Product: Item for sale, or the container of a variant family whose
  children carry flat variant attributes (Color, Size)
"""

from .category import Category
from .product import Product

__all__ = [
    'Category',
    'Product',
]
