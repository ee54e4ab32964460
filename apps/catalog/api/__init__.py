from .serializers import (
    CategorySerializer,
    ProductListSerializer,
    ProductDetailSerializer,
)

__all__ = [
    'CategorySerializer',
    'ProductListSerializer',
    'ProductDetailSerializer',
]
