from rest_framework import viewsets, filters
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from apps.catalog.models import Category, Product
from apps.catalog.services import VariantNavigationService
from .serializers import (
    CategorySerializer,
    ProductListSerializer,
    ProductDetailSerializer,
)
from .filters import ProductFilter


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for storefront products.

    list: List active products
    retrieve: Get product detail with its family members
    variants: Get the option groups and lookup tables for a product page
    """
    queryset = Product.objects.filter(is_active=True).select_related('category', 'parent')
    lookup_field = 'slug'
    filterset_class = ProductFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['title', 'brand', 'description']
    ordering_fields = ['title', 'price', 'created_at', 'published_at']
    ordering = ['title']

    def get_serializer_class(self):
        if self.action == 'list':
            return ProductListSerializer
        return ProductDetailSerializer

    @action(detail=True, methods=['get'])
    def variants(self, request, slug=None):
        """
        Get variant navigation data for this product.
        Family containers answer with their first child's data.
        """
        product = self.get_object()
        target = VariantNavigationService.get_redirect_target(product)
        if target:
            product = target
        context = VariantNavigationService.build_page_context(product)
        data = context.to_dict()
        data['product_slug'] = product.slug
        return Response(data)


class CategoryViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for categories.
    """
    queryset = Category.objects.filter(is_active=True).select_related('parent')
    serializer_class = CategorySerializer
    lookup_field = 'slug'
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name']
    ordering = ['display_order', 'name']
