from django_filters import rest_framework as filters
from apps.catalog.models import Category, Product


class ProductFilter(filters.FilterSet):
    """Filter for storefront product listings."""

    category = filters.CharFilter(method='filter_category')
    parent = filters.CharFilter(field_name='parent__slug')
    standalone = filters.BooleanFilter(method='filter_standalone')

    # Price filters
    min_price = filters.NumberFilter(field_name='price', lookup_expr='gte')
    max_price = filters.NumberFilter(field_name='price', lookup_expr='lte')

    class Meta:
        model = Product
        fields = ['category', 'parent', 'brand']

    def filter_category(self, queryset, name, value):
        """
        Filter by category slug, descendants included.
        Example: ?category=clothing also matches products in clothing > shirts
        """
        category = Category.objects.filter(slug=value).first()
        if not category:
            return queryset.none()
        ids = [category.id] + [c.id for c in category.get_descendants()]
        return queryset.filter(category_id__in=ids)

    def filter_standalone(self, queryset, name, value):
        if value is True:
            return queryset.filter(parent__isnull=True, variant_attributes__isnull=True)
        elif value is False:
            return queryset.filter(parent__isnull=False)
        return queryset
