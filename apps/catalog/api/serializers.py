from rest_framework import serializers
from apps.catalog.models import Category, Product
from apps.catalog.services import VariantNavigationService


# =============================================================================
# Category Serializers
# =============================================================================

class CategorySerializer(serializers.ModelSerializer):
    parent_slug = serializers.CharField(source='parent.slug', read_only=True, default=None)
    full_path = serializers.CharField(read_only=True)

    class Meta:
        model = Category
        fields = [
            'id', 'name', 'slug', 'parent', 'parent_slug', 'full_path',
            'description', 'display_order'
        ]


# =============================================================================
# Product Serializers
# =============================================================================

class ProductListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for product lists."""
    category_name = serializers.CharField(source='category.name', read_only=True, default=None)
    parent_slug = serializers.CharField(source='parent.slug', read_only=True, default=None)
    url = serializers.CharField(source='get_absolute_url', read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'title', 'slug', 'url', 'category', 'category_name',
            'brand', 'price', 'original_price', 'main_image',
            'amazon_url', 'parent_slug', 'variant_attributes'
        ]


class ProductDetailSerializer(serializers.ModelSerializer):
    """Full product detail, family members included."""
    category = CategorySerializer(read_only=True)
    parent_slug = serializers.CharField(source='parent.slug', read_only=True, default=None)
    images = serializers.ListField(source='image_pool', child=serializers.CharField(), read_only=True)
    siblings = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'title', 'slug', 'description', 'category',
            'brand', 'upc', 'published_at', 'price', 'original_price',
            'amazon_url', 'main_image', 'images', 'bullet_points',
            'show_buy_on_amazon', 'show_add_to_cart',
            'parent_slug', 'variant_attributes', 'siblings',
            'created_at', 'updated_at'
        ]

    def get_siblings(self, obj):
        if not obj.parent_id:
            return []
        return [
            {'id': s.id, 'slug': s.slug, 'title': s.title, 'variant_attributes': s.variant_attributes}
            for s in VariantNavigationService.get_siblings(obj).exclude(pk=obj.pk)
        ]
