from django.contrib import admin
from django.utils.html import format_html
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from adminsortable2.admin import SortableAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from .models import Category, Product


# =============================================================================
# Import/Export Resources
# =============================================================================

class ProductResource(resources.ModelResource):
    """Resource for importing/exporting products, family links included."""

    category_slug = fields.Field(
        column_name='category',
        attribute='category',
        widget=ForeignKeyWidget(Category, 'slug')
    )
    parent_slug = fields.Field(
        column_name='parent',
        attribute='parent',
        widget=ForeignKeyWidget(Product, 'slug')
    )

    class Meta:
        model = Product
        import_id_fields = ['slug']
        fields = (
            'slug', 'title', 'category_slug', 'parent_slug', 'variant_attributes',
            'brand', 'upc', 'price', 'original_price', 'amazon_url',
            'main_image', 'images', 'bullet_points', 'is_active'
        )
        export_order = fields


# =============================================================================
# Inlines
# =============================================================================

class ChildProductInline(admin.TabularInline):
    model = Product
    fk_name = 'parent'
    extra = 0
    fields = ['title', 'slug', 'variant_attributes', 'amazon_url', 'is_active']
    readonly_fields = ['title', 'slug']
    show_change_link = True
    can_delete = False
    verbose_name = 'Variant'
    verbose_name_plural = 'Variants'

    def has_add_permission(self, request, obj=None):
        return False


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Product)
class ProductAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = ProductResource
    list_display = [
        'title', 'slug', 'parent', 'variant_summary', 'price',
        'is_active', 'main_image_preview', 'created_at'
    ]
    list_filter = ['is_active', 'category', 'created_at']
    search_fields = ['title', 'slug', 'brand', 'upc']
    prepopulated_fields = {'slug': ('title',)}
    autocomplete_fields = ['parent']
    readonly_fields = ['created_at', 'updated_at']
    inlines = [ChildProductInline]
    list_per_page = 50

    fieldsets = (
        (None, {
            'fields': ('title', 'slug', 'category', 'brand', 'upc', 'description', 'is_active')
        }),
        ('Pricing & links', {
            'fields': ('price', 'original_price', 'amazon_url', 'show_buy_on_amazon', 'show_add_to_cart')
        }),
        ('Media', {
            'fields': ('main_image', 'images', 'bullet_points', 'published_at')
        }),
        ('Variant family', {
            'fields': ('parent', 'variant_attributes'),
            'description': 'Children of the same parent form one family; '
                           'their attributes become the option selectors.'
        }),
        ('Standalone options', {
            'fields': ('variant_groups', 'variant_option_links', 'variant_image_map', 'variant_option_images'),
            'classes': ('collapse',)
        }),
        ('Information', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['activate_products', 'deactivate_products']

    def variant_summary(self, obj):
        attrs = obj.variant_attributes
        if isinstance(attrs, dict) and attrs:
            return ' / '.join(f'{k}: {v}' for k, v in attrs.items())
        return '-'
    variant_summary.short_description = 'Attributes'

    def main_image_preview(self, obj):
        if obj.main_image:
            return format_html(
                '<img src="{}" style="max-height: 40px; max-width: 60px;" />',
                obj.main_image
            )
        return '-'
    main_image_preview.short_description = 'Image'

    @admin.action(description='Activate selected products')
    def activate_products(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'{count} products activated.')

    @admin.action(description='Deactivate selected products')
    def deactivate_products(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f'{count} products deactivated.')


@admin.register(Category)
class CategoryAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'slug', 'parent', 'product_count', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}

    def product_count(self, obj):
        return obj.products.count()
    product_count.short_description = 'Products'


# =============================================================================
# Admin Site Configuration
# =============================================================================

admin.site.site_header = 'Storefront Admin'
admin.site.site_title = 'Storefront'
admin.site.index_title = 'Administration'
