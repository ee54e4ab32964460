from decimal import Decimal

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.urls import reverse
from django.utils.text import slugify
from simple_history.models import HistoricalRecords


class Product(models.Model):
    """
    An item for sale, or the container of a variant family.

    Family members point at their container through ``parent`` and carry a
    flat ``variant_attributes`` mapping (e.g. {"Color": "Red", "Size": "L"}).
    The container holds no attributes and is never shown directly.
    """
    title = models.CharField(
        max_length=255,
        verbose_name='Title'
    )
    slug = models.SlugField(
        max_length=255,
        unique=True,
        blank=True,
        verbose_name='Slug'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Description',
        help_text='HTML allowed'
    )
    category = models.ForeignKey(
        'catalog.Category',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Category'
    )
    brand = models.CharField(
        max_length=120,
        blank=True,
        verbose_name='Brand'
    )
    upc = models.CharField(
        max_length=64,
        blank=True,
        verbose_name='UPC'
    )

    # Pricing
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Price'
    )
    original_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Original price',
        help_text='Shown struck through next to the price'
    )

    # Affiliate link; containers usually carry "#"
    amazon_url = models.CharField(
        max_length=1000,
        blank=True,
        verbose_name='Amazon URL'
    )

    # Media, stored as URLs
    main_image = models.CharField(
        max_length=1000,
        blank=True,
        verbose_name='Main image'
    )
    images = models.JSONField(
        default=list,
        blank=True,
        verbose_name='Images',
        help_text='JSON list of image URLs'
    )
    bullet_points = models.JSONField(
        default=list,
        blank=True,
        verbose_name='Bullet points'
    )

    published_at = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Date first available'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Active'
    )
    show_buy_on_amazon = models.BooleanField(
        default=True,
        verbose_name='Show "Buy on Amazon"'
    )
    show_add_to_cart = models.BooleanField(
        default=True,
        verbose_name='Show "Add to cart"'
    )

    # Variant family
    parent = models.ForeignKey(
        'self',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='children',
        verbose_name='Parent product'
    )
    variant_attributes = models.JSONField(
        null=True,
        blank=True,
        verbose_name='Variant attributes',
        help_text='JSON object, e.g. {"Color": "Red", "Size": "L"}'
    )

    # Per-product variant data for items outside a family
    variant_groups = models.JSONField(
        null=True,
        blank=True,
        verbose_name='Variant groups',
        help_text='JSON list of {"name": ..., "options": [...]}'
    )
    variant_option_links = models.JSONField(
        null=True,
        blank=True,
        verbose_name='Option links',
        help_text='JSON {group: {option: url}}'
    )
    variant_image_map = models.JSONField(
        null=True,
        blank=True,
        verbose_name='Option image indexes',
        help_text='JSON {group: {option: image index}}'
    )
    variant_option_images = models.JSONField(
        null=True,
        blank=True,
        verbose_name='Option thumbnails',
        help_text='JSON {group: {option: thumbnail url}}'
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )

    history = HistoricalRecords()

    class Meta:
        ordering = ['title']
        verbose_name = 'Product'
        verbose_name_plural = 'Products'

    def __str__(self):
        return self.title

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = self._unique_slug()
        super().save(*args, **kwargs)

    def _unique_slug(self):
        base_slug = slugify(self.title)[:240] or 'product'
        slug = base_slug
        counter = 1
        while Product.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f"{base_slug}-{counter}"
            counter += 1
        return slug

    def get_absolute_url(self):
        return reverse('catalog:product_detail', kwargs={'slug': self.slug})

    def clean(self):
        errors = {}

        attrs = self.variant_attributes
        if attrs is not None:
            if not isinstance(attrs, dict):
                errors['variant_attributes'] = 'Variant attributes must be a JSON object.'
            elif any(
                not isinstance(k, str) or not k.strip() or not isinstance(v, str) or not v.strip()
                for k, v in attrs.items()
            ):
                errors['variant_attributes'] = 'Every attribute needs a non-empty name and a text value.'

        if self.parent_id:
            if self.pk and self.parent_id == self.pk:
                errors['parent'] = 'A product cannot be its own parent.'
            elif self.parent.parent_id:
                errors['parent'] = 'Variant families are one level deep; pick a top-level product.'
            elif self.pk and self.children.exists():
                errors['parent'] = 'This product already has variants and cannot join another family.'
            elif isinstance(attrs, dict) and attrs and 'variant_attributes' not in errors:
                siblings = Product.objects.filter(parent_id=self.parent_id).exclude(pk=self.pk)
                duplicate = next(
                    (s for s in siblings.only('title', 'variant_attributes') if s.variant_attributes == attrs),
                    None
                )
                if duplicate:
                    errors['variant_attributes'] = (
                        f'"{duplicate.title}" already has these attributes in this family.'
                    )

        if self.pk and attrs and self.children.exists():
            errors['variant_attributes'] = 'A parent product cannot hold variant attributes.'

        if errors:
            raise ValidationError(errors)

    @property
    def is_family_parent(self):
        return self.parent_id is None and self.children.filter(is_active=True).exists()

    @property
    def image_pool(self):
        """Gallery images, falling back to the main image."""
        images = self.images if isinstance(self.images, list) and self.images else [self.main_image]
        return [src for src in images if isinstance(src, str) and src]
