"""
Create a demo variant family: one parent container and two children.
Run with: python manage.py create_demo_variants
"""

from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import Category, Product

DEMO_CHILDREN = [
    {
        'suffix': 'red',
        'title': 'Classic Cotton T-Shirt - Red',
        'description': '<p>A beautiful red t-shirt.</p>',
        'price': Decimal('19.99'),
        'amazon_url': 'https://amazon.com/dp/B00000RED',
        'main_image': 'https://placehold.co/600x600/red/white?text=Red+Shirt',
        'images': [
            'https://placehold.co/600x600/red/white?text=Red+Front',
            'https://placehold.co/600x600/red/white?text=Red+Back',
        ],
        'bullet_points': ['100% Cotton', 'Bright Red Color'],
        'variant_attributes': {'Color': 'Red', 'Size': 'L'},
    },
    {
        'suffix': 'blue',
        'title': 'Classic Cotton T-Shirt - Blue',
        'description': '<p>A cool blue t-shirt.</p>',
        'price': Decimal('21.99'),
        'amazon_url': 'https://amazon.com/dp/B00000BLUE',
        'main_image': 'https://placehold.co/600x600/blue/white?text=Blue+Shirt',
        'images': [
            'https://placehold.co/600x600/blue/white?text=Blue+Front',
            'https://placehold.co/600x600/blue/white?text=Blue+Back',
        ],
        'bullet_points': ['100% Cotton', 'Deep Blue Color'],
        'variant_attributes': {'Color': 'Blue', 'Size': 'L'},
    },
]


class Command(BaseCommand):
    help = "Create an Amazon-style variant family (parent container plus Red/Blue children)."

    def add_arguments(self, parser):
        parser.add_argument("--slug", default="classic-cotton-t-shirt", help="Base slug for the family")
        parser.add_argument("--dry-run", action="store_true", help="Only show what would be created")

    @transaction.atomic
    def handle(self, *args, **opts):
        base_slug = opts["slug"]

        if opts["dry_run"]:
            self.stdout.write(f"Parent: {base_slug}-family")
            for child in DEMO_CHILDREN:
                self.stdout.write(f"  Child: {base_slug}-{child['suffix']} {child['variant_attributes']}")
            self.stdout.write("DRY-RUN: nothing was created.")
            return

        category = Category.objects.first()
        if not category:
            category = Category.objects.create(
                name='Clothing',
                slug='clothing',
                description='Apparel and more'
            )

        parent, created = Product.objects.get_or_create(
            slug=f'{base_slug}-family',
            defaults={
                'title': 'Classic Cotton T-Shirt (Parent)',
                'description': '<p>This is the parent product container.</p>',
                'amazon_url': '#',
                'category': category,
                'show_buy_on_amazon': False,
                'show_add_to_cart': False,
            }
        )
        self.stdout.write(f"{'Created' if created else 'Found'} parent: {parent.slug}")

        for data in DEMO_CHILDREN:
            data = dict(data)
            suffix = data.pop('suffix')
            child, created = Product.objects.get_or_create(
                slug=f'{base_slug}-{suffix}',
                defaults={**data, 'category': category, 'parent': parent}
            )
            self.stdout.write(f"{'Created' if created else 'Found'} child: {child.slug}")

        self.stdout.write(self.style.SUCCESS(f"Visit /products/{parent.slug}/"))
