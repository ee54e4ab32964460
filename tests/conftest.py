from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.catalog.models import Category, Product


@pytest.fixture
def category():
    return Category.objects.create(name='Clothing', slug='clothing')


@pytest.fixture
def family(category):
    """Parent container with Red/L and Blue/L children."""
    parent = Product.objects.create(
        title='Classic Cotton T-Shirt (Parent)',
        slug='shirt-family',
        amazon_url='#',
        category=category,
        show_buy_on_amazon=False,
        show_add_to_cart=False,
    )
    red = Product.objects.create(
        title='Classic Cotton T-Shirt - Red',
        slug='shirt-red',
        category=category,
        price=Decimal('19.99'),
        amazon_url='https://amazon.com/dp/RED',
        main_image='https://cdn.example.com/red-main.jpg',
        images=['https://cdn.example.com/red-front.jpg', 'https://cdn.example.com/red-back.jpg'],
        parent=parent,
        variant_attributes={'Color': 'Red', 'Size': 'L'},
    )
    blue = Product.objects.create(
        title='Classic Cotton T-Shirt - Blue',
        slug='shirt-blue',
        category=category,
        price=Decimal('21.99'),
        amazon_url='https://amazon.com/dp/BLUE',
        main_image='https://cdn.example.com/blue-main.jpg',
        parent=parent,
        variant_attributes={'Color': 'Blue', 'Size': 'L'},
    )
    return {'parent': parent, 'red': red, 'blue': blue}


@pytest.fixture
def standalone(category):
    """Product outside any family, using its own per-option links."""
    return Product.objects.create(
        title='Canvas Tote',
        slug='canvas-tote',
        category=category,
        price=Decimal('12.00'),
        amazon_url='https://amazon.com/dp/TOTE',
        images=['https://cdn.example.com/tote-natural.jpg', 'https://cdn.example.com/tote-black.jpg'],
        variant_groups=[{'name': 'Color', 'options': ['Natural', 'Black']}],
        variant_option_links={'Color': {'Black': 'https://amazon.com/dp/TOTE-BLACK'}},
        variant_image_map={'Color': {'Natural': 0}},
        variant_option_images={'Color': {'Black': 'uploads/tote-black-thumb.jpg'}},
    )


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def staff_client(admin_user):
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client
