# Generated manually

from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import simple_history.models
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Category',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('slug', models.SlugField(max_length=200, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Display order')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name='children', to='catalog.category', verbose_name='Parent category')),
            ],
            options={
                'verbose_name': 'Category',
                'verbose_name_plural': 'Categories',
                'ordering': ['display_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('title', models.CharField(max_length=255, verbose_name='Title')),
                ('slug', models.SlugField(blank=True, max_length=255, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, help_text='HTML allowed', verbose_name='Description')),
                ('brand', models.CharField(blank=True, max_length=120, verbose_name='Brand')),
                ('upc', models.CharField(blank=True, max_length=64, verbose_name='UPC')),
                ('price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Price')),
                ('original_price', models.DecimalField(blank=True, decimal_places=2, help_text='Shown struck through next to the price', max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Original price')),
                ('amazon_url', models.CharField(blank=True, max_length=1000, verbose_name='Amazon URL')),
                ('main_image', models.CharField(blank=True, max_length=1000, verbose_name='Main image')),
                ('images', models.JSONField(blank=True, default=list, help_text='JSON list of image URLs', verbose_name='Images')),
                ('bullet_points', models.JSONField(blank=True, default=list, verbose_name='Bullet points')),
                ('published_at', models.DateTimeField(blank=True, null=True, verbose_name='Date first available')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
                ('show_buy_on_amazon', models.BooleanField(default=True, verbose_name='Show "Buy on Amazon"')),
                ('show_add_to_cart', models.BooleanField(default=True, verbose_name='Show "Add to cart"')),
                ('variant_attributes', models.JSONField(blank=True, help_text='JSON object, e.g. {"Color": "Red", "Size": "L"}', null=True, verbose_name='Variant attributes')),
                ('variant_groups', models.JSONField(blank=True, help_text='JSON list of {"name": ..., "options": [...]}', null=True, verbose_name='Variant groups')),
                ('variant_option_links', models.JSONField(blank=True, help_text='JSON {group: {option: url}}', null=True, verbose_name='Option links')),
                ('variant_image_map', models.JSONField(blank=True, help_text='JSON {group: {option: image index}}', null=True, verbose_name='Option image indexes')),
                ('variant_option_images', models.JSONField(blank=True, help_text='JSON {group: {option: thumbnail url}}', null=True, verbose_name='Option thumbnails')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='products', to='catalog.category', verbose_name='Category')),
                ('parent', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='children', to='catalog.product', verbose_name='Parent product')),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'ordering': ['title'],
            },
        ),
        migrations.CreateModel(
            name='HistoricalProduct',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('title', models.CharField(max_length=255, verbose_name='Title')),
                ('slug', models.SlugField(blank=True, max_length=255, verbose_name='Slug')),
                ('description', models.TextField(blank=True, help_text='HTML allowed', verbose_name='Description')),
                ('brand', models.CharField(blank=True, max_length=120, verbose_name='Brand')),
                ('upc', models.CharField(blank=True, max_length=64, verbose_name='UPC')),
                ('price', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Price')),
                ('original_price', models.DecimalField(blank=True, decimal_places=2, help_text='Shown struck through next to the price', max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Original price')),
                ('amazon_url', models.CharField(blank=True, max_length=1000, verbose_name='Amazon URL')),
                ('main_image', models.CharField(blank=True, max_length=1000, verbose_name='Main image')),
                ('images', models.JSONField(blank=True, default=list, help_text='JSON list of image URLs', verbose_name='Images')),
                ('bullet_points', models.JSONField(blank=True, default=list, verbose_name='Bullet points')),
                ('published_at', models.DateTimeField(blank=True, null=True, verbose_name='Date first available')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
                ('show_buy_on_amazon', models.BooleanField(default=True, verbose_name='Show "Buy on Amazon"')),
                ('show_add_to_cart', models.BooleanField(default=True, verbose_name='Show "Add to cart"')),
                ('variant_attributes', models.JSONField(blank=True, help_text='JSON object, e.g. {"Color": "Red", "Size": "L"}', null=True, verbose_name='Variant attributes')),
                ('variant_groups', models.JSONField(blank=True, help_text='JSON list of {"name": ..., "options": [...]}', null=True, verbose_name='Variant groups')),
                ('variant_option_links', models.JSONField(blank=True, help_text='JSON {group: {option: url}}', null=True, verbose_name='Option links')),
                ('variant_image_map', models.JSONField(blank=True, help_text='JSON {group: {option: image index}}', null=True, verbose_name='Option image indexes')),
                ('variant_option_images', models.JSONField(blank=True, help_text='JSON {group: {option: thumbnail url}}', null=True, verbose_name='Option thumbnails')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Updated at')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('category', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='catalog.category', verbose_name='Category')),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('parent', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='catalog.product', verbose_name='Parent product')),
            ],
            options={
                'verbose_name': 'historical Product',
                'verbose_name_plural': 'historical Products',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
