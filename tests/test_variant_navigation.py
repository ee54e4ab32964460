import pytest

from apps.catalog.models import Product
from apps.catalog.services import VariantNavigationService
from apps.catalog.services.variant_resolver import VariantSelectionState

pytestmark = pytest.mark.django_db


class TestSiblings:

    def test_child_sees_whole_family_in_creation_order(self, family):
        slugs = [p.slug for p in VariantNavigationService.get_siblings(family['blue'])]
        assert slugs == ['shirt-red', 'shirt-blue']

    def test_inactive_children_are_excluded(self, family):
        family['red'].is_active = False
        family['red'].save()
        slugs = [p.slug for p in VariantNavigationService.get_siblings(family['blue'])]
        assert slugs == ['shirt-blue']

    def test_parent_redirects_to_first_active_child(self, family):
        assert VariantNavigationService.get_redirect_target(family['parent']) == family['red']
        assert VariantNavigationService.get_redirect_target(family['red']) is None

    def test_standalone_has_no_redirect(self, standalone):
        assert VariantNavigationService.get_redirect_target(standalone) is None


class TestPageContext:

    def test_family_context(self, family):
        context = VariantNavigationService.build_page_context(family['red'])

        assert context.is_family
        assert [g.to_dict() for g in context.groups] == [
            {'name': 'Color', 'options': ['Red', 'Blue']},
            {'name': 'Size', 'options': ['L']},
        ]
        assert context.initial_selection == {'Color': 'Red', 'Size': 'L'}
        assert context.tables.combination_links == {
            'Color=Red|Size=L': 'https://amazon.com/dp/RED',
            'Color=Blue|Size=L': 'https://amazon.com/dp/BLUE',
        }
        assert context.tables.combination_paths['Color=Blue|Size=L'] == '/products/shirt-blue/'
        assert context.current_path == '/products/shirt-red/'
        assert context.image_map is None
        assert context.option_images is None

    def test_family_context_serializes_selected_options(self, family):
        data = VariantNavigationService.build_page_context(family['blue']).to_dict()
        color = data['groups'][0]
        assert [o['value'] for o in color['options'] if o['is_selected']] == ['Blue']
        assert data['buy_url'] == 'https://amazon.com/dp/BLUE'
        assert data['link_source'] == {'kind': 'combination', 'key': 'Color=Blue|Size=L'}

    def test_attributeless_family_is_standalone(self, category):
        parent = Product.objects.create(title='Mug', slug='mug')
        child = Product.objects.create(title='Mug 1', slug='mug-1', parent=parent, amazon_url='https://a/1')
        context = VariantNavigationService.build_page_context(child)
        assert not context.is_family
        assert context.groups == []
        assert context.to_dict()['buy_url'] == 'https://a/1'

    def test_standalone_uses_own_variant_data(self, standalone):
        context = VariantNavigationService.build_page_context(standalone)
        assert not context.is_family
        assert [g.to_dict() for g in context.groups] == [{'name': 'Color', 'options': ['Natural', 'Black']}]
        assert context.tables.per_group_links == {'Color': {'Black': 'https://amazon.com/dp/TOTE-BLACK'}}
        assert context.image_map == {'Color': {'Natural': 0}}

    def test_malformed_standalone_data_yields_no_options(self, category):
        product = Product.objects.create(
            title='Broken',
            slug='broken',
            variant_groups={'name': 'Color'},
            variant_option_links=['nope'],
        )
        context = VariantNavigationService.build_page_context(product)
        assert context.groups == []
        assert context.tables.per_group_links == {}

    def test_legacy_group_without_usable_options_is_dropped(self, category):
        product = Product.objects.create(
            title='Sparse',
            slug='sparse',
            variant_groups=[
                {'name': 'Color', 'options': ['Red']},
                {'name': 'Size', 'options': []},
                {'name': 'Fit', 'options': ['', 3]},
            ],
        )
        context = VariantNavigationService.build_page_context(product)
        assert [g.name for g in context.groups] == ['Color']

    def test_collisions_are_reported(self, family):
        family['blue'].variant_attributes = {'Color': 'Red', 'Size': 'L'}
        family['blue'].save()
        data = VariantNavigationService.build_page_context(family['red']).to_dict()
        assert data['collisions'] == [
            {'key': 'Color=Red|Size=L', 'kept': 'shirt-red', 'dropped': 'shirt-blue'}
        ]


class TestApplySelection:

    def test_switch_to_sibling(self, family):
        state = VariantSelectionState(selection={'Color': 'Red', 'Size': 'L'})
        result = VariantNavigationService.apply_selection(family['red'], state, 'Color', 'Blue')
        assert result['navigate_to'] == '/products/shirt-blue/'
        assert result['buy_url'] == 'https://amazon.com/dp/BLUE'
        assert result['state'].last_touched_group == 'Color'

    def test_missing_combination_stays_put(self, family):
        state = VariantSelectionState(selection={'Size': 'L'})
        result = VariantNavigationService.apply_selection(family['red'], state, 'Color', 'Green')
        assert result['navigate_to'] is None
        assert result['matched'] is False
        assert result['buy_url'] == 'https://amazon.com/dp/RED'

    def test_standalone_per_group_link_and_image(self, standalone):
        result = VariantNavigationService.apply_selection(
            standalone, VariantSelectionState(), 'Color', 'Black'
        )
        assert result['navigate_to'] is None
        assert result['buy_url'] == 'https://amazon.com/dp/TOTE-BLACK'
        assert result['link_source'] == {'kind': 'per-group', 'group': 'Color', 'option': 'Black'}
        assert result['image_index'] == 1
