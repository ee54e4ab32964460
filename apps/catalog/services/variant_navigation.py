"""
Service for handling navigation inside a product's variant family.
Option groups are INFERRED from the siblings' own attributes, not configured manually.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from apps.catalog.models import Product
from .variant_resolver import (
    SiblingRecord,
    VariantGroup,
    VariantLookupTables,
    VariantSelectionState,
    build_lookup_tables,
    derive_groups,
    initial_selection,
    option_thumbnail_url,
    resolve_image_index,
    resolve_purchase_link,
    select_option,
)

logger = logging.getLogger(__name__)


@dataclass
class VariantPageContext:
    """Everything the product page needs to render its option selectors."""
    groups: List[VariantGroup]
    tables: VariantLookupTables
    initial_selection: Dict[str, str]
    images: List[str]
    image_map: Optional[Dict[str, Dict[str, int]]]
    option_images: Optional[Dict[str, Dict[str, str]]]
    fallback_url: str
    current_path: str
    is_family: bool = False
    siblings: List[SiblingRecord] = field(default_factory=list)

    def has_option(self, group_name: str, option: str) -> bool:
        return any(g.name == group_name and option in g.options for g in self.groups)

    def to_dict(self, state: Optional[VariantSelectionState] = None) -> Dict[str, Any]:
        state = state or VariantSelectionState(selection=dict(self.initial_selection))
        link = resolve_purchase_link(
            self.groups, self.tables, state.selection,
            state.last_touched_group, self.fallback_url
        )
        return {
            'is_family': self.is_family,
            'groups': [
                {
                    'name': g.name,
                    'options': [
                        {
                            'value': opt,
                            'is_selected': state.selection.get(g.name) == opt,
                            'thumbnail_url': (
                                None if (g.name, opt) in state.failed_thumbnails
                                else option_thumbnail_url(self.option_images, g.name, opt)
                            ),
                        }
                        for opt in g.options
                    ],
                }
                for g in self.groups
            ],
            'lookup_tables': self.tables.to_dict(),
            'initial_selection': dict(self.initial_selection),
            'selection': state.to_dict(),
            'buy_url': link.url,
            'link_source': link.source.to_dict() if link.source else None,
            'image_map': self.image_map,
            'option_images': self.option_images,
            'collisions': [
                {'key': c.key, 'kept': c.kept_slug, 'dropped': c.dropped_slug}
                for c in self.tables.collisions
            ],
        }


def _legacy_groups(raw) -> List[VariantGroup]:
    if not isinstance(raw, list):
        return []
    groups = []
    for item in raw:
        if not isinstance(item, dict) or not isinstance(item.get('name'), str) or not item['name']:
            continue
        options = item.get('options')
        if not isinstance(options, list):
            continue
        values = []
        for opt in options:
            if isinstance(opt, str) and opt and opt not in values:
                values.append(opt)
        if values:
            groups.append(VariantGroup(name=item['name'], options=values))
    return groups


def _nested_mapping(raw, value_type) -> Optional[Dict[str, Dict[str, Any]]]:
    """Keep only {str: {str: value_type}} entries of a legacy JSON map."""
    if not isinstance(raw, dict):
        return None
    result = {}
    for group_name, options in raw.items():
        if not isinstance(group_name, str) or not isinstance(options, dict):
            continue
        result[group_name] = {
            opt: value for opt, value in options.items()
            if isinstance(opt, str) and isinstance(value, value_type)
        }
    return result


class VariantNavigationService:
    """
    Service to handle navigation between the members of a variant family.
    """

    @staticmethod
    def get_siblings(product: Product):
        """
        Active members of the product's family, in creation order.
        A child gets its siblings (itself included), a parent its children.
        """
        family_id = product.parent_id or product.pk
        return Product.objects.filter(
            parent_id=family_id,
            is_active=True
        ).order_by('pk')

    @staticmethod
    def get_redirect_target(product: Product) -> Optional[Product]:
        """First active child of a family container, or None."""
        if product.parent_id:
            return None
        return Product.objects.filter(parent=product, is_active=True).order_by('pk').first()

    @staticmethod
    def to_sibling_record(product: Product) -> SiblingRecord:
        return SiblingRecord(
            id=product.pk,
            slug=product.slug,
            variant_attributes=product.variant_attributes,
            amazon_url=product.amazon_url,
            path=product.get_absolute_url(),
        )

    @staticmethod
    def build_page_context(product: Product) -> VariantPageContext:
        """
        Build the variant context for a product page.

        Family members get groups derived from their siblings and combination
        tables; anything else falls back to the product's own variant JSON.
        """
        siblings = [
            VariantNavigationService.to_sibling_record(s)
            for s in VariantNavigationService.get_siblings(product)
        ]
        groups = derive_groups(siblings)

        context = VariantPageContext(
            groups=groups,
            tables=VariantLookupTables(),
            initial_selection={},
            images=product.image_pool,
            image_map=_nested_mapping(product.variant_image_map, int),
            option_images=_nested_mapping(product.variant_option_images, str),
            fallback_url=product.amazon_url,
            current_path=product.get_absolute_url(),
        )

        if groups:
            context.is_family = True
            context.siblings = siblings
            context.tables = build_lookup_tables(siblings, groups)
            if product.parent_id:
                context.initial_selection = initial_selection(product.variant_attributes)
            # Family data replaces the per-product image maps
            context.image_map = None
            context.option_images = None
            if context.tables.collisions:
                logger.warning(
                    "Product family %s has %d duplicate variant combination(s)",
                    product.parent_id or product.pk, len(context.tables.collisions)
                )
        else:
            context.groups = _legacy_groups(product.variant_groups)
            context.tables.per_group_links = _nested_mapping(product.variant_option_links, str) or {}

        return context

    @staticmethod
    def apply_selection(product: Product,
                        state: VariantSelectionState,
                        group_name: str,
                        option: str,
                        context: Optional[VariantPageContext] = None) -> Dict[str, Any]:
        """
        Apply an option click and resolve what the page should do next.

        Returns the new state along with the navigation target (or None),
        the buy link and the gallery image to show.
        """
        context = context or VariantNavigationService.build_page_context(product)
        result = select_option(
            state, group_name, option, context.groups, context.tables, context.current_path
        )
        link = resolve_purchase_link(
            context.groups, context.tables, result.state.selection,
            result.state.last_touched_group, context.fallback_url
        )
        image_index = resolve_image_index(group_name, option, context.image_map, context.images)

        if result.target:
            logger.debug("Selection %s on %s navigates to %s",
                         result.state.selection, product.slug, result.target)

        return {
            'state': result.state,
            'navigate_to': result.target,
            'matched': result.matched,
            'buy_url': link.url,
            'link_source': link.source.to_dict() if link.source else None,
            'image_index': image_index,
        }
