"""
Variant resolution for product families.

Turns the flat per-child attribute data of a family into option groups,
combination lookup tables and the purchase link for the current selection.
Everything here works on plain data; ORM access lives in variant_navigation.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple, Union

logger = logging.getLogger(__name__)

COMBINATION_SEPARATOR = '|'


@dataclass(frozen=True)
class SiblingRecord:
    """One member of a variant family, as read from the data layer."""
    id: int
    slug: str
    variant_attributes: Optional[Dict[str, str]]
    amazon_url: str
    path: str


@dataclass
class VariantGroup:
    name: str
    options: List[str] = field(default_factory=list)

    def to_dict(self):
        return {'name': self.name, 'options': list(self.options)}


@dataclass(frozen=True)
class CombinationLookup:
    key: str
    kind: str = field(default='combination', init=False)

    def to_dict(self):
        return {'kind': self.kind, 'key': self.key}


@dataclass(frozen=True)
class PerGroupLookup:
    group: str
    option: str
    kind: str = field(default='per-group', init=False)

    def to_dict(self):
        return {'kind': self.kind, 'group': self.group, 'option': self.option}


Lookup = Union[CombinationLookup, PerGroupLookup]


@dataclass(frozen=True)
class KeyCollision:
    key: str
    kept_slug: str
    dropped_slug: str


@dataclass
class VariantLookupTables:
    """
    Link and path tables for one family.

    combination_links / combination_paths are keyed by combination key,
    per_group_links by group name then option.
    """
    combination_links: Dict[str, str] = field(default_factory=dict)
    combination_paths: Dict[str, str] = field(default_factory=dict)
    per_group_links: Dict[str, Dict[str, str]] = field(default_factory=dict)
    collisions: List[KeyCollision] = field(default_factory=list)

    def link_for(self, lookup: Lookup) -> Optional[str]:
        if isinstance(lookup, CombinationLookup):
            return self.combination_links.get(lookup.key) or None
        return self.per_group_links.get(lookup.group, {}).get(lookup.option) or None

    def to_dict(self):
        return {
            'combination_links': dict(self.combination_links),
            'combination_paths': dict(self.combination_paths),
            'per_group_links': {g: dict(m) for g, m in self.per_group_links.items()},
        }


@dataclass(frozen=True)
class VariantSelectionState:
    """Selection state for one product page view."""
    selection: Dict[str, str] = field(default_factory=dict)
    last_touched_group: Optional[str] = None
    failed_thumbnails: FrozenSet[Tuple[str, str]] = frozenset()

    def to_dict(self):
        return {
            'selection': dict(self.selection),
            'last_touched_group': self.last_touched_group,
            'failed_thumbnails': sorted([g, o] for g, o in self.failed_thumbnails),
        }

    @classmethod
    def from_dict(cls, data):
        if not isinstance(data, dict):
            return cls()
        selection = data.get('selection')
        last = data.get('last_touched_group')
        failed = data.get('failed_thumbnails') or []
        return cls(
            selection=clean_attributes(selection) or {},
            last_touched_group=last if isinstance(last, str) else None,
            failed_thumbnails=frozenset(
                (item[0], item[1]) for item in failed
                if isinstance(item, (list, tuple)) and len(item) == 2
            ),
        )


@dataclass(frozen=True)
class NavigationResult:
    state: VariantSelectionState
    target: Optional[str]
    matched: bool


@dataclass(frozen=True)
class PurchaseLink:
    url: str
    source: Optional[Lookup]


def clean_attributes(attributes) -> Optional[Dict[str, str]]:
    """
    Return the usable part of an attribute mapping.

    Non-mapping input gives None; entries whose name or value is not a
    non-empty string are dropped.
    """
    if not isinstance(attributes, dict):
        return None
    return {
        name: value
        for name, value in attributes.items()
        if isinstance(name, str) and name and isinstance(value, str) and value
    }


def derive_groups(siblings: Sequence[SiblingRecord]) -> List[VariantGroup]:
    """Attribute names in first-seen order, each with its first-seen values."""
    groups: Dict[str, VariantGroup] = {}
    for sibling in siblings:
        attributes = clean_attributes(sibling.variant_attributes)
        if not attributes:
            continue
        for name, value in attributes.items():
            group = groups.setdefault(name, VariantGroup(name=name))
            if value not in group.options:
                group.options.append(value)
    return list(groups.values())


def build_combination_key(groups: Sequence[VariantGroup], selection: Dict[str, str]) -> str:
    """
    Join name=value for every group that has a selected value.

    Groups missing from the selection are left out, so the key only
    identifies a sibling when the selection is complete.
    """
    parts = [
        f'{group.name}={selection[group.name]}'
        for group in groups
        if selection.get(group.name)
    ]
    return COMBINATION_SEPARATOR.join(parts)


def is_complete_selection(groups: Sequence[VariantGroup], selection: Dict[str, str]) -> bool:
    return bool(groups) and all(selection.get(group.name) for group in groups)


def build_lookup_tables(siblings: Sequence[SiblingRecord],
                        groups: Sequence[VariantGroup]) -> VariantLookupTables:
    tables = VariantLookupTables()
    if not groups:
        return tables

    kept_by_key: Dict[str, str] = {}
    for sibling in siblings:
        attributes = clean_attributes(sibling.variant_attributes)
        if not attributes or not is_complete_selection(groups, attributes):
            continue

        key = build_combination_key(groups, attributes)
        if key in kept_by_key:
            collision = KeyCollision(
                key=key,
                kept_slug=kept_by_key[key],
                dropped_slug=sibling.slug,
            )
            tables.collisions.append(collision)
            logger.warning(
                "Duplicate variant combination %r: keeping %s, ignoring %s",
                key, collision.kept_slug, collision.dropped_slug,
            )
            continue

        kept_by_key[key] = sibling.slug
        tables.combination_links[key] = sibling.amazon_url
        tables.combination_paths[key] = sibling.path

    return tables


def initial_selection(attributes) -> Dict[str, str]:
    return clean_attributes(attributes) or {}


def select_option(state: VariantSelectionState,
                  group: str,
                  option: str,
                  groups: Sequence[VariantGroup],
                  tables: VariantLookupTables,
                  current_path: str) -> NavigationResult:
    """
    Apply one option click.

    Navigation is only signalled for a complete selection whose combination
    entry points somewhere other than the current page.
    """
    selection = dict(state.selection)
    selection[group] = option
    new_state = replace(state, selection=selection, last_touched_group=group)

    if not is_complete_selection(groups, selection):
        return NavigationResult(state=new_state, target=None, matched=False)

    target = tables.combination_paths.get(build_combination_key(groups, selection))
    if not target:
        return NavigationResult(state=new_state, target=None, matched=False)
    if target == current_path:
        return NavigationResult(state=new_state, target=None, matched=True)
    return NavigationResult(state=new_state, target=target, matched=True)


def resolve_purchase_link(groups: Sequence[VariantGroup],
                          tables: VariantLookupTables,
                          selection: Dict[str, str],
                          last_touched_group: Optional[str],
                          fallback_url: str) -> PurchaseLink:
    """
    Pick the buy link for the current selection.

    Priority: full combination link, then the last touched group's link,
    then any selected group's link in selection order, then the fallback.
    """
    if is_complete_selection(groups, selection):
        lookup = CombinationLookup(key=build_combination_key(groups, selection))
        url = tables.link_for(lookup)
        if url:
            return PurchaseLink(url=url, source=lookup)

    if last_touched_group and selection.get(last_touched_group):
        lookup = PerGroupLookup(group=last_touched_group, option=selection[last_touched_group])
        url = tables.link_for(lookup)
        if url:
            return PurchaseLink(url=url, source=lookup)

    for group_name, option in selection.items():
        lookup = PerGroupLookup(group=group_name, option=option)
        url = tables.link_for(lookup)
        if url:
            return PurchaseLink(url=url, source=lookup)

    return PurchaseLink(url=fallback_url, source=None)


def resolve_image_index(group: str,
                        option: str,
                        image_map: Optional[Dict[str, Dict[str, int]]],
                        images: Sequence[str]) -> int:
    mapped = None
    if isinstance(image_map, dict) and isinstance(image_map.get(group), dict):
        mapped = image_map[group].get(option)
    # bool is an int subclass
    if isinstance(mapped, int) and not isinstance(mapped, bool) and 0 <= mapped < len(images):
        return mapped

    needle = option.lower()
    for index, src in enumerate(images):
        if needle in src.lower():
            return index
    return 0


def option_thumbnail_url(option_images: Optional[Dict[str, Dict[str, str]]],
                         group: str,
                         option: str) -> Optional[str]:
    if not isinstance(option_images, dict) or not isinstance(option_images.get(group), dict):
        return None
    url = option_images[group].get(option)
    if not url or not isinstance(url, str):
        return None
    if url.startswith('http') or url.startswith('/'):
        return url
    return f'/{url}'


def mark_thumbnail_failed(state: VariantSelectionState, group: str, option: str) -> VariantSelectionState:
    return replace(state, failed_thumbnails=state.failed_thumbnails | {(group, option)})
