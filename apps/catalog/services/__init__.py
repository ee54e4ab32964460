from .variant_navigation import VariantNavigationService, VariantPageContext

__all__ = [
    'VariantNavigationService',
    'VariantPageContext',
]
