"""
Django signals for the catalog app.
Keeps family containers free of variant attributes.
"""

import logging

from django.db.models.signals import post_save
from django.dispatch import receiver

from .models import Product

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Product)
def clear_parent_variant_attributes(sender, instance, **kwargs):
    """
    A product that gains children becomes a family container and
    must not carry variant attributes of its own.
    """
    if not instance.parent_id:
        return

    parent = instance.parent
    if not parent.variant_attributes:
        return

    logger.warning(
        "Clearing variant attributes %r on %s: it is now the parent of %s",
        parent.variant_attributes, parent.slug, instance.slug
    )
    parent.variant_attributes = None
    parent.save(update_fields=['variant_attributes', 'updated_at'])
