import json
import logging

from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect
from django.views.decorators.csrf import ensure_csrf_cookie
from django.views.decorators.http import require_http_methods

from .models import Product
from .services import VariantNavigationService
from .services.variant_resolver import VariantSelectionState, mark_thumbnail_failed

logger = logging.getLogger(__name__)

# One page view's selection state; replaced whenever a product page loads
SESSION_KEY = 'variant_selection'


def _load_state(request, product, context):
    data = request.session.get(SESSION_KEY)
    if isinstance(data, dict) and data.get('product') == product.pk:
        return VariantSelectionState.from_dict(data.get('state'))
    return VariantSelectionState(selection=dict(context.initial_selection))


def _store_state(request, product, state):
    request.session[SESSION_KEY] = {'product': product.pk, 'state': state.to_dict()}
    request.session.modified = True


def _parse_group_option(request):
    """Read {"group": ..., "option": ...} from a JSON body."""
    try:
        payload = json.loads(request.body or b'{}')
    except (ValueError, UnicodeDecodeError):
        return None, None, JsonResponse({'error': 'Invalid JSON'}, status=400)

    if not isinstance(payload, dict):
        return None, None, JsonResponse({'error': 'Expected a JSON object'}, status=400)

    group_name = payload.get('group')
    option = payload.get('option')
    if not isinstance(group_name, str) or not group_name or not isinstance(option, str) or not option:
        return None, None, JsonResponse({'error': 'group and option are required'}, status=400)
    return group_name, option, None


def _serialize_product(product):
    return {
        'id': product.id,
        'slug': product.slug,
        'title': product.title,
        'category': product.category.name if product.category else 'Uncategorized',
        'brand': product.brand or None,
        'upc': product.upc or None,
        'published_at': product.published_at.isoformat() if product.published_at else None,
        'description': product.description,
        'amazon_url': product.amazon_url,
        'price': float(product.price),
        'original_price': float(product.original_price) if product.original_price is not None else None,
        'main_image': product.main_image,
        'images': product.image_pool,
        'bullet_points': [b for b in product.bullet_points if isinstance(b, str)]
        if isinstance(product.bullet_points, list) else [],
        'show_buy_on_amazon': product.show_buy_on_amazon,
        'show_add_to_cart': product.show_add_to_cart,
    }


def _get_active_product(slug):
    return get_object_or_404(Product.objects.select_related('category'), slug=slug, is_active=True)


@require_http_methods(["GET"])
@ensure_csrf_cookie
def product_detail(request, slug):
    """
    Product page data.
    Family containers are never shown: they redirect to their first active child.
    """
    product = _get_active_product(slug)

    target = VariantNavigationService.get_redirect_target(product)
    if target:
        logger.debug("Redirecting family container %s to %s", product.slug, target.slug)
        return redirect(target.get_absolute_url())

    context = VariantNavigationService.build_page_context(product)
    state = VariantSelectionState(selection=dict(context.initial_selection))
    _store_state(request, product, state)

    data = _serialize_product(product)
    data['variants'] = context.to_dict(state)
    return JsonResponse(data)


@require_http_methods(["POST"])
def product_select_option(request, slug):
    """
    Apply one option click.

    Expected payload:
    {"group": "Color", "option": "Red"}
    """
    product = _get_active_product(slug)
    group_name, option, error = _parse_group_option(request)
    if error:
        return error

    context = VariantNavigationService.build_page_context(product)
    if not context.has_option(group_name, option):
        return JsonResponse(
            {'error': f'Unknown option {option!r} for group {group_name!r}'},
            status=400
        )

    state = _load_state(request, product, context)
    result = VariantNavigationService.apply_selection(
        product, state, group_name, option, context=context
    )
    new_state = result.pop('state')
    _store_state(request, product, new_state)

    return JsonResponse({
        'selection': dict(new_state.selection),
        'last_touched_group': new_state.last_touched_group,
        **result,
    })


@require_http_methods(["POST"])
def product_thumbnail_failed(request, slug):
    """Remember an option thumbnail that failed to load; it renders as text afterwards."""
    product = _get_active_product(slug)
    group_name, option, error = _parse_group_option(request)
    if error:
        return error

    context = VariantNavigationService.build_page_context(product)
    if not context.has_option(group_name, option):
        return JsonResponse({'error': 'Unknown option'}, status=400)

    state = mark_thumbnail_failed(_load_state(request, product, context), group_name, option)
    _store_state(request, product, state)
    return JsonResponse({'success': True, 'failed_thumbnails': state.to_dict()['failed_thumbnails']})
