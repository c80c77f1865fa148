# catalog_gateway/integrations/woocommerce/__init__.py
"""WooCommerce integration package."""

from .provider import WooCommerceProvider
from .products import WooCommerceProducts, build_search_params

__all__ = ['WooCommerceProvider', 'WooCommerceProducts', 'build_search_params']
