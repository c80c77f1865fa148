# catalog_gateway/integrations/manager.py
"""Integration manager - routes catalog reads to the configured provider."""

import logging
from typing import List, Optional, Union
from ..config import Config
from ..errors import CatalogNotConfigured
from ..models import Product, SearchPage, Variant
from .mock.provider import MockProvider
from .woocommerce.provider import WooCommerceProvider

logger = logging.getLogger(__name__)

# Module-level singleton variable
_instance = None


class IntegrationManager:
    """Owns the catalog providers and forwards reads to the primary one.

    Errors are not swallowed here: search and stock checks apply different
    failure policies, so the caller decides. The mock catalog only answers
    in "mock" mode; any other misconfiguration fails every read.
    """

    def __init__(self, config: Config):
        self.config = config
        self._providers = {}
        self._initialize_providers()

    @classmethod
    def get_instance(cls) -> 'IntegrationManager':
        """Get singleton instance of IntegrationManager, built once per process."""
        global _instance

        if _instance is None:
            logger.info("Creating new IntegrationManager instance")
            _instance = cls(Config())

        return _instance

    def _initialize_providers(self):
        """Initialize configured providers."""
        mode = self.config.INTEGRATION_MODE

        if mode == "mock":
            self._providers["mock"] = MockProvider()
            logger.info("Initialized mock provider")
        elif mode == "woocommerce":
            if self.config.WOO_URL:
                self._providers["woocommerce"] = WooCommerceProvider(self.config.catalog_settings())
                logger.info(f"Initialized WooCommerce provider for {self.config.WOO_URL}")
            else:
                logger.error("INTEGRATION_MODE is woocommerce but WOO_URL is not set, catalog reads will fail")
        else:
            logger.error(f"Unknown INTEGRATION_MODE {mode!r}, catalog reads will fail")

    def _get_primary_provider(self):
        """Get the provider that answers catalog reads."""
        provider_name = self.config.INTEGRATION_MODE
        provider = self._providers.get(provider_name)
        if provider is None:
            raise CatalogNotConfigured(f"No catalog configured for INTEGRATION_MODE {provider_name!r}")
        return provider

    def search_products(self, query: Optional[str] = None, size: Optional[str] = None,
                        color: Optional[str] = None) -> SearchPage:
        """Search for products using the primary provider."""
        return self._get_primary_provider().search_products(query=query, size=size, color=color)

    def get_product_by_slug(self, slug: str) -> Optional[Product]:
        """Get the product with this slug from the primary provider."""
        return self._get_primary_provider().get_product_by_slug(slug)

    def list_variations(self, product_id: Union[int, str]) -> List[Variant]:
        """List a product's variations from the primary provider."""
        return self._get_primary_provider().list_variations(product_id)
