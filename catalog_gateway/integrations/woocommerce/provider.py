"""WooCommerce catalog provider."""

import logging
from typing import Dict, List, Optional, Union
from pydantic import ValidationError
from ...config import CatalogSettings
from ...errors import CatalogError, SearchDegraded
from ...models import Product, SearchPage, Variant
from .auth import WooCommerceAuth
from .products import WooCommerceProducts

logger = logging.getLogger(__name__)


class WooCommerceProvider:
    """WooCommerce integration provider."""

    def __init__(self, settings: CatalogSettings):
        self.auth = WooCommerceAuth(settings)
        self.products_api = WooCommerceProducts(self.auth)

    def search_products(self, query: Optional[str] = None, size: Optional[str] = None,
                        color: Optional[str] = None) -> SearchPage:
        """Search WooCommerce products and convert to standard format."""
        raw_products, query_url = self.products_api.search(query=query, size=size, color=color)
        try:
            products = [self._convert_product(p) for p in raw_products]
        except ValidationError as e:
            logger.error(f"Unexpected product payload from WooCommerce: {e}")
            raise SearchDegraded("Catalog returned malformed products", query_url=query_url) from e
        return SearchPage(products=products, query_url=query_url)

    def get_product_by_slug(self, slug: str) -> Optional[Product]:
        """Get the WooCommerce product with this slug."""
        raw_product = self.products_api.get_by_slug(slug)
        if raw_product is None:
            return None
        try:
            return self._convert_product(raw_product)
        except ValidationError as e:
            raise CatalogError(f"Catalog returned a malformed product for slug {slug}") from e

    def list_variations(self, product_id: Union[int, str]) -> List[Variant]:
        """List product variations in the order WooCommerce returns them."""
        raw_variations = self.products_api.list_variations(product_id)
        try:
            return [self._convert_variant(v) for v in raw_variations]
        except ValidationError as e:
            raise CatalogError(f"Catalog returned malformed variations for product {product_id}") from e

    def _convert_product(self, woo_product: Dict) -> Product:
        """Convert a WooCommerce product payload to Product."""
        return Product(
            id=woo_product.get("id"),
            name=woo_product.get("name") or "",
            price=woo_product.get("price"),
            stock_status=woo_product.get("stock_status"),
            permalink=woo_product.get("permalink"),
        )

    def _convert_variant(self, woo_variation: Dict) -> Variant:
        """Convert a WooCommerce variation payload to Variant."""
        return Variant(
            id=woo_variation.get("id"),
            name=woo_variation.get("name") or "",
            sku=woo_variation.get("sku"),
            attributes=[
                {"name": a.get("name") or "", "option": str(a.get("option") or "")}
                for a in woo_variation.get("attributes") or []
            ],
            stock_quantity=woo_variation.get("stock_quantity"),
            stock_status=woo_variation.get("stock_status"),
        )
