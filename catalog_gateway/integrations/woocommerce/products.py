"""WooCommerce products API integration."""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union
from ...errors import CatalogError, SearchDegraded
from .auth import WooCommerceAuth

logger = logging.getLogger(__name__)


def build_search_params(query: Optional[str], size: Optional[str] = None, color: Optional[str] = None,
                        per_page: int = 5, color_attribute: str = "pa_colore",
                        size_attribute: str = "pa_taglia") -> List[Tuple[str, Any]]:
    """
    Build the query string for a product search.

    Each attribute constraint is its own ``attribute`` entry, so a color and a
    size filter produce two repeated parameters rather than one combined value.
    """
    params: List[Tuple[str, Any]] = [("search", query or ""), ("per_page", per_page)]
    if color:
        params.append(("attribute", f"{color_attribute}={color}"))
    if size:
        params.append(("attribute", f"{size_attribute}={size}"))
    return params


class WooCommerceProducts:
    """Handles WooCommerce Products API operations."""

    def __init__(self, auth: WooCommerceAuth):
        self.auth = auth
        self.settings = auth.settings

    def search_params(self, query: Optional[str], size: Optional[str] = None,
                      color: Optional[str] = None) -> List[Tuple[str, Any]]:
        return build_search_params(
            query, size=size, color=color,
            per_page=self.settings.search_page_size,
            color_attribute=self.settings.color_attribute,
            size_attribute=self.settings.size_attribute,
        )

    def search(self, query: Optional[str] = None, size: Optional[str] = None,
               color: Optional[str] = None) -> Tuple[List[Dict], str]:
        """Search for products. Returns the raw products and the URL queried."""
        params = self.search_params(query, size=size, color=color)
        query_url = self.auth.build_url("products", params)
        logger.debug(f"WooCommerce search: {query_url}")

        try:
            products = self.auth.make_request("products", params=params)
        except CatalogError as e:
            raise SearchDegraded(str(e), query_url=query_url) from e

        if not isinstance(products, list):
            raise SearchDegraded("Catalog search did not return a product list", query_url=query_url)
        return products, query_url

    def get_by_slug(self, slug: str) -> Optional[Dict]:
        """Get the product whose slug matches exactly, if any."""
        products = self.auth.make_request("products", params={"slug": slug})
        if not products:
            return None
        return products[0]

    def list_variations(self, product_id: Union[int, str]) -> List[Dict]:
        """List variations of a product in catalog order."""
        variations = self.auth.make_request(
            f"products/{product_id}/variations",
            params={"per_page": self.settings.variations_page_size}
        )
        if not isinstance(variations, list):
            raise CatalogError(f"Catalog returned no variation list for product {product_id}")
        return variations
