import requests
import logging
from typing import Any, Optional, Sequence, Tuple, Union
from ...config import CatalogSettings
from ...errors import CatalogError

logger = logging.getLogger(__name__)

Params = Union[dict, Sequence[Tuple[str, Any]]]


class WooCommerceAuth:
    def __init__(self, settings: CatalogSettings):
        """
        Initialize WooCommerce auth.
        Args:
            settings: Catalog connection settings. ``base_url`` is the REST root
            of the store, e.g. 'https://shop.example.com/wp-json/wc/v3'
        """
        self.settings = settings
        self.base_url = settings.base_url.rstrip("/")

    def get_auth(self) -> Tuple[str, str]:
        return (self.settings.consumer_key, self.settings.consumer_secret)

    def build_url(self, endpoint: str, params: Optional[Params] = None) -> str:
        """Return the exact URL a GET with these params would hit."""
        request = requests.Request("GET", f"{self.base_url}/{endpoint}", params=params)
        return request.prepare().url

    def make_request(self, endpoint: str, params: Optional[Params] = None) -> Any:
        """Make authenticated GET request to the WooCommerce REST API."""
        url = f"{self.base_url}/{endpoint}"

        try:
            response = requests.request(
                method="GET",
                url=url,
                auth=self.get_auth(),
                params=params,
                timeout=self.settings.timeout
            )
            response.raise_for_status()
            return response.json()

        except requests.exceptions.RequestException as e:
            logger.error(f"WooCommerce API request failed: {e}")
            if getattr(e, 'response', None) is not None:
                logger.error(f"Response: {e.response.text}")
            raise CatalogError(f"Catalog request to {endpoint} failed: {e}") from e
        except ValueError as e:
            logger.error(f"WooCommerce API returned invalid JSON for {endpoint}: {e}")
            raise CatalogError(f"Catalog returned invalid JSON for {endpoint}") from e
