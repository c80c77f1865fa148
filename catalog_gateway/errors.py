# catalog_gateway/errors.py
"""Error taxonomy for the catalog gateway."""

from typing import Optional


class CatalogGatewayError(Exception):
    """Base class for all gateway errors."""


class CatalogError(CatalogGatewayError):
    """The catalog service could not be reached or returned something unusable."""


class CatalogNotConfigured(CatalogError):
    """No real catalog is configured for the selected integration mode."""


class SearchDegraded(CatalogError):
    """A product search failed; callers report it as an empty result list."""

    def __init__(self, message: str, query_url: Optional[str] = None):
        super().__init__(message)
        self.query_url = query_url


class StockCheckError(CatalogGatewayError):
    """Stock check failure. The message is shown to the shopper as-is."""


class MissingIdentifier(StockCheckError):
    def __init__(self):
        super().__init__("A productId or productUrl is required")


class ProductNotFound(StockCheckError):
    def __init__(self, slug: str):
        super().__init__(f"Product not found for slug: {slug}")
        self.slug = slug


class VariantNotFound(StockCheckError):
    def __init__(self, size: str):
        super().__init__(f"No variant found with size {size}")
        self.size = size


class CheckStockFailed(StockCheckError):
    def __init__(self):
        super().__init__("Error during stock check")


class ClassifierError(CatalogGatewayError):
    """The intent classifier call failed."""
