"""Inventory-related operations for the catalog gateway."""

import logging
from typing import Iterable, Optional, Union
from urllib.parse import urlparse
from ..errors import (
    CheckStockFailed,
    MissingIdentifier,
    ProductNotFound,
    StockCheckError,
    VariantNotFound,
)
from ..responses import ErrorEnvelope, StockAnswer
from .variants import DEFAULT_SIZE_KEYWORDS, find_variant_by_size

logger = logging.getLogger(__name__)


def slug_from_url(product_url: str) -> str:
    """Last non-empty path segment of a product page URL."""
    path = urlparse(product_url.strip()).path
    segments = [segment for segment in path.split("/") if segment]
    return segments[-1] if segments else ""


def resolve_product_id(catalog, product_id: Optional[Union[int, str]] = None,
                       product_url: Optional[str] = None) -> Union[int, str]:
    """Return the catalog id for a request, looking the URL's slug up if needed."""
    if product_id:
        return product_id
    if not product_url:
        raise MissingIdentifier()

    slug = slug_from_url(product_url)
    logger.info(f"Resolving product slug '{slug}' from {product_url}")
    product = catalog.get_product_by_slug(slug) if slug else None
    if product is None:
        raise ProductNotFound(slug)
    return product.id


def check_stock(catalog, size: str, product_id: Optional[Union[int, str]] = None,
                product_url: Optional[str] = None,
                size_keywords: Iterable[str] = DEFAULT_SIZE_KEYWORDS) -> Union[StockAnswer, ErrorEnvelope]:
    """
    Check availability of a product in a specific size.

    Args:
        catalog: Catalog client (integration manager or provider)
        size: Size to look for among the product's variations
        product_id: Catalog product ID, takes precedence over the URL
        product_url: Product page URL, used through its slug
        size_keywords: Attribute name fragments that mark a size attribute

    Returns:
        Stock answer for the first matching variation, or an error envelope
    """
    logger.info(f"Checking stock: product_id={product_id}, product_url={product_url}, size={size}")

    try:
        resolved_id = resolve_product_id(catalog, product_id=product_id, product_url=product_url)
        variations = catalog.list_variations(resolved_id)
        variant = find_variant_by_size(variations, size, size_keywords)
        if variant is None:
            raise VariantNotFound(size)

    except StockCheckError as e:
        logger.warning(f"Stock check rejected: {e}")
        return ErrorEnvelope(error=str(e))
    except Exception as e:
        logger.error(f"Error checking stock: {e}")
        return ErrorEnvelope(error=str(CheckStockFailed()))

    logger.info(f"Matched variation {variant.sku} ({variant.stock_status}) for size {size}")
    return StockAnswer(
        product_id=resolved_id,
        product=variant.name or "",
        size=size,
        stock_quantity=variant.stock_quantity,
        stock_status=variant.stock_status,
        sku=variant.sku,
    )
