"""Product search operation."""

import logging
from typing import Optional
from ..responses import SearchEnvelope, SearchMeta

logger = logging.getLogger(__name__)


def search_products(catalog, query: Optional[str], size: Optional[str] = None,
                    color: Optional[str] = None, debug: bool = False) -> SearchEnvelope:
    """
    Search for products by query, narrowed by size and color.

    Args:
        catalog: Catalog client (integration manager or provider)
        query: Free-text search term, may be empty
        size: Optional size filter
        color: Optional color filter
        debug: Attach the queried URL and result count

    Returns:
        Search envelope. Catalog failures degrade to an empty result list.
    """
    logger.info(f"Searching products: query='{query}', size='{size}', color='{color}'")

    try:
        page = catalog.search_products(query=query, size=size, color=color)
    except Exception as e:
        # search never fails hard, it degrades to no results
        logger.error(f"Error searching products: {e}")
        meta = SearchMeta(query_url=getattr(e, "query_url", None), count=0, error=str(e)) if debug else None
        return SearchEnvelope(results=[], meta=meta)

    results = [product.to_result() for product in page.products]
    logger.info(f"Search returned {len(results)} products")

    if debug:
        return SearchEnvelope(results=results, meta=SearchMeta(query_url=page.query_url, count=len(results)))
    return SearchEnvelope(results=results)
