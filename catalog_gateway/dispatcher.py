# catalog_gateway/dispatcher.py
"""Decides which catalog operation a request runs and runs it."""

import logging
from typing import Iterable
from .errors import ClassifierError
from .models import GatewayQuery
from .responses import Envelope, ErrorEnvelope, ReplyEnvelope, normalize
from .tools.inventory import check_stock
from .tools.products import search_products
from .tools.registry import (
    CheckStock,
    CheckStockArgs,
    NoOp,
    Operation,
    SearchProducts,
    SearchProductsArgs,
)
from .tools.variants import DEFAULT_SIZE_KEYWORDS

logger = logging.getLogger(__name__)


class IntentDispatcher:
    """Resolves a request to one operation and returns one response envelope.

    Resolution order, first match wins:

    1. product URL or ID plus a size: stock check, no classification
    2. an explicit search term (``q``): product search, no classification
    3. otherwise the message goes to the intent classifier
    4. if the classifier picks nothing, its text is returned as a reply
    """

    def __init__(self, catalog, classifier, size_keywords: Iterable[str] = DEFAULT_SIZE_KEYWORDS):
        self.catalog = catalog
        self.classifier = classifier
        self.size_keywords = tuple(size_keywords)

    def resolve(self, query: GatewayQuery) -> Operation:
        if (query.product_url or query.product_id) and query.size:
            logger.info("Direct stock mode")
            return CheckStock(args=CheckStockArgs(
                size=query.size,
                product_url=query.product_url,
                product_id=query.product_id,
            ))

        if query.explicit_query:
            logger.info("Direct search mode")
            return SearchProducts(args=SearchProductsArgs(
                query=query.explicit_query,
                size=query.size,
                color=query.color,
            ))

        logger.info("Inferred mode")
        return self.classifier.classify(query.message or "")

    def execute(self, operation: Operation, debug: bool = False) -> Envelope:
        if isinstance(operation, SearchProducts):
            args = operation.args
            return search_products(self.catalog, args.query, size=args.size, color=args.color, debug=debug)
        if isinstance(operation, CheckStock):
            args = operation.args
            return check_stock(
                self.catalog,
                args.size,
                product_id=args.product_id,
                product_url=args.product_url,
                size_keywords=self.size_keywords,
            )
        if isinstance(operation, NoOp):
            return ReplyEnvelope(reply=operation.text or "")
        raise TypeError(f"Unknown operation: {type(operation).__name__}")

    def dispatch(self, query: GatewayQuery) -> dict:
        """Handle one request and return its JSON-ready response."""
        try:
            operation = self.resolve(query)
        except ClassifierError as e:
            return normalize(ErrorEnvelope(error=str(e)))
        return normalize(self.execute(operation, debug=query.debug))
