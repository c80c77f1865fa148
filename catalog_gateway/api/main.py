# api/main.py
from functools import lru_cache
from typing import Optional
from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from catalog_gateway.config import Config, setup_logging
from catalog_gateway.dispatcher import IntentDispatcher
from catalog_gateway.integrations.gemini.classifier import GeminiIntentClassifier
from catalog_gateway.integrations.manager import IntegrationManager
from catalog_gateway.models import GatewayQuery
import logging

config = Config()
setup_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Catalog Gateway API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_dispatcher() -> IntentDispatcher:
    """Build the dispatcher once per process."""
    integration_manager = IntegrationManager.get_instance()
    classifier = GeminiIntentClassifier(integration_manager.config)
    return IntentDispatcher(
        integration_manager,
        classifier,
        size_keywords=integration_manager.config.SIZE_ATTRIBUTE_KEYWORDS,
    )


@app.get("/api/health")
def health_check():
    """Basic health check"""
    return {"status": "healthy", "service": "catalog-gateway"}


@app.get("/api/search")
def search(
    message: Optional[str] = None,
    q: Optional[str] = Query(default=None, description="Explicit search term, skips intent detection"),
    size: Optional[str] = None,
    color: Optional[str] = None,
    url: Optional[str] = Query(default=None, description="Product page URL"),
    productId: Optional[str] = None,
    debug: Optional[str] = None,
    dispatcher: IntentDispatcher = Depends(get_dispatcher),
):
    """Resolve a shopper request from query parameters."""
    query = GatewayQuery(
        message=message, q=q, size=size, color=color, url=url, productId=productId, debug=debug
    )
    return dispatcher.dispatch(query)


@app.post("/api/search")
def search_body(query: GatewayQuery, dispatcher: IntentDispatcher = Depends(get_dispatcher)):
    """Resolve a shopper request from a JSON body."""
    return dispatcher.dispatch(query)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
