# catalog_gateway/responses.py
"""Response envelopes returned by the gateway.

Every request yields exactly one of these shapes:

- ``{"results": [...]}`` with an optional ``"meta"`` block in debug mode
- a stock answer
- ``{"error": "..."}``
- ``{"reply": "..."}``
"""

from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _Envelope(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ProductResult(_Envelope):
    id: Union[int, str]
    name: str = ""
    price: Optional[Union[str, float]] = None
    stock: Optional[str] = None
    url: Optional[str] = None


class SearchMeta(_Envelope):
    query_url: Optional[str] = None
    count: int = 0
    error: Optional[str] = None


class SearchEnvelope(_Envelope):
    results: List[ProductResult] = []
    meta: Optional[SearchMeta] = None


class StockAnswer(_Envelope):
    product_id: Union[int, str]
    product: str = ""
    size: str
    stock_quantity: Optional[int] = None
    stock_status: Optional[str] = None
    sku: Optional[str] = None


class ErrorEnvelope(_Envelope):
    error: str


class ReplyEnvelope(_Envelope):
    reply: str = ""


Envelope = Union[SearchEnvelope, StockAnswer, ErrorEnvelope, ReplyEnvelope]


def normalize(envelope: Envelope) -> dict:
    """Render an envelope as JSON-ready data with its public field names."""
    if isinstance(envelope, SearchEnvelope):
        data = {"results": [result.model_dump(by_alias=True) for result in envelope.results]}
        if envelope.meta is not None:
            data["meta"] = envelope.meta.model_dump(by_alias=True, exclude_none=True)
        return data
    if isinstance(envelope, (StockAnswer, ErrorEnvelope, ReplyEnvelope)):
        # stockQuantity stays present as null when the catalog does not track it
        return envelope.model_dump(by_alias=True)
    raise TypeError(f"Unsupported response envelope: {type(envelope).__name__}")
