# catalog_gateway/tools/registry.py
"""Operations the gateway can run, and the tagged union that selects one."""

import logging
from typing import Any, Dict, Mapping, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from ..models import number_to_str, whole_number_id

logger = logging.getLogger(__name__)

SEARCH_PRODUCTS = "search_products"
CHECK_STOCK = "check_stock"


class OperationDescriptor(BaseModel):
    """A named capability offered to the intent classifier."""
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    parameter_schema: Dict[str, Any]


OPERATIONS: Tuple[OperationDescriptor, ...] = (
    OperationDescriptor(
        name=SEARCH_PRODUCTS,
        description="Search catalog products by free text, optionally narrowed by size and color",
        parameter_schema={
            "type": "object",
            "properties": {
                "query": {"type": "string", "description": "What the shopper is looking for"},
                "size": {"type": "string", "description": "Size to filter by (e.g. 44, M)"},
                "color": {"type": "string", "description": "Color to filter by"},
            },
            "required": ["query"],
        },
    ),
    OperationDescriptor(
        name=CHECK_STOCK,
        description="Check whether a product is available in a specific size",
        parameter_schema={
            "type": "object",
            "properties": {
                "productUrl": {"type": "string", "description": "URL of the product page"},
                "productId": {"type": "number", "description": "Numeric product ID"},
                "size": {"type": "string", "description": "Size to check (e.g. 44)"},
            },
            "required": ["size"],
        },
    ),
)


def get_operation(name: str) -> Optional[OperationDescriptor]:
    """Look a registered operation up by name."""
    for descriptor in OPERATIONS:
        if descriptor.name == name:
            return descriptor
    return None


class SearchProductsArgs(BaseModel):
    query: str
    size: Optional[str] = None
    color: Optional[str] = None

    @field_validator("size", "color", mode="before")
    @classmethod
    def _stringify(cls, value):
        return number_to_str(value)


class CheckStockArgs(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    size: str
    product_url: Optional[str] = Field(default=None, alias="productUrl")
    product_id: Optional[Union[int, str]] = Field(default=None, alias="productId")

    @field_validator("size", mode="before")
    @classmethod
    def _stringify(cls, value):
        return number_to_str(value)

    @field_validator("product_id", mode="before")
    @classmethod
    def _whole_number_id(cls, value):
        return whole_number_id(value)


class SearchProducts(BaseModel):
    args: SearchProductsArgs


class CheckStock(BaseModel):
    args: CheckStockArgs


class NoOp(BaseModel):
    text: str = ""


Operation = Union[SearchProducts, CheckStock, NoOp]


def parse_operation(name: Optional[str], arguments: Optional[Mapping[str, Any]],
                    text: Optional[str] = None) -> Operation:
    """
    Turn a classifier's chosen function and arguments into an Operation.

    Unknown names and arguments that fail validation are treated as if no
    operation had been chosen, so the shopper gets the classifier's reply.
    """
    fallback = NoOp(text=text or "")
    if not name:
        return fallback

    descriptor = get_operation(name)
    if descriptor is None:
        logger.warning(f"Classifier chose unknown operation {name!r}, falling back to reply")
        return fallback

    try:
        if descriptor.name == SEARCH_PRODUCTS:
            return SearchProducts(args=SearchProductsArgs.model_validate(dict(arguments or {})))
        return CheckStock(args=CheckStockArgs.model_validate(dict(arguments or {})))
    except ValidationError as e:
        logger.warning(f"Invalid arguments for {name}, falling back to reply: {e}")
        return fallback
