# catalog_gateway/models.py
"""Catalog and request models shared by the gateway."""

from typing import List, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Product(BaseModel):
    """Catalog product as the gateway sees it."""
    id: Union[int, str]
    name: str = ""
    price: Optional[Union[str, float]] = None
    stock_status: Optional[str] = None
    permalink: Optional[str] = None

    def to_result(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "stock": self.stock_status,
            "url": self.permalink,
        }


class VariantAttribute(BaseModel):
    name: str = ""
    option: str = ""


class Variant(BaseModel):
    """A purchasable configuration of one product (usually one size)."""
    id: Optional[Union[int, str]] = None
    name: str = ""
    sku: Optional[str] = None
    attributes: List[VariantAttribute] = []
    stock_quantity: Optional[int] = None
    stock_status: Optional[str] = None


class SearchPage(BaseModel):
    """Products returned by a search plus the exact URL that produced them."""
    products: List[Product] = []
    query_url: str


def number_to_str(value):
    # sizes such as 44 may arrive as numbers
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(int(value)) if float(value).is_integer() else str(value)
    return value


def whole_number_id(value):
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        value = value.strip()
        return int(value) if value.isdigit() else (value or None)
    return value


class GatewayQuery(BaseModel):
    """Inbound request parameters, named as the HTTP surface names them.

    Parsing is lenient: any client input yields a query, never a validation error.
    """
    model_config = ConfigDict(populate_by_name=True)

    message: Optional[str] = None
    explicit_query: Optional[str] = Field(default=None, alias="q")
    size: Optional[str] = None
    color: Optional[str] = None
    product_id: Optional[Union[int, str]] = Field(default=None, alias="productId")
    product_url: Optional[str] = Field(default=None, alias="url")
    debug: bool = False

    @field_validator("message", "explicit_query", "size", "color", "product_url", mode="before")
    @classmethod
    def _text(cls, value):
        value = number_to_str(value)
        if value is None or isinstance(value, str):
            return value
        return str(value)

    @field_validator("product_id", mode="before")
    @classmethod
    def _product_id(cls, value):
        value = whole_number_id(value)
        if value is None or (isinstance(value, (int, str)) and not isinstance(value, bool)):
            return value
        return str(value)

    @field_validator("debug", mode="before")
    @classmethod
    def _debug(cls, value):
        # any non-empty flag enables debug, except the usual spellings of "off"
        if isinstance(value, str):
            return value.strip().lower() not in {"", "0", "false", "no", "off"}
        return bool(value)
