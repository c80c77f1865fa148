"""Shared fixtures for the catalog gateway tests."""

import pytest
from catalog_gateway.integrations.mock.provider import MockProvider
from catalog_gateway.models import Product, Variant, VariantAttribute
from catalog_gateway.tools.registry import NoOp


def make_variant(size, name="", sku=None, quantity=None, status="instock", attribute_name="Size"):
    return Variant(
        name=name or f"Variant {size}",
        sku=sku or f"SKU-{size}",
        attributes=[VariantAttribute(name=attribute_name, option=size)],
        stock_quantity=quantity,
        stock_status=status,
    )


class FakeClassifier:
    """Returns a fixed operation and records what it was asked."""

    def __init__(self, operation=None):
        self.operation = operation if operation is not None else NoOp(text="")
        self.messages = []

    def classify(self, message):
        self.messages.append(message)
        return self.operation


class FailingCatalog:
    """Catalog whose every read fails with the given error."""

    def __init__(self, error):
        self.error = error

    def search_products(self, query=None, size=None, color=None):
        raise self.error

    def get_product_by_slug(self, slug):
        raise self.error

    def list_variations(self, product_id):
        raise self.error


@pytest.fixture
def products():
    return [
        Product(id=7001, name="Scarpa Trail", price="120.00", stock_status="instock",
                permalink="https://shop.example.com/prodotto/scarpa-trail/"),
        Product(id=7002, name="Scarpa Urban", price="95.00", stock_status="outofstock",
                permalink="https://shop.example.com/prodotto/scarpa-urban/"),
    ]


@pytest.fixture
def variations():
    return {
        7001: [
            make_variant("42", name="Scarpa Trail - 42", sku="TR-42", quantity=4),
            make_variant("44", name="Scarpa Trail - 44", sku="TR-44-A", quantity=2),
            make_variant("44", name="Scarpa Trail - 44 bis", sku="TR-44-B", quantity=9),
        ],
        7002: [
            make_variant("41", name="Scarpa Urban - 41", sku="UR-41", quantity=None, status="onbackorder"),
        ],
    }


@pytest.fixture
def catalog(products, variations):
    return MockProvider(
        products=products,
        variations=variations,
        slugs={"scarpa-trail": 7001, "scarpa-urban": 7002},
    )
