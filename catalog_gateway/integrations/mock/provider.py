"""Mock catalog provider for testing and development."""

from typing import Dict, List, Optional, Union
from urllib.parse import urlencode
from ...models import Product, SearchPage, Variant, VariantAttribute
from ..woocommerce.products import build_search_params


class MockProvider:
    """Serves an in-memory catalog in standard format."""

    def __init__(self, products: Optional[List[Product]] = None,
                 variations: Optional[Dict[Union[int, str], List[Variant]]] = None,
                 slugs: Optional[Dict[str, Union[int, str]]] = None):
        self.products = products if products is not None else self._generate_mock_products()
        self.variations = variations if variations is not None else self._generate_mock_variations()
        self.slugs = slugs if slugs is not None else self._generate_mock_slugs()

    def search_products(self, query: Optional[str] = None, size: Optional[str] = None,
                        color: Optional[str] = None) -> SearchPage:
        """Search mock products by name, narrowed by variant attributes."""
        params = build_search_params(query, size=size, color=color)
        results = list(self.products)

        if query:
            query_lower = query.lower()
            results = [p for p in results if query_lower in p.name.lower()]

        for wanted in (color, size):
            if wanted:
                results = [p for p in results if self._has_option(p.id, wanted)]

        return SearchPage(products=results[:5], query_url=f"mock://products?{urlencode(params)}")

    def get_product_by_slug(self, slug: str) -> Optional[Product]:
        """Get product by slug."""
        product_id = self.slugs.get(slug)
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def list_variations(self, product_id: Union[int, str]) -> List[Variant]:
        """List variations of a product."""
        variations = self.variations.get(product_id)
        if variations is None and isinstance(product_id, str) and product_id.isdigit():
            variations = self.variations.get(int(product_id))
        return list(variations or [])

    def _has_option(self, product_id: Union[int, str], option: str) -> bool:
        return any(
            attribute.option.lower() == option.lower()
            for variant in self.variations.get(product_id, [])
            for attribute in variant.attributes
        )

    def _generate_mock_products(self) -> List[Product]:
        """Generate mock product data."""
        return [
            Product(
                id=101,
                name="Sneaker Runner",
                price="89.90",
                stock_status="instock",
                permalink="https://shop.example.com/prodotto/sneaker-runner/",
            ),
            Product(
                id=102,
                name="Sneaker Court",
                price="79.00",
                stock_status="outofstock",
                permalink="https://shop.example.com/prodotto/sneaker-court/",
            ),
            Product(
                id=103,
                name="Felpa Hoodie",
                price="59.00",
                stock_status="instock",
                permalink="https://shop.example.com/prodotto/felpa-hoodie/",
            ),
        ]

    def _generate_mock_variations(self) -> Dict[Union[int, str], List[Variant]]:
        """Generate mock variations keyed by product id."""
        def variant(product_id, name, size, color, quantity, status):
            return Variant(
                id=f"{product_id}-{size}",
                name=name,
                sku=f"SKU-{product_id}-{size}",
                attributes=[
                    VariantAttribute(name="Colore", option=color),
                    VariantAttribute(name="Taglia", option=size),
                ],
                stock_quantity=quantity,
                stock_status=status,
            )

        return {
            101: [
                variant(101, "Sneaker Runner - 42", "42", "nero", 3, "instock"),
                variant(101, "Sneaker Runner - 43", "43", "nero", 0, "outofstock"),
                variant(101, "Sneaker Runner - 44", "44", "bianco", 7, "instock"),
            ],
            102: [
                variant(102, "Sneaker Court - 41", "41", "bianco", 0, "outofstock"),
            ],
            103: [
                variant(103, "Felpa Hoodie - M", "M", "grigio", None, "instock"),
                variant(103, "Felpa Hoodie - L", "L", "grigio", 2, "instock"),
            ],
        }

    def _generate_mock_slugs(self) -> Dict[str, Union[int, str]]:
        return {
            "sneaker-runner": 101,
            "sneaker-court": 102,
            "felpa-hoodie": 103,
        }
