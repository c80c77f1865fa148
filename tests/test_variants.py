from catalog_gateway.models import Variant, VariantAttribute
from catalog_gateway.tools.variants import find_variant_by_size, is_size_attribute
from .conftest import make_variant


def test_first_matching_variant_wins():
    variants = [make_variant("42"), make_variant("44", sku="first"), make_variant("44", sku="second")]

    variant = find_variant_by_size(variants, "44")

    assert variant is variants[1]
    assert variant.sku == "first"


def test_size_value_must_match_exactly():
    variants = [make_variant("144"), make_variant("4")]

    assert find_variant_by_size(variants, "44") is None


def test_size_value_is_case_insensitive():
    variants = [make_variant("xl")]

    assert find_variant_by_size(variants, "XL") is variants[0]
    assert find_variant_by_size(variants, " Xl ") is variants[0]


def test_attribute_name_contains_size_keyword():
    assert is_size_attribute(VariantAttribute(name="Shoe SIZE", option="44"))
    assert is_size_attribute(VariantAttribute(name="pa_taglia", option="44"))
    assert not is_size_attribute(VariantAttribute(name="Colore", option="44"))


def test_non_size_attribute_with_same_value_is_ignored():
    variant = Variant(
        name="Scarpa",
        sku="S-1",
        attributes=[VariantAttribute(name="Colore", option="44"), VariantAttribute(name="Taglia", option="42")],
        stock_status="instock",
    )

    assert find_variant_by_size([variant], "44") is None
    assert find_variant_by_size([variant], "42") is variant


def test_custom_keywords_restrict_matching():
    variants = [make_variant("44", attribute_name="Taglia")]

    assert find_variant_by_size(variants, "44", keywords=("size",)) is None
    assert find_variant_by_size(variants, "44", keywords=("taglia",)) is variants[0]


def test_no_variants():
    assert find_variant_by_size([], "44") is None
