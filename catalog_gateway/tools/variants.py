"""Variant matching by size attribute."""

from typing import Iterable, Optional, Sequence
from ..models import Variant, VariantAttribute

# "taglia" is the size attribute name of the Italian store (pa_taglia)
DEFAULT_SIZE_KEYWORDS = ("size", "taglia")


def _normalize(value: Optional[str]) -> str:
    return (value or "").strip().casefold()


def is_size_attribute(attribute: VariantAttribute, keywords: Iterable[str] = DEFAULT_SIZE_KEYWORDS) -> bool:
    """True when the attribute name contains one of the size keywords."""
    name = _normalize(attribute.name)
    return any(_normalize(keyword) in name for keyword in keywords if keyword)


def matches_size(variant: Variant, size: str, keywords: Iterable[str] = DEFAULT_SIZE_KEYWORDS) -> bool:
    wanted = _normalize(size)
    return any(
        is_size_attribute(attribute, keywords) and _normalize(attribute.option) == wanted
        for attribute in variant.attributes
    )


def find_variant_by_size(variants: Sequence[Variant], size: str,
                         keywords: Iterable[str] = DEFAULT_SIZE_KEYWORDS) -> Optional[Variant]:
    """
    Pick the first variant, in catalog order, sized ``size``.

    Attribute names match on a case-insensitive substring ("Size", "pa_taglia").
    Options must equal the requested size exactly, ignoring case and surrounding
    whitespace, so "44" never matches "144".
    """
    keywords = tuple(keywords)
    for variant in variants:
        if matches_size(variant, size, keywords):
            return variant
    return None
