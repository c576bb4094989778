"""
Selling-price table for packet sizes.

Prices are resolved through three tiers:
1. stored override for (variant, size), when positive
2. built-in default column for the variant
3. linear per-gram rate of the variant's coarse category
"""

import math
from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, model_validator

# Packet sizes offered, in grams
PACKET_SIZES: tuple[int, ...] = (50, 100, 250, 500, 1000)

DEFAULT_VARIANT = "retail"


class PriceCategory(str, Enum):
    """Coarse pricing category used by the linear fallback."""

    RETAIL = "retail"
    WHOLESALE = "wholesale"


DEFAULT_PRICES: dict[str, dict[int, float]] = {
    "retail": {50: 15.0, 100: 25.0, 250: 70.0, 500: 100.0, 1000: 250.0},
    "wholesale": {50: 12.0, 100: 20.0, 250: 56.0, 500: 80.0, 1000: 200.0},
}

# Per-gram rates for sizes with neither an override nor a default
FALLBACK_RATES: dict[PriceCategory, float] = {
    PriceCategory.RETAIL: 0.25,
    PriceCategory.WHOLESALE: 0.2,
}


def normalize_variant(variant: str | None) -> str:
    """Normalize a variant tag: strip, lowercase, default to retail."""
    tag = (variant or "").strip().lower()
    return tag or DEFAULT_VARIANT


def category_for(variant: str | None) -> PriceCategory:
    """Map a variant tag to its pricing category."""
    if normalize_variant(variant) == PriceCategory.WHOLESALE.value:
        return PriceCategory.WHOLESALE
    return PriceCategory.RETAIL


def fallback_price(variant: str | None, size: int) -> float:
    """Linear price estimate: size in grams times the category rate."""
    return max(size, 0) * FALLBACK_RATES[category_for(variant)]


def _clean_prices(raw: Any) -> tuple[dict[str, dict[int, float]], list[str]]:
    """Keep only well-formed (variant, size, price) entries."""
    if not isinstance(raw, Mapping):
        return {}, [f"price data is {type(raw).__name__}, expected a mapping"]

    problems: list[str] = []
    clean: dict[str, dict[int, float]] = {}
    for variant, column in raw.items():
        tag = normalize_variant(str(variant))
        if not isinstance(column, Mapping):
            problems.append(f"{tag}: column is not a mapping")
            continue
        entries = clean.setdefault(tag, {})
        for size, price in column.items():
            try:
                size_g = int(size)
                value = float(price)
            except (TypeError, ValueError):
                problems.append(f"{tag}/{size}: unreadable entry {price!r}")
                continue
            if size_g <= 0 or not math.isfinite(value) or value < 0:
                problems.append(f"{tag}/{size}: invalid price {price!r}")
                continue
            entries[size_g] = value
    return clean, problems


class PricingTable(BaseModel):
    """Variant tag -> packet size (g) -> unit price."""

    prices: dict[str, dict[int, float]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def drop_invalid_entries(cls, data: Any) -> Any:
        """Discard malformed entries instead of failing validation."""
        if isinstance(data, Mapping) and "prices" in data:
            clean, _ = _clean_prices(data["prices"])
            return {**data, "prices": clean}
        return data

    @classmethod
    def from_raw(cls, raw: Any) -> tuple["PricingTable", list[str]]:
        """
        Build a table from a loosely-typed variant -> size -> price mapping.

        Returns the table and a description of every entry that was dropped.
        A structure that is not a mapping at all yields an empty table.
        """
        clean, problems = _clean_prices(raw)
        return cls(prices=clean), problems

    @classmethod
    def with_defaults(cls) -> "PricingTable":
        """Table pre-filled with the built-in retail and wholesale columns."""
        return cls(prices={tag: dict(column) for tag, column in DEFAULT_PRICES.items()})

    def stored_price(self, variant: str | None, size: int) -> float | None:
        """Explicit override for (variant, size), if a positive one exists."""
        price = self.prices.get(normalize_variant(variant), {}).get(size)
        if price is not None and price > 0:
            return price
        return None

    def get_price(self, variant: str | None, size: int) -> float:
        """Resolve the unit price; always a finite, non-negative number."""
        stored = self.stored_price(variant, size)
        if stored is not None:
            return stored

        default = DEFAULT_PRICES.get(normalize_variant(variant), {}).get(size)
        if default is not None:
            return default

        return fallback_price(variant, size)

    def set_price(self, variant: str | None, size: int, price: float) -> bool:
        """
        Overwrite the stored price for (variant, size).

        Negative or non-finite prices are ignored. A price of zero clears
        the override so the default applies again.

        Returns:
            True if the table changed
        """
        if size <= 0 or not math.isfinite(price) or price < 0:
            return False
        self.prices.setdefault(normalize_variant(variant), {})[size] = float(price)
        return True

    def column(
        self, variant: str | None, sizes: Iterable[int] = PACKET_SIZES
    ) -> dict[int, float]:
        """Resolve a whole price column at once."""
        return {size: self.get_price(variant, size) for size in sizes}

    def variants(self) -> list[str]:
        """Variants with a stored or built-in column, defaults first."""
        known = list(DEFAULT_PRICES)
        known.extend(tag for tag in sorted(self.prices) if tag not in DEFAULT_PRICES)
        return known

    def resolved(
        self, sizes: Iterable[int] = PACKET_SIZES
    ) -> dict[str, dict[int, float]]:
        """Every known variant's column with the fallback chain applied."""
        sizes = tuple(sizes)
        return {tag: self.column(tag, sizes) for tag in self.variants()}
