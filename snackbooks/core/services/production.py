"""
Production requirement and cost calculations.

Converts a finished-product weight into raw-material quantities and
prices those quantities. Pure functions: no I/O, no shared state.
"""

import math
from collections.abc import Callable, Iterable, Mapping

from snackbooks.core.entities.order import Order
from snackbooks.core.entities.production import (
    DEFAULT_PRODUCTION_CONFIG,
    Material,
    MaterialRequirements,
    ProductionConfig,
)

PriceLookup = Callable[[str], float | None] | Mapping[str, float]


def requirements_for(
    weight_grams: float,
    config: ProductionConfig = DEFAULT_PRODUCTION_CONFIG,
) -> MaterialRequirements:
    """
    Raw materials needed to produce `weight_grams` of finished product.

    Flour scales with the yield ratio, oil/salt/spice with fixed ratios
    of the finished weight. Gas time is quantized to whole batch slots:
    a 5.1 kg run cooks as two 5 kg slots. Negative or non-finite
    weights count as nothing.
    """
    if not math.isfinite(weight_grams) or weight_grams <= 0:
        weight_grams = 0
    weight_kg = weight_grams / 1000
    batch_slots = math.ceil(weight_kg / config.batch_unit_kg)

    return MaterialRequirements(
        flour_kg=weight_kg / config.yield_ratio,
        oil_l=weight_kg * config.oil_ratio,
        salt_kg=weight_kg * config.salt_ratio,
        spice_kg=weight_kg * config.spice_ratio,
        gas_minutes=batch_slots * config.minutes_per_batch,
    )


def material_price_lookup(materials: Iterable[Material]) -> Callable[[str], float | None]:
    """Case-insensitive material-name -> unit price lookup."""
    prices = {m.name.strip().lower(): m.price_per_unit for m in materials}

    def lookup(name: str) -> float | None:
        return prices.get(name.strip().lower())

    return lookup


def _resolve(price_lookup: PriceLookup, name: str) -> float | None:
    if isinstance(price_lookup, Mapping):
        price = price_lookup.get(name)
    else:
        price = price_lookup(name)
    if price is None or not math.isfinite(price):
        return None
    return price


def cost_of(
    requirements: MaterialRequirements,
    price_lookup: PriceLookup,
    config: ProductionConfig = DEFAULT_PRODUCTION_CONFIG,
) -> float:
    """
    Price a set of material requirements.

    A material the lookup does not know contributes nothing. Gas is
    charged per cooking minute at the configured rate.
    """
    total = 0.0
    for name, quantity in requirements.material_quantities().items():
        price = _resolve(price_lookup, name)
        if price is None:
            continue
        total += quantity * price

    total += requirements.gas_minutes * config.gas_cost_per_minute
    return total


def order_production_cost(
    order: Order,
    price_lookup: PriceLookup,
    config: ProductionConfig = DEFAULT_PRODUCTION_CONFIG,
) -> float:
    """Estimated production cost of an order's total weight."""
    return cost_of(requirements_for(order.total_weight, config), price_lookup, config)


def order_profit(
    order: Order,
    price_lookup: PriceLookup,
    config: ProductionConfig = DEFAULT_PRODUCTION_CONFIG,
) -> float:
    """Order revenue minus its estimated production cost."""
    return order.total_amount - order_production_cost(order, price_lookup, config)
