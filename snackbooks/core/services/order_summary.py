"""
Order summary calculation.

The single place where packet selections are turned into weights and
amounts; order totals and live quotes both come from here.
"""

from collections.abc import Iterable, Mapping

from snackbooks.core.entities.order import OrderSummary, PackageLineItem
from snackbooks.core.entities.pricing import PACKET_SIZES, PricingTable

PackageSelection = Mapping[int, int]


def _quantity(selection: PackageSelection, size: int) -> int:
    """Requested packets of `size`; missing or negative counts as zero."""
    return max(int(selection.get(size) or 0), 0)


def summarize(
    selection: PackageSelection,
    variant: str | None,
    table: PricingTable,
    sizes: Iterable[int] = PACKET_SIZES,
) -> OrderSummary:
    """
    Total weight (g), packet count and amount for a selection.

    Only the enumerated sizes are considered. An empty selection gives
    an all-zero summary.
    """
    total_weight = 0
    total_packets = 0
    total_amount = 0.0

    for size in sizes:
        qty = _quantity(selection, size)
        if qty == 0:
            continue
        total_weight += size * qty
        total_packets += qty
        total_amount += table.get_price(variant, size) * qty

    return OrderSummary(
        total_weight=total_weight,
        total_packets=total_packets,
        total_amount=total_amount,
    )


def build_line_items(
    selection: PackageSelection,
    variant: str | None,
    table: PricingTable,
    sizes: Iterable[int] = PACKET_SIZES,
) -> list[PackageLineItem]:
    """Line items for every enumerated size with a positive quantity."""
    items: list[PackageLineItem] = []
    for size in sizes:
        qty = _quantity(selection, size)
        if qty == 0:
            continue
        items.append(
            PackageLineItem(
                size=size,
                quantity=qty,
                unit_price=table.get_price(variant, size),
            )
        )
    return items
