"""
Pricing table loading.

Any stored or submitted price structure goes through `coerce_pricing_table`
once, so every later lookup works on a clean table. Corrupt input is
logged and dropped; it never fails the caller.
"""

from typing import Any

from snackbooks.config import get_logger
from snackbooks.core.entities.pricing import PricingTable

logger = get_logger(__name__)


def coerce_pricing_table(raw: Any) -> PricingTable:
    """Build a usable pricing table from whatever was stored."""
    if isinstance(raw, PricingTable):
        return raw
    if raw is None:
        return PricingTable.with_defaults()

    table, problems = PricingTable.from_raw(raw)
    if problems:
        logger.warning(
            "pricing_entries_dropped",
            count=len(problems),
            problems=problems[:10],
        )
    return table
