"""Pricing data layer for the fenceline engine."""

from fenceline.data.repository import (
    PricingRepository,
    PricingTable,
    load_pricing_table,
    parse_pricing_table,
)
from fenceline.data.seed import SEED_PRICING

__all__ = [
    "PricingRepository",
    "PricingTable",
    "SEED_PRICING",
    "load_pricing_table",
    "parse_pricing_table",
]
