"""Costing of a takeoff against a price list."""

from __future__ import annotations

import logging

from fenceline.models.enums import Material
from fenceline.models.pricing import (
    CORE_MATERIALS,
    PRICE_FIELDS,
    CostBreakdown,
    MaterialCost,
    PricingConfig,
)
from fenceline.models.takeoff import EstimationResult

logger = logging.getLogger(__name__)


class CostCalculator:
    """Prices an EstimationResult.

    Materials absent from the result add nothing; there is no zero-quantity
    line. No currency rounding is applied, callers round for display.
    """

    def compute_cost(self, result: EstimationResult, pricing: PricingConfig) -> float:
        """Total cost of the core takeoff materials.

        Fabric footage is always priced. Gate and add-on quantities are not
        part of this total; use :meth:`breakdown` to cost those.
        """
        total = 0.0
        for material in CORE_MATERIALS:
            quantity = result.quantity(material)
            if material is not Material.FABRIC and not quantity:
                continue
            unit_price: float = getattr(pricing, PRICE_FIELDS[material])
            total += (quantity or 0) * unit_price
        return total

    def breakdown(self, result: EstimationResult, pricing: PricingConfig) -> CostBreakdown:
        """Itemised cost of every material present in the result.

        Materials whose unit price is not configured are listed under
        ``unpriced`` and left out of the total.
        """
        lines: list[MaterialCost] = []
        unpriced: list[Material] = []

        for material, quantity in result.material_quantities().items():
            if material is not Material.FABRIC and not quantity:
                continue
            unit_price = pricing.unit_price(material)
            if unit_price is None:
                unpriced.append(material)
                continue
            lines.append(
                MaterialCost(
                    material=material,
                    quantity=quantity,
                    unit_price=unit_price,
                    total=quantity * unit_price,
                )
            )

        if unpriced:
            logger.warning(
                "No unit price configured for %s; left out of the total",
                ", ".join(m.value for m in unpriced),
            )

        return CostBreakdown(
            lines=lines,
            total=sum(line.total for line in lines),
            unpriced=unpriced,
        )


def calculate_cost(result: EstimationResult, pricing: PricingConfig) -> float:
    """Functional shortcut for ``CostCalculator().compute_cost(...)``."""
    return CostCalculator().compute_cost(result, pricing)
