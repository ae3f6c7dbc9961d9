"""Fence estimator: takeoff, price lookup and costing in one call."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fenceline.cost import CostCalculator
from fenceline.models.estimate import FenceEstimate
from fenceline.takeoff import TakeoffCalculator

if TYPE_CHECKING:
    from fenceline.data.repository import PricingRepository
    from fenceline.models.takeoff import EstimationInput

logger = logging.getLogger(__name__)


def _format_length(length: float) -> str:
    if float(length).is_integer():
        return str(int(length))
    return str(length)


def build_notes(estimation_input: EstimationInput) -> str:
    """Summary text carried onto estimates built from a takeoff."""
    return (
        f"Chainlink {estimation_input.fence_type} {estimation_input.fence_height}' fence\n"
        f"Total linear feet: {_format_length(estimation_input.total_length)}\n"
        f"Runs: {len(estimation_input.runs)}\n"
        f"Ends: {estimation_input.ends}\n"
        f"Corners: {estimation_input.corners}"
    )


class FenceEstimator:
    """Produces priced fence estimates.

    Args:
        pricing: Repository of price lists keyed by fence type and height.
        takeoff: Takeoff calculator to use; a permissive one by default.
        cost: Cost calculator to use.
    """

    def __init__(
        self,
        pricing: PricingRepository,
        takeoff: TakeoffCalculator | None = None,
        cost: CostCalculator | None = None,
    ) -> None:
        self._pricing = pricing
        self._takeoff = takeoff or TakeoffCalculator()
        self._cost = cost or CostCalculator()

    @property
    def pricing(self) -> PricingRepository:
        return self._pricing

    @property
    def takeoff(self) -> TakeoffCalculator:
        return self._takeoff

    @property
    def cost(self) -> CostCalculator:
        return self._cost

    def estimate(self, estimation_input: EstimationInput) -> FenceEstimate:
        """Compute the takeoff and, when a price list exists, its cost.

        An unconfigured fence type/height is not an error: the estimate is
        returned with ``pricing``, ``breakdown`` and ``total_cost`` unset.

        Raises:
            ValidationError: If the takeoff calculator validates and rejects
                the input.
        """
        result = self._takeoff.compute(estimation_input)
        notes = build_notes(estimation_input)

        pricing = self._pricing.get_pricing(
            estimation_input.fence_type, estimation_input.fence_height
        )
        if pricing is None:
            logger.warning(
                "No pricing configured for %s %s'; returning unpriced estimate",
                estimation_input.fence_type,
                estimation_input.fence_height,
            )
            return FenceEstimate(input=estimation_input, result=result, notes=notes)

        # The breakdown also itemises priced gates and add-ons, so its total
        # can exceed the core total_cost.
        breakdown = self._cost.breakdown(result, pricing)
        return FenceEstimate(
            input=estimation_input,
            result=result,
            pricing=pricing,
            breakdown=breakdown,
            total_cost=self._cost.compute_cost(result, pricing),
            notes=notes,
        )
