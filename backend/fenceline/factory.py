"""Factory functions for creating pre-configured FenceEstimator instances."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fenceline.data.repository import PricingRepository, load_pricing_table
from fenceline.data.seed import SEED_PRICING
from fenceline.engine import FenceEstimator
from fenceline.takeoff import TakeoffCalculator

if TYPE_CHECKING:
    from fenceline.config import Settings

logger = logging.getLogger(__name__)


def create_default_estimator(settings: Settings | None = None) -> FenceEstimator:
    """Create a FenceEstimator wired up with pricing data.

    Uses the pricing file named by ``settings.pricing_file`` when set,
    otherwise the built-in seed price lists. ``settings.strict_validation``
    turns on input validation.

    Example::

        from fenceline import create_default_estimator

        estimator = create_default_estimator()
        estimate = estimator.estimate(estimation_input)
    """
    if settings is not None and settings.pricing_file is not None:
        logger.info("Loading pricing table from %s", settings.pricing_file)
        table = load_pricing_table(settings.pricing_file)
    else:
        table = SEED_PRICING

    strict = settings.strict_validation if settings is not None else False
    return FenceEstimator(
        PricingRepository(table),
        takeoff=TakeoffCalculator(validate=strict),
    )
