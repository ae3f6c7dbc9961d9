"""fenceline chain-link fence takeoff and costing engine.

Usage::

    from fenceline import EstimationInput, FenceRun, FenceType, calculate_materials

    result = calculate_materials(
        EstimationInput(
            runs=[FenceRun(length=100)],
            fence_height="4",
            fence_type=FenceType.RESIDENTIAL,
            ends=2,
        )
    )
"""

__version__ = "0.1.0"

from fenceline.cost import CostCalculator, calculate_cost
from fenceline.engine import FenceEstimator
from fenceline.exceptions import (
    FencelineError,
    PricingDataError,
    PricingNotConfiguredError,
    ValidationError,
)
from fenceline.factory import create_default_estimator
from fenceline.models.enums import (
    FenceColor,
    FenceType,
    Material,
    PipeWeight,
    ValidationErrorKind,
)
from fenceline.models.estimate import FenceEstimate
from fenceline.models.pricing import CostBreakdown, MaterialCost, PricingConfig
from fenceline.models.takeoff import EstimationInput, EstimationResult, FenceRun
from fenceline.takeoff import TakeoffCalculator, calculate_materials

__all__ = [
    "CostBreakdown",
    "CostCalculator",
    "EstimationInput",
    "EstimationResult",
    "FenceColor",
    "FenceEstimate",
    "FenceEstimator",
    "FenceRun",
    "FenceType",
    "FencelineError",
    "Material",
    "MaterialCost",
    "PipeWeight",
    "PricingConfig",
    "PricingDataError",
    "PricingNotConfiguredError",
    "TakeoffCalculator",
    "ValidationError",
    "ValidationErrorKind",
    "__version__",
    "calculate_cost",
    "calculate_materials",
    "create_default_estimator",
]
