"""Domain models for the fenceline takeoff engine."""

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

__all__ = [
    "CostBreakdown",
    "EstimationInput",
    "EstimationResult",
    "FenceColor",
    "FenceEstimate",
    "FenceRun",
    "FenceType",
    "Material",
    "MaterialCost",
    "PipeWeight",
    "PricingConfig",
    "ValidationErrorKind",
]
