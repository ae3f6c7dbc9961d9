"""Combined estimate output model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from fenceline.models.pricing import CostBreakdown, PricingConfig
from fenceline.models.takeoff import EstimationInput, EstimationResult


class FenceEstimate(BaseModel):
    """A takeoff together with its cost, when a price list was available."""

    input: EstimationInput
    result: EstimationResult
    pricing: PricingConfig | None = None
    breakdown: CostBreakdown | None = None
    total_cost: float | None = None
    notes: str

    @property
    def is_priced(self) -> bool:
        return self.total_cost is not None

    def to_summary_dict(self) -> dict[str, Any]:
        """Flat, display-ready summary for frontend consumption."""
        from fenceline.formatting import format_currency, format_feet, format_material_label

        materials = [
            {
                "material": material.value,
                "label": format_material_label(material),
                "quantity": quantity,
            }
            for material, quantity in self.result.material_quantities().items()
        ]
        return {
            "fence_type": self.input.fence_type.value,
            "fence_height": self.input.fence_height,
            "total_length_formatted": format_feet(self.result.fabric_footage),
            "pipe_weight": self.result.pipe_weight,
            "materials": materials,
            "total_cost_formatted": (
                format_currency(self.total_cost) if self.total_cost is not None else None
            ),
            "notes": self.notes,
        }
