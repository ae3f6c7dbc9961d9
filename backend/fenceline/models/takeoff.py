"""Takeoff input and output models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from fenceline.models.enums import FenceColor, FenceType, Material


class FenceRun(BaseModel):
    """A single straight measured segment of fence, in linear feet."""

    length: float


class EstimationInput(BaseModel):
    """Fence geometry and structural parameters for a takeoff.

    The model deliberately accepts negative counts and lengths; rejecting
    them is the job of :mod:`fenceline.validation`.
    """

    runs: list[FenceRun] = Field(default_factory=list)
    fence_height: str
    fence_type: FenceType
    ends: int = 0
    corners: int = 0
    fence_color: FenceColor | None = None

    single_gates: int = 0
    double_gates: int = 0
    pedestrian_gates: int = 0
    include_privacy_slats: bool = False
    include_barbed_wire: bool = False
    include_bottom_rail: bool = False
    include_rail_ends: bool = False

    @field_validator("fence_height", mode="before")
    @classmethod
    def height_as_string(cls, v: Any) -> Any:
        # Heights are stored as strings ("4", "6"), but JSON clients often
        # send bare numbers.
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @property
    def total_length(self) -> float:
        return sum(run.length for run in self.runs)


class EstimationResult(BaseModel):
    """Sparse bill of quantities produced by a takeoff.

    Only ``fabric_type``, ``fabric_footage`` and ``pipe_weight`` are always
    set. Every other field is ``None`` unless the takeoff produced a
    meaningful quantity for it, so ``model_dump(exclude_none=True)`` yields
    exactly the materials that need to be ordered.
    """

    fabric_type: str
    fabric_footage: float
    pipe_weight: str

    interior_line_posts: int | None = None
    top_rail_sticks: int | None = None
    tie_wires: int | None = None
    loop_caps: int | None = None
    post_caps: int | None = None
    brace_bands: int | None = None
    tension_bars: int | None = None
    tension_bands: int | None = None
    nuts_and_bolts: int | None = None

    # Caller-supplied counts, echoed for traceability
    ends: int | None = None
    corners: int | None = None
    fence_color: FenceColor | None = None

    single_gates: int | None = None
    double_gates: int | None = None
    pedestrian_gates: int | None = None
    gate_posts: int | None = None
    gate_hardware_sets: int | None = None
    gate_latches: int | None = None
    gate_hinges: int | None = None

    privacy_slats: int | None = None
    barbed_wire: int | None = None
    bottom_rail_sticks: int | None = None
    rail_ends: int | None = None

    @property
    def terminal_posts(self) -> int:
        return (self.ends or 0) + (self.corners or 0)

    def quantity(self, material: Material) -> float | None:
        """Return the quantity for a material, or None when it is absent."""
        value: float | None = getattr(self, material.value)
        return value

    def material_quantities(self) -> dict[Material, float]:
        """Present material quantities, in display order."""
        quantities: dict[Material, float] = {}
        for material in Material:
            value = self.quantity(material)
            if value is not None:
                quantities[material] = value
        return quantities

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form with absent materials dropped."""
        return self.model_dump(mode="json", exclude_none=True)
