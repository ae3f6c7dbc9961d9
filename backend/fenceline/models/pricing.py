"""Price list and cost breakdown models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from fenceline.models.enums import Material

# Material -> PricingConfig field holding its unit price
PRICE_FIELDS: dict[Material, str] = {
    Material.INTERIOR_LINE_POSTS: "interior_line_post_price",
    Material.FABRIC: "fabric_price_per_foot",
    Material.TOP_RAIL: "top_rail_price_per_stick",
    Material.TIE_WIRES: "tie_wire_price",
    Material.LOOP_CAPS: "loop_cap_price",
    Material.POST_CAPS: "post_cap_price",
    Material.BRACE_BANDS: "brace_band_price",
    Material.TENSION_BARS: "tension_bar_price",
    Material.TENSION_BANDS: "tension_band_price",
    Material.NUTS_AND_BOLTS: "nut_and_bolt_price",
    Material.GATE_POSTS: "gate_post_price",
    Material.GATE_HARDWARE_SETS: "gate_hardware_set_price",
    Material.GATE_LATCHES: "gate_latch_price",
    Material.GATE_HINGES: "gate_hinge_price",
    Material.PRIVACY_SLATS: "privacy_slat_price",
    Material.BARBED_WIRE: "barbed_wire_price_per_foot",
    Material.BOTTOM_RAIL: "bottom_rail_price_per_stick",
    Material.RAIL_ENDS: "rail_end_price",
}

# Materials every price list must cover
CORE_MATERIALS: tuple[Material, ...] = (
    Material.INTERIOR_LINE_POSTS,
    Material.FABRIC,
    Material.TOP_RAIL,
    Material.TIE_WIRES,
    Material.LOOP_CAPS,
    Material.POST_CAPS,
    Material.BRACE_BANDS,
    Material.TENSION_BARS,
    Material.TENSION_BANDS,
    Material.NUTS_AND_BOLTS,
)


class PricingConfig(BaseModel):
    """Unit prices for one fence type and height.

    The ten core prices are required. Gate and add-on prices are optional;
    a material whose price is missing is reported as unpriced rather than
    costed at zero.
    """

    interior_line_post_price: float = Field(ge=0)
    fabric_price_per_foot: float = Field(ge=0)
    top_rail_price_per_stick: float = Field(ge=0)
    tie_wire_price: float = Field(ge=0)
    loop_cap_price: float = Field(ge=0)
    post_cap_price: float = Field(ge=0)
    brace_band_price: float = Field(ge=0)
    tension_bar_price: float = Field(ge=0)
    tension_band_price: float = Field(ge=0)
    nut_and_bolt_price: float = Field(ge=0)

    gate_post_price: float | None = Field(default=None, ge=0)
    gate_hardware_set_price: float | None = Field(default=None, ge=0)
    gate_latch_price: float | None = Field(default=None, ge=0)
    gate_hinge_price: float | None = Field(default=None, ge=0)
    privacy_slat_price: float | None = Field(default=None, ge=0)
    barbed_wire_price_per_foot: float | None = Field(default=None, ge=0)
    bottom_rail_price_per_stick: float | None = Field(default=None, ge=0)
    rail_end_price: float | None = Field(default=None, ge=0)

    def unit_price(self, material: Material) -> float | None:
        price: float | None = getattr(self, PRICE_FIELDS[material])
        return price

    @classmethod
    def zero(cls) -> PricingConfig:
        """A price list with every price, optional ones included, at zero."""
        return cls(**{field: 0.0 for field in PRICE_FIELDS.values()})


class MaterialCost(BaseModel):
    """Cost of a single material line."""

    material: Material
    quantity: float
    unit_price: float
    total: float


class CostBreakdown(BaseModel):
    """Itemised cost of a takeoff against a price list."""

    lines: list[MaterialCost] = Field(default_factory=list)
    total: float = 0.0
    unpriced: list[Material] = Field(default_factory=list)
