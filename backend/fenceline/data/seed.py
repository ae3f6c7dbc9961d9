"""Seed price lists for the fenceline engine.

Illustrative 2025 supplier prices for galvanized chain-link. Real
deployments load their own table through ``FENCELINE_PRICING_FILE``.
"""

from fenceline.models.enums import FenceType
from fenceline.models.pricing import PricingConfig


def _residential(height: int) -> PricingConfig:
    # Post and fabric cost scale with height; fittings do not
    return PricingConfig(
        interior_line_post_price=round(14.50 + 2.25 * height, 2),
        fabric_price_per_foot=round(0.85 + 0.30 * height, 2),
        top_rail_price_per_stick=24.00,
        tie_wire_price=0.12,
        loop_cap_price=1.60,
        post_cap_price=2.40,
        brace_band_price=1.35,
        tension_bar_price=round(1.10 * height, 2),
        tension_band_price=1.15,
        nut_and_bolt_price=0.30,
        gate_post_price=round(28.00 + 3.50 * height, 2),
        gate_hardware_set_price=32.00,
        gate_latch_price=9.50,
        gate_hinge_price=6.75,
        privacy_slat_price=1.90,
        barbed_wire_price_per_foot=0.22,
        bottom_rail_price_per_stick=24.00,
        rail_end_price=2.10,
    )


def _commercial(height: int) -> PricingConfig:
    return PricingConfig(
        interior_line_post_price=round(22.00 + 3.40 * height, 2),
        fabric_price_per_foot=round(1.20 + 0.42 * height, 2),
        top_rail_price_per_stick=38.00,
        tie_wire_price=0.15,
        loop_cap_price=2.30,
        post_cap_price=3.60,
        brace_band_price=1.95,
        tension_bar_price=round(1.45 * height, 2),
        tension_band_price=1.60,
        nut_and_bolt_price=0.40,
        gate_post_price=round(42.00 + 5.00 * height, 2),
        gate_hardware_set_price=48.00,
        gate_latch_price=14.00,
        gate_hinge_price=11.50,
        privacy_slat_price=2.40,
        barbed_wire_price_per_foot=0.28,
        bottom_rail_price_per_stick=38.00,
        rail_end_price=3.20,
    )


SEED_PRICING: dict[FenceType, dict[str, PricingConfig]] = {
    FenceType.RESIDENTIAL: {str(h): _residential(h) for h in (3, 4, 5, 6)},
    FenceType.COMMERCIAL: {str(h): _commercial(h) for h in (4, 5, 6, 7, 8, 10)},
}
