"""Tests for the CostCalculator."""

from __future__ import annotations

import pytest

from fenceline.cost import CostCalculator, calculate_cost
from fenceline.models.enums import FenceType, Material
from fenceline.models.pricing import PricingConfig
from fenceline.models.takeoff import EstimationInput, EstimationResult, FenceRun
from fenceline.takeoff import TakeoffCalculator


@pytest.fixture()
def cost_calculator() -> CostCalculator:
    return CostCalculator()


@pytest.fixture()
def pricing() -> PricingConfig:
    return PricingConfig(
        interior_line_post_price=20.0,
        fabric_price_per_foot=2.0,
        top_rail_price_per_stick=25.0,
        tie_wire_price=0.10,
        loop_cap_price=1.50,
        post_cap_price=2.50,
        brace_band_price=1.25,
        tension_bar_price=4.0,
        tension_band_price=1.0,
        nut_and_bolt_price=0.30,
    )


def _straight_run(**extras: object) -> EstimationResult:
    return TakeoffCalculator().compute(
        EstimationInput(
            runs=[FenceRun(length=100)],
            fence_height="4",
            fence_type=FenceType.RESIDENTIAL,
            ends=2,
            corners=0,
            **extras,
        )
    )


def _fabric_only(footage: float) -> EstimationResult:
    return EstimationResult(fabric_type="9ga wire", fabric_footage=footage, pipe_weight="SS20 WT")


class TestComputeCost:
    def test_straight_run_total(
        self, cost_calculator: CostCalculator, pricing: PricingConfig
    ) -> None:
        # 9 posts 180 + fabric 200 + rail 125 + ties 15 + loop caps 13.5
        # + post caps 5 + brace bands 2.5 + tension bars 8 + tension bands 8
        # + nuts/bolts 3
        total = cost_calculator.compute_cost(_straight_run(), pricing)
        assert total == pytest.approx(560.0)

    def test_zero_pricing_costs_nothing(self, cost_calculator: CostCalculator) -> None:
        results = [
            _straight_run(),
            _straight_run(single_gates=2, include_privacy_slats=True),
            _fabric_only(0.0),
        ]
        for result in results:
            assert cost_calculator.compute_cost(result, PricingConfig.zero()) == 0

    def test_fabric_is_always_priced(
        self, cost_calculator: CostCalculator, pricing: PricingConfig
    ) -> None:
        assert cost_calculator.compute_cost(_fabric_only(50.0), pricing) == pytest.approx(100.0)

    def test_absent_materials_add_nothing(self, cost_calculator: CostCalculator) -> None:
        expensive = PricingConfig(
            interior_line_post_price=1000.0,
            fabric_price_per_foot=1.0,
            top_rail_price_per_stick=1000.0,
            tie_wire_price=1000.0,
            loop_cap_price=1000.0,
            post_cap_price=1000.0,
            brace_band_price=1000.0,
            tension_bar_price=1000.0,
            tension_band_price=1000.0,
            nut_and_bolt_price=1000.0,
        )
        assert cost_calculator.compute_cost(_fabric_only(12.0), expensive) == pytest.approx(12.0)

    def test_no_rounding(self, cost_calculator: CostCalculator) -> None:
        pricing = PricingConfig.zero().model_copy(update={"fabric_price_per_foot": 0.333})
        assert cost_calculator.compute_cost(_fabric_only(10.0), pricing) == pytest.approx(3.33)

    def test_gates_are_not_in_core_total(
        self, cost_calculator: CostCalculator, pricing: PricingConfig
    ) -> None:
        priced = pricing.model_copy(update={"gate_post_price": 50.0})
        gated = _straight_run(single_gates=1)
        assert cost_calculator.compute_cost(gated, priced) == pytest.approx(560.0)

    def test_functional_shortcut(self, pricing: PricingConfig) -> None:
        assert calculate_cost(_straight_run(), pricing) == pytest.approx(560.0)


class TestBreakdown:
    def test_lines_follow_display_order(
        self, cost_calculator: CostCalculator, pricing: PricingConfig
    ) -> None:
        breakdown = cost_calculator.breakdown(_straight_run(), pricing)

        materials = [line.material for line in breakdown.lines]
        assert materials[:3] == [
            Material.INTERIOR_LINE_POSTS,
            Material.FABRIC,
            Material.TOP_RAIL,
        ]
        assert materials[-1] == Material.NUTS_AND_BOLTS
        assert len(breakdown.lines) == 10

    def test_line_totals(
        self, cost_calculator: CostCalculator, pricing: PricingConfig
    ) -> None:
        breakdown = cost_calculator.breakdown(_straight_run(), pricing)
        posts = breakdown.lines[0]

        assert posts.quantity == 9
        assert posts.unit_price == 20.0
        assert posts.total == pytest.approx(180.0)

    def test_matches_compute_cost_for_plain_fence(
        self, cost_calculator: CostCalculator, pricing: PricingConfig
    ) -> None:
        result = _straight_run()
        breakdown = cost_calculator.breakdown(result, pricing)

        assert breakdown.total == pytest.approx(cost_calculator.compute_cost(result, pricing))
        assert breakdown.unpriced == []

    def test_unpriced_extras_are_reported(
        self, cost_calculator: CostCalculator, pricing: PricingConfig
    ) -> None:
        result = _straight_run(single_gates=1, include_barbed_wire=True)
        breakdown = cost_calculator.breakdown(result, pricing)

        assert Material.GATE_POSTS in breakdown.unpriced
        assert Material.GATE_HINGES in breakdown.unpriced
        assert Material.BARBED_WIRE in breakdown.unpriced
        assert breakdown.total == pytest.approx(560.0)

    def test_priced_extras_are_included(
        self, cost_calculator: CostCalculator, pricing: PricingConfig
    ) -> None:
        priced = pricing.model_copy(
            update={
                "gate_post_price": 50.0,
                "gate_hardware_set_price": 30.0,
                "gate_latch_price": 10.0,
                "gate_hinge_price": 5.0,
            }
        )
        # One single gate: 2 posts, 1 hardware set, 1 latch, 2 hinges
        breakdown = cost_calculator.breakdown(_straight_run(single_gates=1), priced)

        assert breakdown.unpriced == []
        assert breakdown.total == pytest.approx(560.0 + 100.0 + 30.0 + 10.0 + 10.0)

    def test_empty_fence_has_fabric_line(
        self, cost_calculator: CostCalculator, pricing: PricingConfig
    ) -> None:
        breakdown = cost_calculator.breakdown(_fabric_only(0.0), pricing)

        assert [line.material for line in breakdown.lines] == [Material.FABRIC]
        assert breakdown.total == 0


class TestPricingConfig:
    def test_negative_price_rejected(self) -> None:
        from pydantic import ValidationError as PydanticValidationError

        with pytest.raises(PydanticValidationError):
            PricingConfig.model_validate(
                {**PricingConfig.zero().model_dump(), "tie_wire_price": -0.1}
            )

    def test_core_prices_required(self) -> None:
        from pydantic import ValidationError as PydanticValidationError

        with pytest.raises(PydanticValidationError):
            PricingConfig.model_validate({"fabric_price_per_foot": 1.0})

    def test_optional_prices_default_to_none(self, pricing: PricingConfig) -> None:
        assert pricing.unit_price(Material.GATE_POSTS) is None
        assert pricing.unit_price(Material.FABRIC) == 2.0
