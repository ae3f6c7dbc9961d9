"""Tests for the public API surface of the fenceline package.

Verifies that consumers can import everything they need from the top-level
``fenceline`` package, use ``create_default_estimator`` for quick setup, and
round-trip takeoffs through JSON serialization.
"""

from __future__ import annotations

import json

import fenceline
from fenceline import (
    CostCalculator,
    EstimationInput,
    EstimationResult,
    FenceEstimate,
    FenceRun,
    FenceType,
    PricingConfig,
    TakeoffCalculator,
    calculate_cost,
    calculate_materials,
    create_default_estimator,
)


def _sample_input() -> EstimationInput:
    return EstimationInput(
        runs=[FenceRun(length=50), FenceRun(length=25)],
        fence_height="6",
        fence_type=FenceType.COMMERCIAL,
        ends=0,
        corners=4,
    )


class TestPublicImports:
    def test_all_names_resolve(self) -> None:
        for name in fenceline.__all__:
            assert getattr(fenceline, name) is not None

    def test_version(self) -> None:
        assert fenceline.__version__ == "0.1.0"


class TestQuickStart:
    def test_calculate_then_cost(self) -> None:
        result = calculate_materials(_sample_input())

        assert result.interior_line_posts == 5
        assert result.tension_bands == 24
        assert calculate_cost(result, PricingConfig.zero()) == 0

    def test_classes_match_shortcuts(self) -> None:
        estimation_input = _sample_input()
        result = TakeoffCalculator().compute(estimation_input)
        pricing = PricingConfig.zero().model_copy(update={"tie_wire_price": 0.5})

        assert result == calculate_materials(estimation_input)
        assert CostCalculator().compute_cost(result, pricing) == calculate_cost(result, pricing)

    def test_default_estimator(self) -> None:
        estimate = create_default_estimator().estimate(_sample_input())

        assert isinstance(estimate, FenceEstimate)
        assert estimate.is_priced


class TestSerialization:
    def test_result_json_round_trip(self) -> None:
        result = calculate_materials(_sample_input())
        restored = EstimationResult.model_validate(json.loads(json.dumps(result.to_dict())))
        assert restored.to_dict() == result.to_dict()

    def test_estimate_json_round_trip(self) -> None:
        estimate = create_default_estimator().estimate(_sample_input())
        restored = FenceEstimate.model_validate_json(estimate.model_dump_json())
        assert restored.model_dump() == estimate.model_dump()
