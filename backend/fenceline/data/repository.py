"""Pricing repository for looking up price lists by fence type and height."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from fenceline.exceptions import PricingDataError, PricingNotConfiguredError
from fenceline.models.enums import FenceType
from fenceline.models.pricing import PricingConfig

PricingTable = dict[FenceType, dict[str, PricingConfig]]


def _height_sort_key(height: str) -> tuple[int, float | str]:
    try:
        return (0, float(height))
    except ValueError:
        return (1, height)


class PricingRepository:
    """Repository of unit price lists.

    Price lists are keyed first by fence type, then by fence height string,
    matching how they are kept in the application settings.
    """

    def __init__(self, table: PricingTable) -> None:
        self._table: PricingTable = {
            fence_type: dict(heights) for fence_type, heights in table.items()
        }

    def get_pricing(self, fence_type: FenceType, fence_height: str) -> PricingConfig | None:
        """Look up the price list for a fence type and height.

        The height must match a configured key exactly ("6", not " 6" or
        "6.0"). Returns None if no price list is configured.
        """
        return self._table.get(fence_type, {}).get(fence_height)

    def require_pricing(self, fence_type: FenceType, fence_height: str) -> PricingConfig:
        """Like :meth:`get_pricing` but raises PricingNotConfiguredError."""
        pricing = self.get_pricing(fence_type, fence_height)
        if pricing is None:
            msg = f"No pricing found for {fence_type} {fence_height}'"
            raise PricingNotConfiguredError(msg)
        return pricing

    def configured_heights(self, fence_type: FenceType) -> list[str]:
        """Heights with a price list for the fence type, shortest first."""
        return sorted(self._table.get(fence_type, {}), key=_height_sort_key)

    def to_dict(self) -> dict[str, dict[str, dict[str, Any]]]:
        return {
            fence_type.value: {
                height: pricing.model_dump(exclude_none=True)
                for height, pricing in heights.items()
            }
            for fence_type, heights in self._table.items()
        }


def parse_pricing_table(data: Any) -> PricingTable:
    """Build a pricing table from plain data.

    Expects ``{"residential": {"4": {<prices>}, ...}, "commercial": {...}}``.

    Raises:
        PricingDataError: If the structure, a fence type, or a price list is
            invalid.
    """
    if not isinstance(data, dict):
        msg = "Pricing data must be an object keyed by fence type"
        raise PricingDataError(msg)

    table: PricingTable = {}
    for type_key, heights in data.items():
        try:
            fence_type = FenceType(type_key)
        except ValueError as exc:
            msg = f"Unknown fence type '{type_key}' in pricing data"
            raise PricingDataError(msg) from exc

        if not isinstance(heights, dict):
            msg = f"Pricing for '{type_key}' must be an object keyed by height"
            raise PricingDataError(msg)

        table[fence_type] = {}
        for height, prices in heights.items():
            try:
                table[fence_type][str(height)] = PricingConfig.model_validate(prices)
            except PydanticValidationError as exc:
                msg = f"Invalid pricing for {type_key} {height}': {exc}"
                raise PricingDataError(msg) from exc
    return table


def load_pricing_table(path: Path | str) -> PricingTable:
    """Read a pricing table from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        msg = f"Could not read pricing file {path}: {exc}"
        raise PricingDataError(msg) from exc
    return parse_pricing_table(data)
