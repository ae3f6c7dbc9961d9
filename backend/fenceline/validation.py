"""Input parsing and the optional validation layer for takeoffs.

The takeoff itself is permissive: bad inputs flow through and produce
whatever the formulas yield. :func:`validate_input` is the opt-in hardening
step that rejects them up front with a typed :class:`ValidationError`.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

from fenceline.exceptions import ValidationError
from fenceline.models.enums import ValidationErrorKind

if TYPE_CHECKING:
    from fenceline.models.takeoff import EstimationInput

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

_COUNT_FIELDS = ("ends", "corners", "single_gates", "double_gates", "pedestrian_gates")


def parse_height(value: str) -> int | None:
    """Parse a fence height the way the estimating UI does.

    Reads the leading integer and ignores anything after it, so ``"6"``,
    ``" 6ft"`` and ``"6.5"`` all give 6. Returns None when the string does
    not start with a number.
    """
    match = _LEADING_INT.match(value)
    if match is None:
        return None
    return int(match.group(1))


def check_run_lengths_finite(estimation_input: EstimationInput) -> None:
    """Raise ValidationError if any run length is NaN or infinite.

    The permissive takeoff tolerates these, but they cannot be written back
    as JSON, so the HTTP API rejects them even when validation is off.
    """
    for index, run in enumerate(estimation_input.runs):
        if not math.isfinite(run.length):
            raise ValidationError(
                ValidationErrorKind.INVALID_RUN_LENGTH,
                f"runs[{index}].length",
                f"Run {index + 1} has invalid length {run.length!r}",
            )


def validate_input(estimation_input: EstimationInput) -> None:
    """Raise ValidationError if the input cannot describe a real fence.

    Checks, in order: every run length is a finite number >= 0, the height
    parses to a positive integer, and every post and gate count is >= 0.
    """
    for index, run in enumerate(estimation_input.runs):
        if not math.isfinite(run.length) or run.length < 0:
            raise ValidationError(
                ValidationErrorKind.INVALID_RUN_LENGTH,
                f"runs[{index}].length",
                f"Run {index + 1} has invalid length {run.length!r}",
            )

    height = parse_height(estimation_input.fence_height)
    if height is None or height <= 0:
        raise ValidationError(
            ValidationErrorKind.INVALID_HEIGHT,
            "fence_height",
            f"Fence height {estimation_input.fence_height!r} is not a positive whole number",
        )

    for field_name in _COUNT_FIELDS:
        count = getattr(estimation_input, field_name)
        if count < 0:
            raise ValidationError(
                ValidationErrorKind.INVALID_POST_COUNT,
                field_name,
                f"'{field_name}' must be zero or more, got {count}",
            )
