"""Chain-link fence material takeoff.

The TakeoffCalculator turns measured fence runs plus a handful of
structural parameters into a sparse bill of quantities:

1. **Layout**: Sum the runs, divide into 10 ft sections (the industry
   standard post spacing) and count post spots as ``sections + 1``.
2. **Interior line posts**: Subtract the terminal posts that occupy post
   spots, using the ordered end/corner policy in
   :func:`interior_line_posts`.
3. **Fabric, rail and ties**: 9ga fabric 1:1 with fence length, 21 ft top
   rail sticks, 1.5 tie wires per linear foot, a loop cap per line post.
4. **Terminal hardware**: Brace bands, tension bars, tension bands, nuts
   and bolts and post caps for every end and corner post.
5. **Gates and add-ons**: Gate posts and hardware, privacy slats, barbed
   wire, bottom rail and rail ends when requested.

Counts that come out as zero are left off the result entirely.
"""

from __future__ import annotations

import logging
import math

from fenceline.models.enums import FenceType, PipeWeight
from fenceline.models.takeoff import EstimationInput, EstimationResult
from fenceline.validation import parse_height, validate_input

logger = logging.getLogger(__name__)

POST_SPACING_FT = 10
RAIL_STICK_LENGTH_FT = 21
TIE_WIRES_PER_FT = 1.5
FABRIC_TYPE = "9ga wire"


def interior_line_posts(ends: int, corners: int, sections: int, post_spots: int) -> int:
    """Count the interior line posts for a fence layout.

    Rules are checked top to bottom and the first match wins. The third
    rule can never fire because the second already covers ``corners == 0``;
    it is kept where it is so the layout policy stays exactly as estimators
    have always applied it.
    """
    match (ends, corners):
        case (1, 0):
            rule, count = "single_end", max(0, post_spots - 1 - corners)
        case (0, _) if corners >= 0:
            rule, count = "no_ends", max(0, post_spots - corners)
        case (0, 0):
            rule, count = "no_ends_no_corners", max(0, sections - 1)
        case _:
            # Two end posts assumed
            rule, count = "two_ends", max(0, post_spots - 2 - corners)

    logger.debug(
        "Interior post rule %s (ends=%s, corners=%s, post_spots=%s) -> %s",
        rule, ends, corners, post_spots, count,
    )
    return count


def _nonzero(value: int) -> int | None:
    return value if value else None


def _positive(value: int) -> int | None:
    return value if value > 0 else None


def _whole_units(value: float) -> int:
    # Non-finite lengths give no stock to order
    return math.ceil(value) if math.isfinite(value) else 0


class TakeoffCalculator:
    """Derives a fence bill of quantities from an EstimationInput.

    Args:
        validate: When True, inputs are checked with
            :func:`fenceline.validation.validate_input` before computing and
            bad values raise ValidationError. When False (the default),
            inputs are used as given.

    Example::

        calculator = TakeoffCalculator()
        result = calculator.compute(
            EstimationInput(
                runs=[FenceRun(length=100)],
                fence_height="4",
                fence_type=FenceType.RESIDENTIAL,
                ends=2,
            )
        )
        result.interior_line_posts  # 9
    """

    def __init__(self, *, validate: bool = False) -> None:
        self._validate = validate

    @property
    def validates(self) -> bool:
        return self._validate

    def compute(self, estimation_input: EstimationInput) -> EstimationResult:
        """Compute the material takeoff for a fence.

        Raises:
            ValidationError: Only when the calculator was built with
                ``validate=True`` and the input is rejected.
        """
        if self._validate:
            validate_input(estimation_input)

        ends = estimation_input.ends
        corners = estimation_input.corners

        # 1. Layout
        total_length = estimation_input.total_length
        line_posts = 0
        top_rail_sticks = 0
        tie_wires = 0

        if math.isfinite(total_length):
            sections = math.ceil(total_length / POST_SPACING_FT)
            post_spots = sections + 1

            # 2. Interior line posts
            line_posts = interior_line_posts(ends, corners, sections, post_spots)

            # 3. Fabric, rail and ties
            top_rail_sticks = math.ceil(total_length / RAIL_STICK_LENGTH_FT)
            tie_wires = math.ceil(total_length * TIE_WIRES_PER_FT)
        else:
            logger.warning(
                "Total length %r is not finite; line posts, rail and ties omitted",
                total_length,
            )

        # 4. Terminal hardware
        terminal_posts = ends + corners
        brace_bands: int | None = None
        tension_bars: int | None = None
        tension_bands: int | None = None
        nuts_and_bolts: int | None = None
        post_caps: int | None = None

        if terminal_posts > 0:
            brace_bands = 1 * ends + 2 * corners
            tension_bars = 1 * ends + 2 * corners
            height = parse_height(estimation_input.fence_height)
            if height is None:
                logger.warning(
                    "Fence height %r is not a number; tension bands and nuts/bolts omitted",
                    estimation_input.fence_height,
                )
            else:
                tension_bands = height * terminal_posts
                nuts_and_bolts = tension_bands + brace_bands
            post_caps = terminal_posts

        pipe_weight = (
            PipeWeight.SS20
            if estimation_input.fence_type == FenceType.RESIDENTIAL
            else PipeWeight.SS40
        )

        result = EstimationResult(
            fabric_type=FABRIC_TYPE,
            fabric_footage=total_length,
            pipe_weight=pipe_weight.value,
            interior_line_posts=_positive(line_posts),
            top_rail_sticks=_nonzero(top_rail_sticks),
            tie_wires=_nonzero(tie_wires),
            loop_caps=_positive(line_posts),
            post_caps=_nonzero(post_caps or 0),
            brace_bands=_nonzero(brace_bands or 0),
            tension_bars=_nonzero(tension_bars or 0),
            tension_bands=_nonzero(tension_bands or 0),
            nuts_and_bolts=_nonzero(nuts_and_bolts or 0),
            ends=_positive(ends),
            corners=_positive(corners),
            fence_color=estimation_input.fence_color,
        )

        # 5. Gates and add-ons
        self._add_gates(estimation_input, result)
        self._add_extras(estimation_input, result, total_length, terminal_posts)

        return result

    @staticmethod
    def _add_gates(estimation_input: EstimationInput, result: EstimationResult) -> None:
        single = estimation_input.single_gates
        double = estimation_input.double_gates
        pedestrian = estimation_input.pedestrian_gates
        total_gates = single + double + pedestrian

        result.single_gates = _positive(single)
        result.double_gates = _positive(double)
        result.pedestrian_gates = _positive(pedestrian)
        # Two posts per gate; sharing with terminal posts is not assumed
        result.gate_posts = _positive(total_gates * 2)
        result.gate_hardware_sets = _positive(total_gates)
        result.gate_latches = _positive(total_gates)
        # Double gates hang two leaves
        result.gate_hinges = _positive(single * 2 + double * 4 + pedestrian * 2)

    @staticmethod
    def _add_extras(
        estimation_input: EstimationInput,
        result: EstimationResult,
        total_length: float,
        terminal_posts: int,
    ) -> None:
        if estimation_input.include_privacy_slats:
            result.privacy_slats = _nonzero(_whole_units(total_length))
        if estimation_input.include_barbed_wire:
            result.barbed_wire = _nonzero(_whole_units(total_length))
        if estimation_input.include_bottom_rail:
            result.bottom_rail_sticks = _nonzero(
                _whole_units(total_length / RAIL_STICK_LENGTH_FT)
            )
        if estimation_input.include_rail_ends:
            rails = 2 if estimation_input.include_bottom_rail else 1
            result.rail_ends = _nonzero(terminal_posts * 2 * rails)


def calculate_materials(
    estimation_input: EstimationInput, *, validate: bool = False
) -> EstimationResult:
    """Functional shortcut for ``TakeoffCalculator(validate=...).compute(...)``."""
    return TakeoffCalculator(validate=validate).compute(estimation_input)
