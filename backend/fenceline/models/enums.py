"""Enums for the fenceline domain models.

Values match the strings stored by the estimating application so that
inputs and price lists round-trip as plain data.
"""

from enum import StrEnum


class FenceType(StrEnum):
    """Fence class; selects the pipe weight of the framework."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"


class FenceColor(StrEnum):
    """Fabric and framework finish."""

    GALVANIZED = "galvanized"
    GREEN = "green"
    BLACK = "black"


class PipeWeight(StrEnum):
    """Framework pipe weight classes."""

    SS20 = "SS20 WT"
    SS40 = "SS40 WT"


class Material(StrEnum):
    """Every material kind a takeoff can produce, in display order."""

    # Core takeoff
    INTERIOR_LINE_POSTS = "interior_line_posts"
    FABRIC = "fabric_footage"
    TOP_RAIL = "top_rail_sticks"
    TIE_WIRES = "tie_wires"
    LOOP_CAPS = "loop_caps"
    POST_CAPS = "post_caps"
    BRACE_BANDS = "brace_bands"
    TENSION_BARS = "tension_bars"
    TENSION_BANDS = "tension_bands"
    NUTS_AND_BOLTS = "nuts_and_bolts"

    # Gates and add-ons
    GATE_POSTS = "gate_posts"
    GATE_HARDWARE_SETS = "gate_hardware_sets"
    GATE_LATCHES = "gate_latches"
    GATE_HINGES = "gate_hinges"
    PRIVACY_SLATS = "privacy_slats"
    BARBED_WIRE = "barbed_wire"
    BOTTOM_RAIL = "bottom_rail_sticks"
    RAIL_ENDS = "rail_ends"


class ValidationErrorKind(StrEnum):
    """Categories of rejected takeoff input."""

    INVALID_RUN_LENGTH = "InvalidRunLength"
    INVALID_HEIGHT = "InvalidHeight"
    INVALID_POST_COUNT = "InvalidPostCount"
