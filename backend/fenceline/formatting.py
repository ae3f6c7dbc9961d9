"""Formatting helpers for takeoff and cost output.

Currency is shown to the cent the way quotes are written ('$1,234.50');
lengths are shown in linear feet.
"""

from __future__ import annotations

from fenceline.models.enums import Material

_MATERIAL_LABELS: dict[Material, str] = {
    Material.INTERIOR_LINE_POSTS: "Interior Line Posts",
    Material.FABRIC: "Fabric",
    Material.TOP_RAIL: "Top Rail (21' sticks)",
    Material.TIE_WIRES: "Tie Wires",
    Material.LOOP_CAPS: "Loop Caps",
    Material.POST_CAPS: "Post Caps",
    Material.BRACE_BANDS: "Brace Bands",
    Material.TENSION_BARS: "Tension Bars",
    Material.TENSION_BANDS: "Tension Bands",
    Material.NUTS_AND_BOLTS: "Nuts & Bolts",
    Material.GATE_POSTS: "Gate Posts",
    Material.GATE_HARDWARE_SETS: "Gate Hardware Sets",
    Material.GATE_LATCHES: "Gate Latches",
    Material.GATE_HINGES: "Gate Hinges",
    Material.PRIVACY_SLATS: "Privacy Slats",
    Material.BARBED_WIRE: "Barbed Wire",
    Material.BOTTOM_RAIL: "Bottom Rail (21' sticks)",
    Material.RAIL_ENDS: "Rail Ends",
}


def format_currency(amount: float) -> str:
    """Format an amount with cents and comma separators (e.g., '$1,234.50')."""
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def format_feet(length: float) -> str:
    """Format a length in linear feet: '100 LF', '72.5 LF'."""
    text = f"{length:,.2f}".rstrip("0").rstrip(".")
    return f"{text or '0'} LF"


def format_material_label(material: Material) -> str:
    return _MATERIAL_LABELS[material]
