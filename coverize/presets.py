"""Colour presets and option vocabularies for cover rendering.

WHY: Most callers just want "a nice cover" and pick a colour scheme by number
or name. The option vocabularies (emphasis modes, fonts, sizes) are closed
sets shared by the builder, the CLI and the HTTP API.

HOW: Plain module-level tuples and dicts.

RULES:
- COLOR_PRESETS and COLOR_PRESET_NAMES are index-aligned (12 entries each)
- Each preset is (light, dark); the light colour starts the gradient
- Never mutate these constants at runtime
"""

from __future__ import annotations

from typing import Dict, Tuple

COLOR_PRESETS: Tuple[Tuple[str, str], ...] = (
    ("#e6fdf5", "#2c3861"), ("#c5f3e3", "#3a4254"), ("#e6de88", "#385652"),
    ("#e8bf68", "#e77352"), ("#f4a436", "#6fb295"), ("#eada85", "#850b07"),
    ("#f3bebe", "#1271be"), ("#f87e85", "#857ef8"), ("#f5a665", "#3a4857"),
    ("#c0c0c0", "#4b545b"), ("#6d727f", "#e54c4c"), ("#547656", "#4e3135"),
)

COLOR_PRESET_NAMES: Tuple[str, ...] = (
    "Pearl Shore", "Sage Abbey", "Mossy Hollow", "Honey Chapel", "Olive Grove",
    "Sienna Reach", "Azure Vale", "Carmine Bay", "Copper Barrow", "Pewter Steppe",
    "Brandy Copse", "Jasper Forge",
)

DEFAULT_GRADIENT = "linear-gradient(145deg, #667eea 0%, #764ba2 100%)"

EMPHASIS_MODES: Tuple[str, ...] = ("bold", "case", "both", "none")
FONTS: Tuple[str, ...] = ("sans", "serif")
SIZE_MULTIPLIERS: Dict[str, float] = {"small": 0.5, "regular": 1.0, "large": 1.5}
EFFECTS: Tuple[str, ...] = ("realism", "texture", "depth")

# Base font size (rem) = cover width / BASE_WIDTH, clamped to these bounds.
FONT_SCALE_MIN = 0.3
FONT_SCALE_MAX = 2.5
BASE_WIDTH = 200


def find_preset(name: str) -> int:
    """Return the index of a colour preset by name (case-insensitive).

    Raises:
        ValueError: If no preset has that name.
    """
    lowered = name.strip().lower()
    for index, preset_name in enumerate(COLOR_PRESET_NAMES):
        if preset_name.lower() == lowered:
            return index
    raise ValueError(
        "Unknown color preset '{}'. Available: {}".format(name, ", ".join(COLOR_PRESET_NAMES))
    )
