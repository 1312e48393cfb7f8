"""Color names and hex strings <-> Sheets API ``Color`` objects."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Any

NAMED_COLORS = MappingProxyType(
    {
        "red": "#ff0000",
        "green": "#00ff00",
        "blue": "#0000ff",
        "yellow": "#ffff00",
        "orange": "#ffa500",
        "purple": "#800080",
        "white": "#ffffff",
        "black": "#000000",
        "gray": "#808080",
        "grey": "#808080",
    }
)

_HEX_RE = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


def parse_color(text: str) -> dict[str, float] | None:
    """Convert a color name or ``#rrggbb`` to ``{"red", "green", "blue"}``.

    Channels are floats in [0, 1]. Returns None for anything else.
    """
    hex_value = NAMED_COLORS.get(text.strip().lower(), text.strip())
    match = _HEX_RE.fullmatch(hex_value)
    if not match:
        return None
    red, green, blue = (int(part, 16) / 255 for part in match.groups())
    return {"red": red, "green": green, "blue": blue}


def rgb_to_hex(color: dict[str, Any]) -> str:
    """Convert {"red": 0.8, "green": 1, "blue": 0.8} to "#CCFFCC"."""
    r = round(color.get("red", 0) * 255)
    g = round(color.get("green", 0) * 255)
    b = round(color.get("blue", 0) * 255)
    return f"#{r:02X}{g:02X}{b:02X}"
