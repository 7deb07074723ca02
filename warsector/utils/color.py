"""
Color parsing for configuration values.

Accepted forms:
- HEX: "#RRGGBB" (leading # optional)
- CSV: "R,G,B" or "(R, G, B)" with 0-255 values
- list/tuple: [R, G, B] with 0-255 ints, or 0.0-1.0 floats

pygame draws with RGB, so every form resolves to an (r, g, b) int tuple.
"""

import re
from typing import List, Optional, Tuple, Union

RGB = Tuple[int, int, int]
ColorInput = Union[str, List, Tuple]

HEX_COLOR_PATTERN = re.compile(r'^#?([0-9a-fA-F]{6})$')
CSV_COLOR_PATTERN = re.compile(r'^[\(\[]?\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*[\)\]]?$')


def _clamp(values) -> RGB:
    r, g, b = (max(0, min(255, int(v))) for v in values)
    return (r, g, b)


def parse_hex_color(hex_str: str) -> Optional[RGB]:
    """
    Parse "#RRGGBB" to an RGB tuple, or None if the string is not hex.

    Examples:
        >>> parse_hex_color("#00ff22")
        (0, 255, 34)
    """
    match = HEX_COLOR_PATTERN.match(hex_str.strip())
    if not match:
        return None
    value = match.group(1)
    return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def parse_color(color: ColorInput) -> RGB:
    """
    Parse a color from any supported form.

    Raises:
        ValueError: If the value is not a recognised color

    Examples:
        >>> parse_color("#ff0022")
        (255, 0, 34)
        >>> parse_color("0, 136, 17")
        (0, 136, 17)
        >>> parse_color([1.0, 0.5, 0.0])
        (255, 128, 0)
    """
    if isinstance(color, str):
        result = parse_hex_color(color)
        if result is not None:
            return result
        match = CSV_COLOR_PATTERN.match(color.strip())
        if match:
            return _clamp(match.groups())
        raise ValueError(f"Invalid color format: {color}")

    if isinstance(color, (list, tuple)):
        if len(color) != 3:
            raise ValueError(f"Color must have 3 components, got {len(color)}")
        if all(isinstance(c, float) and 0.0 <= c <= 1.0 for c in color):
            return _clamp(round(c * 255) for c in color)
        return _clamp(color)

    raise ValueError(f"Unsupported color type: {type(color).__name__}")
