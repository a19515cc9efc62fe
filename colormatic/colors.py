"""
Packed colors (0xRRGGBB) and the normalized RGB triples derived from them.
"""
from __future__ import annotations

import numpy as np

COLOR_MASK = 0xFFFFFF


class ColorFormatError(ValueError):
    """Value cannot be read as a packed color."""


def parse_hex_color(value: object) -> int:
    """
    Read a packed color from a document value.
    Ints are taken as-is; strings are hex digits with optional "#" or "0x" prefix.
    The result is masked to 24 bits.
    """
    if isinstance(value, bool):
        raise ColorFormatError(f"Expected a color, got {value!r}")
    if isinstance(value, int):
        return value & COLOR_MASK
    if not isinstance(value, str):
        raise ColorFormatError(f"Expected a color, got {type(value).__name__}")
    text = value.strip()
    if text.startswith("#"):
        text = text[1:]
    elif text[:2].lower() == "0x":
        text = text[2:]
    if not text or any(c not in "0123456789abcdefABCDEF" for c in text):
        raise ColorFormatError(f"Invalid hex color: {value!r}")
    return int(text, 16) & COLOR_MASK


def to_rgb(color: int) -> np.ndarray:
    """Packed color → read-only float32 (r, g, b), each in [0, 1]."""
    rgb = np.array(
        [(color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF],
        dtype=np.float32,
    ) / np.float32(255.0)
    rgb.flags.writeable = False
    return rgb


def format_hex_color(color: int) -> str:
    return f"#{color & COLOR_MASK:06x}"
