"""Color string parsing, formatting and channel-wise blending.

Supported inputs are hex strings (``#rgb``, ``#rrggbb``, ``#rrggbbaa``),
pygame color names and CSS ``rgb()``/``rgba()`` strings.  Channels are
handled as floats on a 0-255 scale; alpha is always on a 0-1 scale so hex
and functional forms round-trip consistently.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

import pygame

RGBA = Tuple[float, float, float, float]

_FUNCTIONAL_RE = re.compile(
    r"^rgba?\(\s*([-+\d.]+)\s*,\s*([-+\d.]+)\s*,\s*([-+\d.]+)\s*(?:,\s*([-+\d.]+)\s*)?\)$",
    re.IGNORECASE,
)


def is_color_string(value) -> bool:
    """Return ``True`` if ``value`` looks like a color string."""
    if not value or not isinstance(value, str):
        return False
    return value[0] in ("#", "r")


def has_alpha(color: str) -> bool:
    """Return ``True`` if ``color`` carries its own alpha channel."""
    if color.startswith("#"):
        return len(color) >= 9
    return color.lower().startswith("rgba(")


def _expand_short_hex(color: str) -> str:
    digits = color[1:]
    if len(digits) in (3, 4):
        return "#" + "".join(ch * 2 for ch in digits)
    return color


def parse_color(color: str) -> RGBA:
    """Split ``color`` into ``(r, g, b, a)``.

    ``ValueError`` is raised for strings neither pygame nor the ``rgb()``
    pattern understand.
    """
    match = _FUNCTIONAL_RE.match(color.strip())
    if match:
        r, g, b, a = match.groups()
        return float(r), float(g), float(b), float(a) if a is not None else 1.0
    if color.startswith("#"):
        color = _expand_short_hex(color)
    c = pygame.Color(color)
    return float(c.r), float(c.g), float(c.b), c.a / 255.0


def _channel(value: float) -> int:
    return max(0, min(255, int(math.floor(value + 0.5))))


def format_color(r: float, g: float, b: float, a: Optional[float] = None) -> str:
    """Join channels into ``#rrggbb`` or, with alpha, ``rgba(r, g, b, a)``."""
    if a is None:
        return "#%02x%02x%02x" % (_channel(r), _channel(g), _channel(b))
    alpha = round(max(0.0, min(1.0, a)), 3)
    return "rgba(%d, %d, %d, %s)" % (_channel(r), _channel(g), _channel(b), f"{alpha:g}")


def blend(start: float, end: float, v: float) -> float:
    """Move from ``start`` toward ``end`` by the eased progress ``v``."""
    if start > end:
        return start - v * (start - end)
    return start + v * (end - start)


def blend_colors(start: str, end: str, v: float) -> str:
    """Blend two color strings channel by channel."""
    src = parse_color(start)
    dst = parse_color(end)
    channels = [blend(s, d, v) for s, d in zip(src, dst)]
    if has_alpha(start) or has_alpha(end):
        return format_color(*channels)
    return format_color(*channels[:3])


__all__ = [
    "RGBA",
    "is_color_string",
    "has_alpha",
    "parse_color",
    "format_color",
    "blend",
    "blend_colors",
]
