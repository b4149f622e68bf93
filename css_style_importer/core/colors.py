"""Conversion of CSS color literals to normalized RGB values."""

import re
import logging
from typing import Optional, Tuple

from .models import NormalizedColor
from ..utils.error import InvalidHexFormatError, UnsupportedFormatError

logger = logging.getLogger(__name__)

_FLAGS = re.IGNORECASE | re.ASCII

_HEX_PATTERN = re.compile(r'#([0-9a-f]{3}|[0-9a-f]{6})', _FLAGS)
_RGBA_PATTERN = re.compile(
    r'rgba\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*((?:\d*\.)?\d+)\s*)?\)',
    _FLAGS,
)
_RGB_PATTERN = re.compile(r'rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)', _FLAGS)
_HSLA_PATTERN = re.compile(
    r'hsla\(\s*(\d+)\s*,\s*(\d+(?:\.\d+)?)%\s*,\s*(\d+(?:\.\d+)?)%\s*'
    r'(?:,\s*((?:\d*\.)?\d+)\s*)?\)',
    _FLAGS,
)
_HSL_PATTERN = re.compile(
    r'hsl\(\s*(\d+)\s*,\s*(\d+(?:\.\d+)?)%\s*,\s*(\d+(?:\.\d+)?)%\s*\);?',
    _FLAGS,
)

def _integer_part(token: str) -> int:
    # "50.5" reads as 50, matching how percentages have always been parsed
    return int(token.split('.')[0])

def _alpha(token: Optional[str]) -> float:
    return float(token) if token is not None else 1.0

def hex_to_rgb(hex_value: str) -> Tuple[float, float, float]:
    """Decode ``#rgb`` or ``#rrggbb`` into channels in [0, 1].

    Raises:
        InvalidHexFormatError: If the string is not a 3 or 6 digit hex color
    """
    match = _HEX_PATTERN.fullmatch(hex_value)
    if not match:
        raise InvalidHexFormatError(f"Invalid hex color format: {hex_value}")

    digits = match.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)

    r = int(digits[0:2], 16) / 255
    g = int(digits[2:4], 16) / 255
    b = int(digits[4:6], 16) / 255
    return r, g, b

def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p

def hsl_to_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """Convert hue, saturation and lightness in [0, 1] to RGB in [0, 1]."""
    if s == 0:
        return l, l, l  # achromatic

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        _hue_to_channel(p, q, h + 1 / 3),
        _hue_to_channel(p, q, h),
        _hue_to_channel(p, q, h - 1 / 3),
    )

def _rgb_channels(match) -> Tuple[float, float, float]:
    return tuple(int(match.group(i)) / 255 for i in (1, 2, 3))

def _hsl_channels(match) -> Tuple[float, float, float]:
    h = int(match.group(1)) / 360
    s = _integer_part(match.group(2)) / 100
    l = _integer_part(match.group(3)) / 100
    return hsl_to_rgb(h, s, l)

def normalize_color(value: str) -> NormalizedColor:
    """Normalize a CSS color literal.

    Grammars are tried in order: hex, rgba, rgb, hsla, hsl. Opacity is only
    set for rgba and hsla, defaulting to 1 when no alpha is given.

    Args:
        value: Color literal such as ``#fff`` or ``hsla(120, 50%, 50%, 0.3)``

    Returns:
        NormalizedColor

    Raises:
        UnsupportedFormatError: If the literal matches none of the grammars
    """
    if _HEX_PATTERN.fullmatch(value):
        return NormalizedColor(*hex_to_rgb(value))

    match = _RGBA_PATTERN.fullmatch(value)
    if match:
        return NormalizedColor(*_rgb_channels(match), opacity=_alpha(match.group(4)))

    match = _RGB_PATTERN.fullmatch(value)
    if match:
        return NormalizedColor(*_rgb_channels(match))

    match = _HSLA_PATTERN.fullmatch(value)
    if match:
        return NormalizedColor(*_hsl_channels(match), opacity=_alpha(match.group(4)))

    match = _HSL_PATTERN.fullmatch(value)
    if match:
        return NormalizedColor(*_hsl_channels(match))

    raise UnsupportedFormatError(f"Unsupported color format: {value}")

__all__ = ['normalize_color', 'hex_to_rgb', 'hsl_to_rgb']
