"""Core functionality for CSS parsing and style mapping."""

from .extractor import extract_blocks
from .colors import normalize_color, hex_to_rgb, hsl_to_rgb
from .styles import map_category, map_font_weight, format_category_name
from .variables import parse_variable, format_variable_name
from .fonts import parse_font_families, resolve_font_family

__all__ = [
    'extract_blocks',
    'normalize_color',
    'hex_to_rgb',
    'hsl_to_rgb',
    'map_category',
    'map_font_weight',
    'format_category_name',
    'parse_variable',
    'format_variable_name',
    'parse_font_families',
    'resolve_font_family'
]
