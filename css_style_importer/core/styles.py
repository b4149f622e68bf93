"""Mapping of category blocks to text style descriptors."""

import re
import logging
from dataclasses import replace
from functools import reduce
from typing import Callable, Dict, List, Optional, Tuple

from .models import LineHeight, LineHeightMode, StyleDescriptor
from ..utils.config import DEFAULT_FONT_STYLE
from ..utils.error import InvalidCategoryFormatError

logger = logging.getLogger(__name__)

# CSS numeric weights and the style names design tools use for them
FONT_WEIGHTS: Dict[str, str] = {
    '100': 'Thin',
    '200': 'Extra Light',
    '300': 'Light',
    '400': 'Regular',
    '500': 'Medium',
    '600': 'Semi Bold',
    '700': 'Bold',
    '800': 'Extra Bold',
    '900': 'Black',
}

NORMAL = 'normal'

_CATEGORY_RE = re.compile(r'(.[^{]+)\s*\{([^}]*)\}')
_WORD_START_RE = re.compile(r'\b\w', re.ASCII)
_TRAILING_NUMBER_RE = re.compile(r' (\d+)$', re.ASCII)
_LEADING_FLOAT_RE = re.compile(r'\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)', re.ASCII)

Handler = Callable[[StyleDescriptor, str], StyleDescriptor]

def map_font_weight(value: str) -> str:
    """Map a CSS font-weight such as ``700`` to a style name such as ``Bold``."""
    return FONT_WEIGHTS.get(value, DEFAULT_FONT_STYLE)

def parse_leading_float(value: str) -> Optional[float]:
    """Read the numeric prefix of a CSS value, so ``24px`` gives 24.0.

    Returns None when the value does not start with a number.
    """
    match = _LEADING_FLOAT_RE.match(value)
    if not match:
        return None
    return float(match.group(1))

def title_case_words(text: str) -> str:
    """Upper-case the first character of every word, leaving the rest alone."""
    return _WORD_START_RE.sub(lambda m: m.group(0).upper(), text)

def format_category_name(selector: str) -> str:
    """Turn a selector such as ``.heading-1`` into a style name like ``Heading / 1``.

    Only a leading ``.`` is removed; ``#`` selectors keep their ``#``.
    """
    name = selector[1:] if selector.startswith('.') else selector
    name = title_case_words(name.replace('-', ' '))
    return _TRAILING_NUMBER_RE.sub(r' / \1', name, count=1)

def split_category(raw: str) -> Tuple[str, str]:
    """Split a category block into its selector and its body.

    Raises:
        InvalidCategoryFormatError: If the block is not ``selector { body }``
    """
    match = _CATEGORY_RE.fullmatch(raw)
    if not match:
        raise InvalidCategoryFormatError(f"Invalid category format: {raw!r}")
    return match.group(1).strip(), match.group(2)

def parse_declarations(body: str) -> List[Tuple[str, str]]:
    """Split a block body into ``(key, value)`` pairs in source order."""
    declarations = []
    for fragment in body.split(';'):
        fragment = fragment.strip()
        if not fragment:
            continue
        key, _, value = fragment.partition(':')
        declarations.append((key.strip(), value.strip()))
    return declarations

def _numeric(key: str, value: str) -> Optional[float]:
    number = parse_leading_float(value)
    if number is None:
        logger.warning(f"Ignoring non-numeric {key}: {value!r}")
    return number

def _set_font_family(descriptor: StyleDescriptor, value: str) -> StyleDescriptor:
    # The family list is kept verbatim; it is split when fonts are resolved
    return replace(descriptor, font_family=value)

def _set_font_size(descriptor: StyleDescriptor, value: str) -> StyleDescriptor:
    size = _numeric('font-size', value)
    if size is None:
        return descriptor
    return replace(descriptor, font_size_pt=size)

def _set_font_weight(descriptor: StyleDescriptor, value: str) -> StyleDescriptor:
    return replace(descriptor, font_style=map_font_weight(value))

def _set_line_height(descriptor: StyleDescriptor, value: str) -> StyleDescriptor:
    if value == NORMAL:
        return replace(descriptor, line_height=LineHeight(LineHeightMode.AUTO))
    height = _numeric('line-height', value)
    if height is None:
        return descriptor
    return replace(descriptor, line_height=LineHeight(LineHeightMode.PIXELS, height))

def _set_letter_spacing(descriptor: StyleDescriptor, value: str) -> StyleDescriptor:
    if value == NORMAL:
        return replace(descriptor, letter_spacing_percent=0.0)
    spacing = _numeric('letter-spacing', value)
    if spacing is None:
        return descriptor
    return replace(descriptor, letter_spacing_percent=spacing)

PROPERTY_HANDLERS: Dict[str, Handler] = {
    'font-family': _set_font_family,
    'font-size': _set_font_size,
    'font-weight': _set_font_weight,
    'line-height': _set_line_height,
    'letter-spacing': _set_letter_spacing,
}

def apply_declaration(descriptor: StyleDescriptor, declaration: Tuple[str, str]) -> StyleDescriptor:
    """Apply one ``(key, value)`` pair; unknown keys leave the descriptor as is."""
    key, value = declaration
    handler = PROPERTY_HANDLERS.get(key)
    if handler is None:
        logger.warning(f"Unknown property: {key}")
        return descriptor
    return handler(descriptor, value)

def map_category(raw: str) -> StyleDescriptor:
    """Build a text style descriptor from a raw category block.

    Args:
        raw: Category text, e.g. ``.heading-1 {font-size: 24px;line-height: normal;}``

    Returns:
        StyleDescriptor named after the selector

    Raises:
        InvalidCategoryFormatError: If the block is not ``selector { body }``
    """
    selector, body = split_category(raw)
    initial = StyleDescriptor(name=format_category_name(selector))
    return reduce(apply_declaration, parse_declarations(body), initial)

__all__ = [
    'FONT_WEIGHTS',
    'PROPERTY_HANDLERS',
    'map_font_weight',
    'parse_leading_float',
    'title_case_words',
    'format_category_name',
    'split_category',
    'parse_declarations',
    'apply_declaration',
    'map_category',
]
