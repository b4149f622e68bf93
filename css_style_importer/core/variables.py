"""Custom property parsing and paint style naming."""

import re
import logging
from typing import Optional, Tuple

from .styles import title_case_words

logger = logging.getLogger(__name__)

# First run of digits, or "a" followed by digits (alpha steps like a10)
_SCALE_STEP_RE = re.compile(r'([0-9]+|a[0-9]+)', re.IGNORECASE | re.ASCII)

def format_variable_name(name: str) -> str:
    """Turn ``--gray-100`` into ``Gray /100`` and ``--brand-color`` into ``Brand Color``.

    Only the first digit group gets a slash.
    """
    if name.startswith('--'):
        name = name[2:]
    name = name.replace('-', ' ')
    name = _SCALE_STEP_RE.sub(r'/\1', name, count=1)
    return title_case_words(name)

def parse_variable(raw: str) -> Optional[Tuple[str, str]]:
    """Split ``--name: value`` into a style name and a color literal.

    Declarations whose value contains another ``:`` are skipped.

    Returns:
        ``(style_name, value)`` or None when the declaration is skipped
    """
    parts = raw.split(':')
    if len(parts) != 2:
        logger.warning(f"Skipping variable that does not split into name and value: {raw!r}")
        return None
    name, value = (part.strip() for part in parts)
    return format_variable_name(name), value

__all__ = ['format_variable_name', 'parse_variable']
