"""Font family fallback policy for text styles."""

import re
import logging
from typing import List, Optional

from typing_extensions import Protocol

from .models import StyleDescriptor
from ..utils.config import DEFAULT_FONT_FAMILY
from ..utils.error import FontLoadError

logger = logging.getLogger(__name__)

_QUOTES_RE = re.compile(r'^[\'"]|[\'"]$')

class FontLoader(Protocol):
    """Host capability that loads a font or raises FontLoadError."""

    async def load_font(self, family: str, style: str) -> None:
        ...

def parse_font_families(font_family: Optional[str]) -> List[str]:
    """Split a CSS font-family list into bare family names.

    ``'"Open Sans", Arial'`` gives ``['Open Sans', 'Arial']``.
    """
    if not font_family:
        return []
    families = [_QUOTES_RE.sub('', part.strip()) for part in font_family.split(',')]
    return [family for family in families if family]

async def resolve_font_family(descriptor: StyleDescriptor, loader: FontLoader,
                              fallback: str = DEFAULT_FONT_FAMILY) -> str:
    """Pick the first family of the descriptor the host can load.

    Candidates are tried one at a time, in the order they are listed, with the
    descriptor's weight style. When none loads, the fallback family is loaded
    with the same style.

    Args:
        descriptor: Style whose font-family list is resolved
        loader: Host font loader
        fallback: Family used when no candidate is available

    Returns:
        Name of the loaded family

    Raises:
        FontLoadError: If the fallback family cannot be loaded either
    """
    style = descriptor.weight_style
    for family in parse_font_families(descriptor.font_family):
        try:
            await loader.load_font(family, style)
            return family
        except FontLoadError:
            logger.warning(f"Failed to load font family: {family}")

    await loader.load_font(fallback, style)
    logger.warning(f"No available fonts found. Fallback to '{fallback}'.")
    return fallback

__all__ = ['FontLoader', 'parse_font_families', 'resolve_font_family']
