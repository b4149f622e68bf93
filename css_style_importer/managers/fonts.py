"""Font availability for CSS Style Importer."""

from typing import Dict, Any, Iterable, List, Optional, Set, Tuple
from .base import BaseManager
from ..utils.config import DEFAULT_FONT_FAMILY
from ..utils.error import ConfigurationError, FontLoadError

class FontManager(BaseManager):
    """Answer font load requests from a fixed set of installed fonts.
    
    A family registered without styles accepts every style. Every attempt is
    recorded in ``attempts`` as a ``(family, style)`` pair.
    """
    
    def __init__(self, families: Optional[Iterable[str]] = None,
                 include_default: bool = True):
        """Initialize font manager.
        
        Args:
            families: Families available in every style
            include_default: Whether the fallback family is installed
        """
        super().__init__()
        self._fonts: Dict[str, Optional[Set[str]]] = {}
        self.attempts: List[Tuple[str, str]] = []
        self.loaded: List[Tuple[str, str]] = []
        
        if include_default:
            self.add_font(DEFAULT_FONT_FAMILY)
        for family in families or ():
            self.add_font(family)
            
    def add_font(self, family: str, styles: Optional[Iterable[str]] = None) -> None:
        """Register an installed family.
        
        Args:
            family: Family name
            styles: Styles available for the family, or None for all

        Raises:
            ConfigurationError: If the family name is blank
        """
        family = family.strip()
        if not family:
            raise ConfigurationError("Font family name must not be empty")
        self.log_debug(f"Registered font family {family!r}")
        if styles is None:
            self._fonts[family] = None
            return
        known = self._fonts.get(family, set())
        if known is None:
            return
        self._fonts[family] = known | set(styles)
        
    def is_available(self, family: str, style: str) -> bool:
        if family not in self._fonts:
            return False
        styles = self._fonts[family]
        return styles is None or style in styles
        
    async def load_font(self, family: str, style: str) -> None:
        """Load a font.
        
        Args:
            family: Family name
            style: Weight style name, e.g. ``Bold``
            
        Raises:
            FontLoadError: If the font is not installed
        """
        self.attempts.append((family, style))
        if not self.is_available(family, style):
            raise FontLoadError(f"Font not available: {family} {style}")
        self.loaded.append((family, style))
        
    def get_stats(self) -> Dict[str, Any]:
        """Get font statistics.
        
        Returns:
            Dictionary with installed family and attempt counts
        """
        return {
            'installed_families': len(self._fonts),
            'attempts': len(self.attempts),
            'loaded': len(self.loaded),
            'failed': len(self.attempts) - len(self.loaded),
        }
        
    def cleanup(self) -> None:
        """Clean up resources."""
        self.attempts.clear()
        self.loaded.clear()

# Exported class
__all__ = ['FontManager']
