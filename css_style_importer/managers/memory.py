"""In-memory style sink for CSS Style Importer."""

from typing import Dict, Any, List
from .base import BaseStyleSink
from ..core.models import NormalizedColor, PaintStyle, StyleDescriptor, TextStyle

class MemoryStyleSink(BaseStyleSink):
    """Keep created styles in local lists, in creation order."""
    
    def __init__(self):
        """Initialize memory sink."""
        super().__init__()
        self.paint_styles: List[PaintStyle] = []
        self.text_styles: List[TextStyle] = []
        
    def create_paint_style(self, name: str, color: NormalizedColor) -> None:
        """Create and store a paint style.
        
        Args:
            name: Style name
            color: Normalized color
        """
        self.paint_styles.append(PaintStyle(name=name, color=color))
        self.log_debug(f"Created paint style {name!r}")
        
    def create_text_style(self, descriptor: StyleDescriptor, font_family: str) -> None:
        """Create and store a text style.
        
        Args:
            descriptor: Mapped typography attributes
            font_family: Family resolved for the descriptor
        """
        style = TextStyle.from_descriptor(descriptor, font_family)
        self.text_styles.append(style)
        self.log_debug(f"Created text style {style.name!r} using {font_family!r}")
        
    def paint_style_names(self) -> List[str]:
        return [style.name for style in self.paint_styles]
        
    def get_stats(self) -> Dict[str, Any]:
        """Get sink statistics.
        
        Returns:
            Dictionary with style counts
        """
        return {
            'paint_styles': len(self.paint_styles),
            'text_styles': len(self.text_styles),
        }
        
    def to_dict(self) -> Dict[str, Any]:
        """Serializable view of every stored style."""
        return {
            'paint_styles': [style.to_dict() for style in self.paint_styles],
            'text_styles': [style.to_dict() for style in self.text_styles],
        }
        
    def clear(self) -> None:
        """Drop all stored styles."""
        self.paint_styles.clear()
        self.text_styles.clear()
        
    def cleanup(self) -> None:
        """Clean up resources."""
        self.log_info(f"Sink held {self.get_stats()}")

# Exported class
__all__ = ['MemoryStyleSink']
