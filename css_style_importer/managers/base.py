"""Base classes for the host-side managers of CSS Style Importer."""

import logging
from typing import Dict, Any, List
from abc import ABC, abstractmethod
from ..core.models import NormalizedColor, StyleDescriptor

class BaseManager(ABC):
    """Base class for all host managers."""
    
    def __init__(self):
        """Initialize base manager."""
        self.logger = logging.getLogger(self.__class__.__name__)
        
    @abstractmethod
    def get_stats(self) -> Dict[str, Any]:
        """Get usage statistics."""
        pass
        
    def log_warning(self, message: str) -> None:
        """Log warning message."""
        self.logger.warning(message)
        
    def log_info(self, message: str) -> None:
        """Log info message."""
        self.logger.info(message)
        
    def log_debug(self, message: str) -> None:
        """Log debug message."""
        self.logger.debug(message)
        
    def cleanup(self) -> None:
        """Clean up resources."""
        pass
        
    def __enter__(self):
        """Context manager entry."""
        return self
        
    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.cleanup()

class BaseStyleSink(BaseManager):
    """Receives the styles built by the importer, one call per style.

    Implementations decide how styles are stored; the importer never reads
    them back.
    """

    @abstractmethod
    def create_paint_style(self, name: str, color: NormalizedColor) -> None:
        """Create a solid color style.
        
        Args:
            name: Style name, e.g. ``Gray /100``
            color: Normalized color
        """
        pass

    @abstractmethod
    def create_text_style(self, descriptor: StyleDescriptor, font_family: str) -> None:
        """Create a text style.
        
        Args:
            descriptor: Mapped typography attributes
            font_family: Family resolved for the descriptor
        """
        pass

    @abstractmethod
    def paint_style_names(self) -> List[str]:
        """Names of the paint styles that already exist."""
        pass

    def style_exists(self, name: str) -> bool:
        """Check whether a paint style with this name already exists."""
        return name in self.paint_style_names()

# Exported classes
__all__ = ['BaseManager', 'BaseStyleSink']
