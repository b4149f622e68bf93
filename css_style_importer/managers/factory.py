"""Manager factory for CSS Style Importer."""

import logging
from typing import Dict, Any, Iterable, Optional
from .channel import ConsoleChannel, MessageChannel
from .fonts import FontManager
from .memory import MemoryStyleSink
from ..utils.ui import UserInterface

class ManagerFactory:
    """Factory for creating and managing host managers."""
    
    def __init__(self):
        """Initialize manager factory."""
        self.logger = logging.getLogger(self.__class__.__name__)
        self._managers = {}
        
    def create_style_sink(self) -> MemoryStyleSink:
        """Create style sink.
        
        Returns:
            MemoryStyleSink: Style sink instance
        """
        if 'sink' not in self._managers:
            self._managers['sink'] = MemoryStyleSink()
        return self._managers['sink']
            
    def create_font_manager(self, families: Optional[Iterable[str]] = None) -> FontManager:
        """Create font manager.
        
        Args:
            families: Families installed on the host besides the fallback
            
        Returns:
            FontManager: Font manager instance
        """
        if 'fonts' not in self._managers:
            self._managers['fonts'] = FontManager(families)
        return self._managers['fonts']
            
    def create_channel(self, ui: Optional[UserInterface] = None) -> MessageChannel:
        """Create UI channel.
        
        Args:
            ui: Terminal printer; without one the channel stays silent
            
        Returns:
            MessageChannel: Channel instance
        """
        if 'channel' not in self._managers:
            self._managers['channel'] = ConsoleChannel(ui) if ui else MessageChannel()
        return self._managers['channel']
            
    def get_all_stats(self) -> Dict[str, Dict[str, Any]]:
        """Get statistics for all managers.
        
        Returns:
            Dict[str, Dict[str, Any]]: Dictionary of statistics for each manager
        """
        return {name: manager.get_stats() for name, manager in self._managers.items()}
        
    def cleanup_all(self) -> None:
        """Clean up all managers."""
        for name, manager in self._managers.items():
            try:
                manager.cleanup()
            except Exception as e:
                self.logger.error(f"Failed to cleanup {name} manager: {e}")
                
    def __enter__(self):
        """Context manager entry."""
        return self
        
    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.cleanup_all()

# Exported class
__all__ = ['ManagerFactory']
