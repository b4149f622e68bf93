"""Host managers for CSS Style Importer."""

from .base import BaseManager, BaseStyleSink
from .channel import ConsoleChannel, MessageChannel, Notification
from .fonts import FontManager
from .memory import MemoryStyleSink
from .factory import ManagerFactory

# Exported classes
__all__ = [
    'BaseManager',
    'BaseStyleSink',
    'ConsoleChannel',
    'MessageChannel',
    'Notification',
    'FontManager',
    'MemoryStyleSink',
    'ManagerFactory'
]
