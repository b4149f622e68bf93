"""UI notification channels for CSS Style Importer."""

from typing import Dict, Any, List, Optional
from typing_extensions import Literal, TypedDict
from .base import BaseManager
from ..utils.config import NOTIFY_ERROR, NOTIFY_SUCCESS
from ..utils.ui import UserInterface

class Notification(TypedDict):
    type: Literal['success', 'error']
    message: str

class MessageChannel(BaseManager):
    """Collect notifications for the panel that started the session."""
    
    def __init__(self):
        """Initialize message channel."""
        super().__init__()
        self.messages: List[Notification] = []
        self.closed = False
        
    def post_message(self, message: Notification) -> None:
        """Post a notification to the UI.
        
        Args:
            message: Notification with ``type`` and ``message`` keys
        """
        if self.closed:
            self.log_warning(f"Dropping message on closed channel: {message['message']}")
            return
        self.messages.append(message)
        
    def close(self) -> None:
        """End the session."""
        self.closed = True
        
    @property
    def has_errors(self) -> bool:
        return any(message['type'] == NOTIFY_ERROR for message in self.messages)
        
    def get_stats(self) -> Dict[str, Any]:
        """Get channel statistics."""
        return {
            'messages': len(self.messages),
            'errors': sum(1 for message in self.messages if message['type'] == NOTIFY_ERROR),
            'closed': self.closed,
        }

class ConsoleChannel(MessageChannel):
    """Message channel that also prints notifications to the terminal."""
    
    def __init__(self, ui: Optional[UserInterface] = None):
        """Initialize console channel.
        
        Args:
            ui: Terminal printer; a default one is created when omitted
        """
        super().__init__()
        self.ui = ui or UserInterface()
        
    def post_message(self, message: Notification) -> None:
        super().post_message(message)
        if self.closed:
            return
        if message['type'] == NOTIFY_SUCCESS:
            self.ui.print_success(message['message'])
        else:
            self.ui.print_error(message['message'])

# Exported classes
__all__ = ['Notification', 'MessageChannel', 'ConsoleChannel']
