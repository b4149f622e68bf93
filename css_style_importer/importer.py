"""Message handler that turns CSS text into paint and text styles."""

import logging
from typing import List, Tuple

from typing_extensions import TypedDict

from .core.colors import normalize_color
from .core.extractor import extract_blocks
from .core.fonts import FontLoader, resolve_font_family
from .core.models import NormalizedColor
from .core.styles import map_category
from .core.variables import parse_variable
from .managers.base import BaseStyleSink
from .managers.channel import MessageChannel
from .utils.config import (
    MESSAGE_CHECK_CSS_TEXT, NOTIFY_ERROR, NOTIFY_SUCCESS,
    TEXT_STYLES_ERROR_MESSAGE, VARIABLES_ERROR_MESSAGE, VARIABLES_SUCCESS_MESSAGE,
)
from .utils.error import StyleImporterError

logger = logging.getLogger(__name__)

class CheckCssTextMessage(TypedDict):
    type: str
    text: str

class StyleImporter:
    """Runs one import pass per inbound UI message.

    Variables become paint styles as a batch: every color is normalized before
    any style is created, so a bad color produces one error notification and
    no paint styles. Categories become text styles one by one; the first
    malformed category stops the remaining ones and is reported as an error.
    The channel is closed after every message, whatever the outcome.
    """

    def __init__(self, sink: BaseStyleSink, fonts: FontLoader, channel: MessageChannel):
        self.sink = sink
        self.fonts = fonts
        self.channel = channel

    async def handle_message(self, message: CheckCssTextMessage) -> None:
        """Handle one message from the UI and close the session."""
        try:
            if message.get('type') == MESSAGE_CHECK_CSS_TEXT:
                await self.import_text(message.get('text', ''))
            else:
                logger.debug(f"Ignoring message of type {message.get('type')!r}")
        finally:
            self.channel.close()

    async def import_text(self, text: str) -> None:
        blocks = extract_blocks(text)
        self.process_color_variables(blocks.variables)
        try:
            await self.process_categories(blocks.categories)
        except StyleImporterError as e:
            logger.error(f"Error creating text styles: {e}")
            self._notify(NOTIFY_ERROR, f"{TEXT_STYLES_ERROR_MESSAGE}: {e}")

    def process_color_variables(self, variables: List[str]) -> int:
        """Create one paint style per color variable.

        Returns:
            Number of paint styles created
        """
        try:
            styles = self._normalize_variables(variables)
        except StyleImporterError as e:
            logger.error(f"Error extracting CSS variables: {e}")
            self._notify(NOTIFY_ERROR, VARIABLES_ERROR_MESSAGE)
            return 0

        for name, color in styles:
            self.sink.create_paint_style(name, color)
        self._notify(NOTIFY_SUCCESS, VARIABLES_SUCCESS_MESSAGE)
        return len(styles)

    async def process_categories(self, categories: List[str]) -> int:
        """Create one text style per category block, in order.

        Returns:
            Number of text styles created

        Raises:
            InvalidCategoryFormatError: On the first malformed category
            FontLoadError: If the fallback font cannot be loaded
        """
        for category in categories:
            descriptor = map_category(category)
            font_family = await resolve_font_family(descriptor, self.fonts)
            self.sink.create_text_style(descriptor, font_family)
        return len(categories)

    def _normalize_variables(self, variables: List[str]) -> List[Tuple[str, NormalizedColor]]:
        styles = []
        for raw in variables:
            parsed = parse_variable(raw)
            if parsed is None:
                continue
            name, value = parsed
            styles.append((name, normalize_color(value)))
        return styles

    def _notify(self, kind: str, text: str) -> None:
        self.channel.post_message({'type': kind, 'message': text})

__all__ = ['CheckCssTextMessage', 'StyleImporter']
