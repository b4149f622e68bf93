"""Line-oriented extraction of variables and category blocks from CSS text."""

import re
import logging
from enum import Enum
from typing import List

from .models import ExtractedBlocks

logger = logging.getLogger(__name__)

# A custom property declaration anywhere inside an accumulated :root block
_ROOT_VARIABLE_RE = re.compile(r'--[\w-]+:\s*.+?;', re.ASCII)

# A standalone declaration occupying a whole line
_VARIABLE_LINE_RE = re.compile(r'^--[\w-]+:\s*.+?;$', re.ASCII)

COMMENT_PREFIX = '//'
CATEGORY_PREFIXES = ('.', '#')
ROOT_PREFIX = ':root'
BLOCK_END = '}'

class ParserState(Enum):
    NEUTRAL = 'neutral'
    IN_CATEGORY = 'in_category'
    IN_ROOT_BLOCK = 'in_root_block'

def _strip_semicolon(declaration: str) -> str:
    return declaration[:-1] if declaration.endswith(';') else declaration

def _root_variables(block: str) -> List[str]:
    return [_strip_semicolon(match) for match in _ROOT_VARIABLE_RE.findall(block)]

class BlockExtractor:
    """Splits CSS-like text into raw variables and raw category blocks.

    Lines are trimmed and concatenated without a separator while a block is
    open, so a category comes out as a single line such as
    ``.heading-1 {font-size: 24px;}``. Blocks still open at the end of the
    input are dropped.

    The opening line is checked for the closing brace too, so a one-line rule
    such as ``.a { font-size: 1px; }`` closes on that line instead of swallowing
    the next rule.
    """

    def __init__(self):
        self.state = ParserState.NEUTRAL
        self.buffer = ''
        self.result = ExtractedBlocks()

    def feed_line(self, raw_line: str) -> None:
        """Consume one line of input."""
        line = raw_line.strip()
        if not line or line.startswith(COMMENT_PREFIX):
            return

        if self.state is ParserState.NEUTRAL:
            self._handle_neutral(line)
        else:
            self._accumulate(line)

    def finish(self) -> ExtractedBlocks:
        """Return the extracted blocks, discarding any unterminated block."""
        if self.state is not ParserState.NEUTRAL:
            logger.debug(f"Discarding unterminated block: {self.buffer!r}")
        self.state = ParserState.NEUTRAL
        self.buffer = ''
        return self.result

    def _handle_neutral(self, line: str) -> None:
        if line.startswith(CATEGORY_PREFIXES):
            self._open(ParserState.IN_CATEGORY, line)
        elif line.startswith(ROOT_PREFIX):
            self._open(ParserState.IN_ROOT_BLOCK, line)
        elif _VARIABLE_LINE_RE.match(line):
            self.result.variables.append(_strip_semicolon(line))

    def _open(self, state: ParserState, line: str) -> None:
        self.state = state
        self.buffer = ''
        self._accumulate(line)

    def _accumulate(self, line: str) -> None:
        self.buffer += line
        if BLOCK_END not in line:
            return

        if self.state is ParserState.IN_CATEGORY:
            self.result.categories.append(self.buffer)
        else:
            self.result.variables.extend(_root_variables(self.buffer))

        self.state = ParserState.NEUTRAL
        self.buffer = ''

def extract_blocks(text: str) -> ExtractedBlocks:
    """Extract ``:root`` variables and category blocks from CSS-like text.

    Args:
        text: Raw CSS-like source

    Returns:
        ExtractedBlocks with variables such as ``--brand-color: #fff`` and
        categories such as ``.heading-1 {font-size: 24px;}``
    """
    extractor = BlockExtractor()
    for line in text.split('\n'):
        extractor.feed_line(line)
    blocks = extractor.finish()
    logger.debug(
        f"Extracted {len(blocks.variables)} variables and "
        f"{len(blocks.categories)} categories"
    )
    return blocks

__all__ = ['ParserState', 'BlockExtractor', 'extract_blocks']
