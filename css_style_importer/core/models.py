"""Data model for parsed CSS and the styles built from it."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..utils.config import DEFAULT_FONT_STYLE, UNTITLED_STYLE_NAME

@dataclass
class ExtractedBlocks:
    """Variables and category blocks found in a CSS text, in source order."""
    variables: List[str] = field(default_factory=list)
    categories: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class NormalizedColor:
    """RGB channels in [0, 1]; opacity only for alpha-bearing formats."""
    r: float
    g: float
    b: float
    opacity: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {'r': self.r, 'g': self.g, 'b': self.b}
        if self.opacity is not None:
            data['opacity'] = self.opacity
        return data

class LineHeightMode(str, Enum):
    AUTO = 'AUTO'
    PIXELS = 'PIXELS'

@dataclass(frozen=True)
class LineHeight:
    mode: LineHeightMode
    value: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.value is None:
            return {'unit': self.mode.value}
        return {'unit': self.mode.value, 'value': self.value}

@dataclass(frozen=True)
class StyleDescriptor:
    """Typography attributes mapped from one category block."""
    name: str
    font_family: Optional[str] = None
    font_style: Optional[str] = None
    font_size_pt: Optional[float] = None
    line_height: Optional[LineHeight] = None
    letter_spacing_percent: Optional[float] = None

    @property
    def weight_style(self) -> str:
        return self.font_style or DEFAULT_FONT_STYLE

@dataclass(frozen=True)
class PaintStyle:
    """A named solid color style as materialized by a sink."""
    name: str
    color: NormalizedColor

    def to_dict(self) -> Dict[str, Any]:
        return {'type': 'PAINT', 'name': self.name, 'color': self.color.to_dict()}

@dataclass(frozen=True)
class TextStyle:
    """A named text style as materialized by a sink."""
    name: str
    font_family: str
    font_style: str
    font_size: Optional[float] = None
    line_height: Optional[LineHeight] = None
    letter_spacing_percent: Optional[float] = None

    @classmethod
    def from_descriptor(cls, descriptor: StyleDescriptor, font_family: str) -> 'TextStyle':
        """Build a text style, applying the host defaults for missing fields.

        A zero font size is treated like an absent one.
        """
        return cls(
            name=descriptor.name or UNTITLED_STYLE_NAME,
            font_family=font_family,
            font_style=descriptor.weight_style,
            font_size=descriptor.font_size_pt or None,
            line_height=descriptor.line_height,
            letter_spacing_percent=descriptor.letter_spacing_percent,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'type': 'TEXT',
            'name': self.name,
            'fontName': {'family': self.font_family, 'style': self.font_style},
        }
        if self.font_size is not None:
            data['fontSize'] = self.font_size
        if self.line_height is not None:
            data['lineHeight'] = self.line_height.to_dict()
        if self.letter_spacing_percent is not None:
            data['letterSpacing'] = {'unit': 'PERCENT', 'value': self.letter_spacing_percent}
        return data

__all__ = [
    'ExtractedBlocks',
    'NormalizedColor',
    'LineHeightMode',
    'LineHeight',
    'StyleDescriptor',
    'PaintStyle',
    'TextStyle',
]
