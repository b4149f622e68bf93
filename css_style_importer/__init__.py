"""Convert CSS custom properties and selector blocks into design-tool styles."""

from .utils.config import VERSION
from .importer import StyleImporter

__version__ = VERSION

__all__ = ['StyleImporter', '__version__']
