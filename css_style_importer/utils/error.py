"""Error utility for CSS Style Importer."""

class StyleImporterError(Exception):
    """Base exception for CSS Style Importer."""
    pass

class UnsupportedFormatError(StyleImporterError):
    """Raised when a color literal matches no supported grammar."""
    pass

class InvalidHexFormatError(StyleImporterError):
    """Raised when a hex color string cannot be decoded."""
    pass

class InvalidCategoryFormatError(StyleImporterError):
    """Raised when a category block lacks the selector { body } shape."""
    pass

class FontLoadError(StyleImporterError):
    """Raised when the host cannot load a font."""
    pass

class FileOperationError(StyleImporterError):
    """Raised when file operations fail."""
    pass

class ConfigurationError(StyleImporterError):
    """Raised when configuration is invalid."""
    pass

# Exported exceptions
__all__ = [
    'StyleImporterError',
    'UnsupportedFormatError',
    'InvalidHexFormatError',
    'InvalidCategoryFormatError',
    'FontLoadError',
    'FileOperationError',
    'ConfigurationError',
]
