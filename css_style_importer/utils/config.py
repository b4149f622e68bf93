"""Configuration utility for CSS Style Importer."""

# Project version
VERSION = "1.0.0"

# Input limits (in bytes)
MAX_CSS_SIZE = 5 * 1024 * 1024      # 5 MB

# Inbound message discriminator
MESSAGE_CHECK_CSS_TEXT = 'check-css-text'

# Outbound notification types
NOTIFY_SUCCESS = 'success'
NOTIFY_ERROR = 'error'

# Notification texts
VARIABLES_SUCCESS_MESSAGE = 'CSS variables extracted successfully.'
VARIABLES_ERROR_MESSAGE = 'Failed to extract CSS variables.'
TEXT_STYLES_ERROR_MESSAGE = 'Failed to create text styles'

# Typography defaults
DEFAULT_FONT_FAMILY = 'Inter'
DEFAULT_FONT_STYLE = 'Regular'
UNTITLED_STYLE_NAME = 'Untitled Style'

# Logging
LOG_LEVEL = 'INFO'

# Other settings
ENABLE_COLOR = True

# Exported config
__all__ = [
    'VERSION', 'MAX_CSS_SIZE',
    'MESSAGE_CHECK_CSS_TEXT', 'NOTIFY_SUCCESS', 'NOTIFY_ERROR',
    'VARIABLES_SUCCESS_MESSAGE', 'VARIABLES_ERROR_MESSAGE',
    'TEXT_STYLES_ERROR_MESSAGE',
    'DEFAULT_FONT_FAMILY', 'DEFAULT_FONT_STYLE', 'UNTITLED_STYLE_NAME',
    'LOG_LEVEL', 'ENABLE_COLOR',
]
