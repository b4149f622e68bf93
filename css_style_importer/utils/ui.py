"""Terminal output for CSS Style Importer."""

import colorama
import orjson
from colorama import Fore, Style
from .config import ENABLE_COLOR

class UserInterface:
    """Handles user interface and interaction"""
    def __init__(self, use_color: bool = ENABLE_COLOR):
        self.verbose = False
        self.quiet = False
        self.output_format = 'text'
        self.use_color = use_color
        if use_color:
            colorama.init()

    def set_verbosity(self, verbose: bool, quiet: bool):
        """Set verbosity level"""
        self.verbose = verbose
        self.quiet = quiet

    def set_output_format(self, format: str):
        """Set output format"""
        self.output_format = format

    def _paint(self, color: str, text: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{Style.RESET_ALL}"

    def print_error(self, message: str):
        """Print error message"""
        if not self.quiet:
            print(self._paint(Fore.RED, f"Error: {message}"))

    def print_success(self, message: str):
        """Print success message"""
        if not self.quiet:
            print(self._paint(Fore.GREEN, f"Success: {message}"))

    def print_debug(self, message: str):
        """Print debug message"""
        if self.verbose and not self.quiet:
            print(self._paint(Fore.CYAN, f"Debug: {message}"))

    def format_output(self, data: dict) -> str:
        """Format output data"""
        if self.output_format == 'json':
            return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode('utf-8')
        elif self.output_format == 'text':
            return self._format_text_output(data)
        else:
            return str(data)

    def _format_text_output(self, data: dict) -> str:
        """Format output as text"""
        output = []
        for key, value in data.items():
            if isinstance(value, list):
                output.append(f"{key}:")
                for item in value:
                    if isinstance(item, dict):
                        output.append(f"  - {item.get('name', '')}")
                    else:
                        output.append(f"  - {item}")
            elif isinstance(value, dict):
                output.append(f"{key}:")
                for k, v in value.items():
                    output.append(f"  {k}: {v}")
            else:
                output.append(f"{key}: {value}")
        return "\n".join(output)

# Exported class
__all__ = ['UserInterface']
