#!/usr/bin/env python3
"""
Command-line interface for CSS Style Importer.
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from css_style_importer.importer import StyleImporter
from css_style_importer.managers.factory import ManagerFactory
from css_style_importer.utils.config import MESSAGE_CHECK_CSS_TEXT, VERSION
from css_style_importer.utils.error import ConfigurationError, FileOperationError
from css_style_importer.utils.file import safe_read_file
from css_style_importer.utils.logging import setup_logging
from css_style_importer.utils.ui import UserInterface

def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Create paint and text styles from CSS variables and selector blocks'
    )

    # Input source
    parser.add_argument(
        'file',
        help='Path to a CSS file',
        type=Path
    )

    # Host options
    parser.add_argument(
        '--font',
        help='Font family installed on the host (repeatable); Inter is always installed',
        action='append',
        default=[],
        metavar='FAMILY'
    )

    # Output options
    parser.add_argument(
        '--json',
        help='Print the created styles as JSON',
        action='store_true'
    )
    parser.add_argument(
        '--no-color',
        help='Disable colored output',
        action='store_true'
    )
    parser.add_argument(
        '--log-file',
        help='Also write log records to this file',
        type=str,
        default=None
    )

    # Other options
    parser.add_argument(
        '-v', '--verbose',
        help='Enable verbose output',
        action='store_true'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {VERSION}'
    )

    return parser.parse_args(argv)

async def run(args: argparse.Namespace, ui: UserInterface) -> int:
    """Read the input file and run one import pass over it."""
    try:
        text = await safe_read_file(str(args.file))
    except FileOperationError as e:
        logging.error(f"Error: {e}")
        ui.print_error(str(e))
        return 1

    with ManagerFactory() as factory:
        try:
            fonts = factory.create_font_manager(args.font)
        except ConfigurationError as e:
            logging.error(f"Error: {e}")
            ui.print_error(str(e))
            return 1

        sink = factory.create_style_sink()
        channel = factory.create_channel(ui)
        importer = StyleImporter(sink, fonts, channel)

        await importer.handle_message({'type': MESSAGE_CHECK_CSS_TEXT, 'text': text})

        print(ui.format_output(sink.to_dict()))
        ui.print_debug(f"Stats: {factory.get_all_stats()}")
        return 1 if channel.has_errors else 0

def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    ui = UserInterface(use_color=not args.no_color)
    ui.set_verbosity(args.verbose, quiet=False)
    ui.set_output_format('json' if args.json else 'text')

    return asyncio.run(run(args, ui))

if __name__ == '__main__':
    sys.exit(main())
