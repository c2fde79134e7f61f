"""
Entry point for TA 1600 Disk Image Utility.

Allows running as: python -m ta_image_util
"""

import argparse
import sys

from . import __version__
from .commands import cmd_copy, cmd_dir, cmd_info
from .constants import OWNER_WIDTH_LONG, OWNER_WIDTHS
from .formatter import OutputFormatter
from .logging_config import setup_logging, QUIET, NORMAL, VERBOSE


class ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"** Error: {message}\n")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog='ta_image_util',
        description='Extract data from TA 1600 floppy disk images',
    )

    # Global options
    parser.add_argument('--version', action='version',
                        version=f'%(prog)s {__version__}')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Show detailed output')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='Suppress non-essential output')
    parser.add_argument('--json', action='store_true', help='Output in JSON format')
    parser.add_argument('--owner-width', type=int, choices=OWNER_WIDTHS,
                        default=OWNER_WIDTH_LONG,
                        help='Width of the VOL1 owner field (default: %(default)s)')
    parser.add_argument('image', help='Disk image file')

    subparsers = parser.add_subparsers(dest='command', required=True)

    # Info command
    subparsers.add_parser('info', help='Show the volume label')

    # Dir command
    dir_parser = subparsers.add_parser('dir', help='Show directory or file details')
    dir_parser.add_argument('names', nargs='*', metavar='NAME',
                            help="Files to show (NAME.ORG, or '*' for all)")

    # Copy command
    copy_parser = subparsers.add_parser('copy', help='Copy files to a local directory')
    copy_parser.add_argument('names', nargs='+', metavar='NAME',
                             help="Files to copy (NAME.ORG, or '*' for all)")
    copy_parser.add_argument('-d', '--dest', default='.',
                             help='Destination directory (default: current directory)')

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    # Configure logging based on verbosity flags
    if args.quiet:
        setup_logging(level=QUIET)
    elif args.verbose:
        setup_logging(level=VERBOSE)
    else:
        setup_logging(level=NORMAL)

    formatter = OutputFormatter(json_mode=args.json)

    match args.command:
        case 'info':
            return cmd_info(args, formatter)
        case 'dir':
            return cmd_dir(args, formatter)
        case 'copy':
            return cmd_copy(args, formatter)
        case _:
            formatter.error(f"Unknown command: {args.command}")
            return 1


if __name__ == '__main__':
    sys.exit(main())
