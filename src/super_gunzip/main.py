#!/usr/bin/env python3
"""
super-gunzip

Compresses or decompresses every file matching a glob pattern with gzip,
spreading the work across a pool of threads.
"""

import argparse
import sys
from typing import List, Optional
from rich_argparse import RichHelpFormatter

from .utils import (
    print_header,
    print_section,
    print_status,
    display_run_summary,
)
from .config import DEFAULT_COMPRESSLEVEL, build_run_config
from .errors import ConfigError, PatternError
from .worker_pool import run_batch
from . import __version__


EXIT_FATAL = 2


class CustomRichHelpFormatter(RichHelpFormatter):
    """Custom formatter that combines rich-argparse with proper width handling."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.width = 80
        self.max_help_position = 30


def print_logo():
    """Print the ASCII art logo."""
    logo = r"""
╔════════════════════════════════════╗
║   ___ _   _ _ __   ___ _ __        ║
║  / __| | | | '_ \ / _ \ '__|       ║
║  \__ \ |_| | |_) |  __/ |          ║
║  |___/\__,_| .__/ \___|_|  gunzip  ║
║            |_|                     ║
╚════════════════════════════════════╝
    """
    print(logo)


def print_colored_banner():
    """Print a banner with version info."""
    banner = f"""
  ->  super-gunzip v{__version__}
  ->  Parallel gzip compression and decompression by glob pattern
    """
    print(banner)


def _add_run_options(subparser: argparse.ArgumentParser, verb: str):
    subparser.add_argument(
        'pattern',
        help='Glob-like pattern to match files against (quote it to stop the shell expanding it)',
        metavar='PATTERN'
    )
    subparser.add_argument(
        '-k', '--keep-original',
        action='store_true',
        help=f'Keep the original files after {verb}. By default they are deleted.'
    )
    subparser.add_argument(
        '-n', '--num-threads',
        type=int,
        default=None,
        help=f'Maximum number of threads to split the {verb} across (default: 1)',
        metavar='N'
    )
    subparser.add_argument(
        '-f', '--force',
        action='store_true',
        help='Overwrite output files that already exist instead of failing'
    )
    subparser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help='Do not print the logo or the progress bar'
    )
    subparser.add_argument(
        '--strict',
        action='store_true',
        help='Reject a non-positive thread count instead of falling back to 1'
    )


def create_colored_parser():
    """Create the argument parser with gzip and unzip subcommands."""
    parser = argparse.ArgumentParser(
        prog='super-gunzip',
        description="Compress or decompress all files matching a glob pattern using gzip.",
        formatter_class=CustomRichHelpFormatter,
        add_help=True
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    subparsers = parser.add_subparsers(dest='command', metavar='COMMAND')
    subparsers.required = True

    gzip_parser = subparsers.add_parser(
        'gzip',
        help='Compress all files matching the pattern, appending a .gz extension',
        formatter_class=CustomRichHelpFormatter
    )
    _add_run_options(gzip_parser, 'compression')
    gzip_parser.add_argument(
        '-l', '--level',
        type=int,
        default=DEFAULT_COMPRESSLEVEL,
        choices=range(0, 10),
        help=f'Compression level from 0 (none) to 9 (best) (default: {DEFAULT_COMPRESSLEVEL})',
        metavar='LEVEL'
    )

    unzip_parser = subparsers.add_parser(
        'unzip',
        aliases=['gunzip'],
        help='Decompress all .gz files matching the pattern, removing the .gz extension',
        formatter_class=CustomRichHelpFormatter
    )
    _add_run_options(unzip_parser, 'decompression')

    return parser


def main(argv: Optional[List[str]] = None):
    parser = create_colored_parser()
    args = parser.parse_args(argv)

    if not args.quiet:
        print_logo()
        print_colored_banner()

    try:
        config = build_run_config(
            mode=args.command,
            pattern=args.pattern,
            thread_count=args.num_threads,
            keep_original=args.keep_original,
            overwrite=args.force,
            compresslevel=getattr(args, 'level', DEFAULT_COMPRESSLEVEL),
            show_progress=not args.quiet,
            strict=args.strict,
        )
    except ConfigError as e:
        print_status(str(e), "[ERROR]")
        sys.exit(EXIT_FATAL)

    print_header(f"super-gunzip - {config.mode.value.upper()} Mode")
    print_status(f"Pattern: {config.pattern}")
    print_status(f"Threads: {config.thread_count}")
    print_status(f"Keep originals: {'yes' if config.keep_original else 'no'}")

    print_section("Processing")
    try:
        summary = run_batch(config)
    except PatternError as e:
        print_status(str(e), "[ERROR]")
        sys.exit(EXIT_FATAL)

    if summary.total == 0:
        print_status("No files matched the pattern.", "[WARN]")

    display_run_summary(summary)
    sys.exit(summary.exit_code)


if __name__ == "__main__":
    main()
