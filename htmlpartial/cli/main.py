"""Main CLI entry point for html-partial."""

import argparse
import sys
from typing import Optional

from .commands import build_documents


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the html-partial CLI."""
    parser = argparse.ArgumentParser(
        prog='html-partial',
        description='Resolve partial includes in HTML documents'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    build_parser = subparsers.add_parser('build', help='Resolve partials in documents')
    build_parser.add_argument(
        'sources',
        nargs='+',
        metavar='SRC',
        help="HTML documents to resolve ('-' reads stdin)"
    )
    build_parser.add_argument(
        '--out-dir',
        type=str,
        help='Write resolved documents here instead of stdout'
    )
    build_parser.add_argument(
        '--config',
        type=str,
        help='Path to YAML config file'
    )
    build_parser.add_argument(
        '--base-path',
        type=str,
        help='Prefix prepended to every src attribute'
    )
    build_parser.add_argument(
        '--tag-name',
        type=str,
        help="Partial element name (default: partial)"
    )
    build_parser.add_argument(
        '--variable-prefix',
        type=str,
        help="Placeholder prefix in partial files (default: @@)"
    )
    build_parser.add_argument(
        '--no-pretty',
        action='store_true',
        help='Skip pretty-printing of the resolved document'
    )
    build_parser.add_argument(
        '--no-cycle-check',
        action='store_true',
        help='Do not detect circular includes'
    )
    build_parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    build_parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    build_parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='info',
        help='Set log level'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if parsed_args.command == 'build':
        return build_documents(parsed_args)

    parser.print_help()
    return 1


if __name__ == '__main__':
    sys.exit(main())
