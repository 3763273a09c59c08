"""
Command-line entry point.

    hashspell <dictionary-file> <text-file> [--format text|json] [--table-stats]
"""

import argparse
import json
import os
import sys
from dataclasses import replace
from typing import List, Optional

from . import __version__
from .checker import SpellChecker
from .config_logging import (
    HashSpellError, ValidationError, StructuredLogger,
    LOG_LEVELS, REPORT_FORMATS, get_config, set_config,
)
from .report import format_json, format_text


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hashspell',
        description='Report words in a text file that are missing from a dictionary.'
    )
    parser.add_argument('dictionary', help='Dictionary file (whitespace-separated words)')
    parser.add_argument('text', help='Text file to check')
    parser.add_argument('--format', dest='report_format', choices=REPORT_FORMATS,
                        help='Report format (default: text)')
    parser.add_argument('--table-stats', action='store_true',
                        help='Include hash table slot statistics')
    parser.add_argument('--log-level', type=str.upper, choices=LOG_LEVELS,
                        help='Logging level for stderr diagnostics')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def run(args: argparse.Namespace) -> int:
    config = get_config()
    overrides = {}
    if args.report_format:
        overrides['report_format'] = args.report_format
    if args.log_level:
        overrides['log_level'] = args.log_level
    if overrides:
        config = replace(config, **overrides)

    is_valid, errors = config.validate()
    if not is_valid:
        raise ValidationError('; '.join(errors))
    set_config(config)

    StructuredLogger.new_correlation_id()
    checker = SpellChecker(config=config)
    checker.load_dictionary(args.dictionary)

    if config.report_format == 'json':
        with checker.check_file(args.text) as words:
            for _ in words:
                pass
        print(format_json(checker.report(include_table_stats=args.table_stats)))
        return 0

    with checker.check_file(args.text) as words:
        for word in words:
            print(word)
    for line in format_text(checker.report(include_table_stats=args.table_stats)):
        print(line)
    return 0


def _wants_json(args: argparse.Namespace) -> bool:
    """JSON output requested by flag, or by environment when no flag is given."""
    if args.report_format:
        return args.report_format == 'json'
    return os.environ.get('HASHSPELL_REPORT_FORMAT', '').lower() == 'json'


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return run(args)
    except HashSpellError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        if _wants_json(args):
            print(json.dumps(e.to_dict(), indent=2))
        return e.exit_code


if __name__ == '__main__':
    sys.exit(main())
