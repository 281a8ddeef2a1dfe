"""
# Yapp: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.

mdBook invokes the preprocessor twice:
`mdbook-yapp supports «renderer»` to ask whether a renderer is supported,
then `mdbook-yapp` with the book on standard input.
"""

import argparse
import sys
from typing import Optional, TextIO

from yapp._version import __version__
from yapp.config import load_rule_set
from yapp.constants import GENERIC_ERROR_EXIT_CODE
from yapp.core import YappPreprocessor
from yapp.exceptions import HostProtocolException
from yapp.protocol import check_mdbook_version, parse_input, write_output

DESCRIPTION = '''
    A mdbook preprocessor for simple replacement patterns.
'''
CONFIG_FILE_NAME_HELP = '''
    YAML file of replacement rules
    (default: the first of `yapp.yaml`, `yapp.yml`, `.yapp.yaml` in the working directory)
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every changed chapter to standard error)
'''
SUPPORTS_HELP = '''
    check whether a renderer is supported by this preprocessor
'''
RENDERER_HELP = '''
    name of the renderer
'''


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(prog='mdbook-yapp', description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-c', '--config',
        dest='config_file_name',
        default=None,
        help=CONFIG_FILE_NAME_HELP,
        metavar='yapp.yaml',
    )

    subparsers = argument_parser.add_subparsers(dest='subcommand')
    supports_parser = subparsers.add_parser('supports', help=SUPPORTS_HELP, description=SUPPORTS_HELP)
    supports_parser.add_argument('renderer', help=RENDERER_HELP)

    return argument_parser.parse_args(arguments)


def handle_preprocessing(preprocessor: YappPreprocessor, input_file: TextIO, output_file: TextIO):
    context, book = parse_input(input_file)
    check_mdbook_version(context.mdbook_version, preprocessor.name)
    processed_book = preprocessor.run(context, book)
    write_output(processed_book, output_file)


def handle_supports(preprocessor: YappPreprocessor, renderer: str) -> int:
    if preprocessor.supports_renderer(renderer):
        return 0

    return GENERIC_ERROR_EXIT_CODE


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    rule_set = load_rule_set(parsed_arguments.config_file_name, verbose_mode_enabled)
    preprocessor = YappPreprocessor(rule_set)

    if parsed_arguments.subcommand == 'supports':
        sys.exit(handle_supports(preprocessor, parsed_arguments.renderer))

    try:
        handle_preprocessing(preprocessor, sys.stdin, sys.stdout)
    except (HostProtocolException, OSError) as error:
        print(f'error: {error}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


if __name__ == '__main__':
    main()
