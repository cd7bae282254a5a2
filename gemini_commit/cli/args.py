"""CLI Argument Parsing"""

import argparse
import argcomplete

from gemini_commit import __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gcm',
        description='Generate Git commit messages with the Gemini API',
        epilog='Example: gcm "add retry to the upload worker" -s "conventional commit"'
    )

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('description', nargs='?', metavar='DESCRIPTION', help='What changed, in plain words')

    # Generation options
    parser.add_argument('-s', '--style', type=str, metavar='STYLE', help='Commit message style (default: conventional commit)')
    parser.add_argument('-m', '--model', type=str, metavar='MODEL', help='Gemini model name')
    parser.add_argument('--timeout', type=float, metavar='SECONDS', help='Request timeout in seconds')

    # Output options
    parser.add_argument('--verbose', action='store_true', help='Show debug info (model, prompt size, timing)')

    # Setup/config
    parser.add_argument('--setup', action='store_true', help='Configure defaults')
    parser.add_argument('--display-config', action='store_true', help='Show current configuration')

    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = build_parser()
    argcomplete.autocomplete(parser)
    args = parser.parse_args(argv)

    if not (args.setup or args.display_config) and not args.description:
        parser.error("a change DESCRIPTION is required")
    if args.timeout is not None and args.timeout <= 0:
        parser.error("--timeout must be positive")

    return args
