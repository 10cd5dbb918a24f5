import argparse
import sys
from typing import List, Optional

from loguru import logger

from .environment import ConfigSource
from .errors import ConfigError
from .logging_utils import setup_logging
from .plugin import Application, ConfigPlugin
from .printer import format_config, format_paths


def _build_options(args) -> dict:
    options = {}
    if args.file:
        options["file"] = args.file
    if args.ext:
        options["ext"] = args.ext
    return options


def _build_app(args) -> Application:
    overrides = {}
    if args.home:
        overrides["home"] = args.home
    if args.mode:
        overrides["mode"] = args.mode
    return Application.from_environ(**overrides)


def show_paths(args) -> int:
    plugin = ConfigPlugin(ConfigSource.from_environ())
    paths = plugin.resolve(_build_app(args), _build_options(args))
    print(format_paths(paths))
    return 0


def show_config(args) -> int:
    plugin = ConfigPlugin(ConfigSource.from_environ())
    config = plugin.register(_build_app(args), _build_options(args))
    print(format_config(config, args.format))
    return 0


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('--home', help='Application home directory (default: $APPCONFIG_HOME or cwd)')
    parser.add_argument('--mode', help='Application mode (default: $APPCONFIG_MODE or development)')
    parser.add_argument('--file', help='Config file, overrides discovery')
    parser.add_argument('--ext', help='Extension for derived config file names (default: conf)')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Inspect layered application config')
    sub = parser.add_subparsers(dest='cmd')

    paths = sub.add_parser('paths', help='Show resolved config file paths')
    _add_common_arguments(paths)

    show = sub.add_parser('show', help='Show the merged config')
    _add_common_arguments(show)
    show.add_argument('--format', choices=['yaml', 'json'], default='yaml',
                      help='Output format (default: yaml)')

    args = parser.parse_args(argv)
    if args.cmd is None:
        parser.print_help()
        return 0

    setup_logging('DEBUG' if args.debug else 'WARNING')
    try:
        if args.cmd == 'paths':
            return show_paths(args)
        return show_config(args)
    except ConfigError as exc:
        logger.error(str(exc))
        return 1


if __name__ == '__main__':
    sys.exit(main())
