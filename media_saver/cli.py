"""
Command-line interface for the media saver
"""
import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import Config
from .core import (
    DurationParseError,
    parse_duration,
    format_duration,
    add_durations,
    subtract_durations,
)
from .services.copier import copy_all_supported
from .services.errors import ConfigError
from .services.probe import inspect_directory, total_duration

logger = logging.getLogger(__name__)

COMMANDS = ('copy', 'inspect')


def _setup_logging(level_name) -> None:
    """Configure root logging once; unknown level names fall back to WARNING."""
    level = getattr(logging, str(level_name).upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')


def _load_config(config_path: Optional[str]) -> Config:
    """Load the YAML configuration, looking for config.yml/config.yaml in the cwd by default."""
    default_config_path = None
    if not config_path:
        cwd = os.getcwd()
        for candidate in (os.path.join(cwd, 'config.yml'), os.path.join(cwd, 'config.yaml')):
            if os.path.exists(candidate):
                default_config_path = candidate
                break
    return Config(config_file=config_path or default_config_path)


def _prompt(message: str) -> str:
    return input(message).strip()


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument('--config', type=str, help='Path to the YAML configuration file')
    common.add_argument('--log-level', type=str, choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default: WARNING)')
    common.add_argument('--follow-symlinks', dest='follow_symlinks', action='store_true', default=None,
                        help='Descend into symlinked directories (loops are skipped)')

    parser = argparse.ArgumentParser(
        prog='media-saver',
        description='Copy supported audio, video and image files into one flat directory',
    )
    sub = parser.add_subparsers(dest='command')

    copy_parser = sub.add_parser('copy', parents=[common], help='Copy supported files (default)')
    copy_parser.add_argument('--source', type=str, help='Source directory (prompted if missing)')
    copy_parser.add_argument('--destination', type=str, help='Destination directory (prompted if missing)')

    inspect_parser = sub.add_parser('inspect', parents=[common], help='List durations and sizes of media files')
    inspect_parser.add_argument('directory', nargs='?', help='Directory to inspect (prompted if missing)')

    return parser


def run_copy(config: Config) -> int:
    """Prompt for missing directories, validate them and copy supported files.

    Returns 1 when the source directory is invalid or the destination cannot
    be created; 0 otherwise, even if some files failed to copy.
    """
    try:
        source_dir = config.get('source_dir') or _prompt("Enter source directory: ")
        destination_dir = config.get('destination_dir') or _prompt("Enter destination directory: ")
    except (EOFError, KeyboardInterrupt):
        print("\nOperation cancelled.", file=sys.stderr)
        return 1

    if not os.path.isdir(source_dir):
        print("Invalid source directory.", file=sys.stderr)
        return 1

    try:
        os.makedirs(destination_dir, exist_ok=True)
    except OSError as e:
        print(f"Cannot create destination directory: {e}", file=sys.stderr)
        return 1

    summary = copy_all_supported(
        source_dir,
        destination_dir,
        follow_symlinks=bool(config.get('follow_symlinks')),
    )
    if summary.failed:
        logger.warning("%d file(s) could not be copied", summary.failed)
    return 0


def run_inspect(config: Config, directory: Optional[str]) -> int:
    """Print duration (or picture size) of each media file plus the total duration."""
    try:
        directory = directory or config.get('source_dir') or _prompt("Enter directory to inspect: ")
    except (EOFError, KeyboardInterrupt):
        print("\nOperation cancelled.", file=sys.stderr)
        return 1

    if not os.path.isdir(directory):
        print("Invalid source directory.", file=sys.stderr)
        return 1

    show_errors = (config.get('inspect') or {}).get('show_errors', True)
    infos = inspect_directory(directory, follow_symlinks=bool(config.get('follow_symlinks')))
    for info in infos:
        name = os.path.relpath(info.path, directory)
        if info.error:
            if show_errors:
                print(f"{info.category:<6} {'ERROR':>10}  {name}: {info.error}")
            continue
        if info.duration_seconds is not None:
            detail = format_duration(info.duration_seconds)
        elif info.width is not None:
            detail = f"{info.width}x{info.height}"
        else:
            detail = '-'
        print(f"{info.category:<6} {detail:>10}  {name}")

    print(f"Files: {len(infos)}")
    print(f"Total: {format_duration(total_duration(infos))}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ``media-saver``; ``copy`` is used when no command is given."""
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or (argv[0] not in COMMANDS and argv[0] not in ('-h', '--help')):
        argv.insert(0, 'copy')

    args = build_parser().parse_args(argv)

    try:
        config = _load_config(args.config)
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        return 1

    # CLI arguments take precedence over the file
    config.update_from_args({
        'source_dir': getattr(args, 'source', None),
        'destination_dir': getattr(args, 'destination', None),
        'follow_symlinks': args.follow_symlinks,
        'log_level': args.log_level,
    })
    _setup_logging(config.get('log_level'))

    if args.command == 'inspect':
        return run_inspect(config, args.directory)
    return run_copy(config)


def durations_main(argv: Optional[List[str]] = None) -> int:
    """Entry point for ``media-durations``: print two durations, their sum and difference."""
    parser = argparse.ArgumentParser(
        prog='media-durations',
        description='Add and subtract HH:MM:SS durations',
    )
    parser.add_argument('first', nargs='?', default='01:30:45', help='First duration (default: 01:30:45)')
    parser.add_argument('second', nargs='?', default='00:45:30', help='Second duration (default: 00:45:30)')
    args = parser.parse_args(argv)

    try:
        first = parse_duration(args.first)
        second = parse_duration(args.second)
    except DurationParseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(f"Duration 1: {format_duration(first)}")
    print(f"Duration 2: {format_duration(second)}")
    print(f"Sum: {format_duration(add_durations(first, second))}")
    print(f"Difference: {format_duration(subtract_durations(first, second))}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
