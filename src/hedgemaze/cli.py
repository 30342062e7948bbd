from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from . import __version__
from .errors import SettingsError, UnknownLevelName
from .logging_config import configure_logging
from .maze import LevelRegistry, load_catalog_dir, render_lines, try_compile
from .settings import MazeSettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_UNKNOWN_LEVEL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hedgemaze", description="Compile and inspect ASCII maze levels")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")
    parser.add_argument("--levels-dir", type=Path, default=None, help="Directory of extra *.txt levels")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List registered level names")

    show = sub.add_parser("show", help="Print a registered level")
    show.add_argument("name")
    show.add_argument("--json", action="store_true", help="Print the compiled map as JSON")

    check = sub.add_parser("check", help="Compile level files and report errors")
    check.add_argument("files", nargs="+", type=Path)
    return parser


def _log_level(verbosity: int, settings: MazeSettings) -> str:
    if verbosity == 1:
        return "INFO"
    if verbosity >= 2:
        return "DEBUG"
    return settings.log_level


def _build_registry(settings: MazeSettings, levels_dir: Optional[Path]) -> LevelRegistry:
    directory = levels_dir or settings.levels_dir
    extra = load_catalog_dir(directory) if directory is not None else None
    return LevelRegistry.with_builtins(extra)


def _cmd_list(registry: LevelRegistry) -> int:
    for name in registry.list_level_names():
        print(name)
    return EXIT_OK


def _cmd_show(registry: LevelRegistry, name: str, as_json: bool) -> int:
    try:
        compiled = registry.get_by_name(name)
    except UnknownLevelName as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_UNKNOWN_LEVEL
    if as_json:
        print(json.dumps(compiled.to_dict(), indent=2, sort_keys=True))
    else:
        print("\n".join(render_lines(compiled)))
        print(f"pickups: {compiled.pickup_count}  ends: {len(compiled.end_positions)}")
    return EXIT_OK


def _cmd_check(files: List[Path]) -> int:
    failed = 0
    for path in files:
        logger.debug("Checking level file %s", path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            print(f"{path}: cannot read ({exc})")
            failed += 1
            continue
        result = try_compile(text)
        if result.ok:
            print(f"{path}: OK")
        else:
            print(f"{path}: {result.error.code}: {result.error}")
            failed += 1
    return EXIT_FAILED if failed else EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = MazeSettings.from_sources()
    except SettingsError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILED
    configure_logging(level_name=_log_level(args.verbose, settings))

    if args.command == "check":
        return _cmd_check(args.files)

    try:
        registry = _build_registry(settings, args.levels_dir)
    except FileNotFoundError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_FAILED
    if args.command == "list":
        return _cmd_list(registry)
    return _cmd_show(registry, args.name, args.json)


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
