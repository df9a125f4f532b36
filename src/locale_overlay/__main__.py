"""CLI entry-point for locale_overlay.

The overlay normally runs inside a host at startup; this CLI previews a
run against host tables dumped to JSON, without writing anything.

Usage:
    python -m locale_overlay scan <mod_root> --reference en.json
    python -m locale_overlay scan <mod_root> --reference en.json --target ch=ch.json --json
    python -m locale_overlay scan <mod_root> --reference en.json --dialogue dialogue.json
    python -m locale_overlay parse <file> [--json]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from locale_overlay import __version__
from locale_overlay.api import load_dialogue_elements, load_table
from locale_overlay.contracts.load import validate_instance
from locale_overlay.core.config import OverlayConfig
from locale_overlay.core.host import OverlayHost
from locale_overlay.core.merge import LazyLocaleTable
from locale_overlay.core.runner import run_overlay
from locale_overlay.errors import ParseFailure
from locale_overlay.model import Dialect, MergeStrategy
from locale_overlay.model.source_file import SourceFile
from locale_overlay.parsers import parse_file
from locale_overlay.utils.exit_codes import ExitCode
from locale_overlay.utils.json_norm import stable_json_dumps


def _parse_target_spec(spec: str) -> tuple[str, Path]:
    code, sep, path = spec.partition("=")
    if not sep or not code or not path:
        raise argparse.ArgumentTypeError(f"expected CODE=FILE, got {spec!r}")
    return code, Path(path)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="locale-overlay",
        description="Preview a locale overlay run against JSON-dumped host tables.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    sub = p.add_subparsers(dest="command")

    scan_p = sub.add_parser("scan", help="Run the overlay in memory and report coverage.")
    scan_p.add_argument("mod_root", type=Path, help="Mod install root (contains db/locales/).")
    scan_p.add_argument(
        "--reference",
        required=True,
        type=Path,
        help="Reference locale table as a flat JSON object.",
    )
    scan_p.add_argument(
        "--reference-code",
        default=None,
        help="Reference locale code (default: en).",
    )
    scan_p.add_argument(
        "--locale",
        dest="locales",
        action="append",
        default=None,
        metavar="CODE",
        help="Target locale code; repeatable (default: ch).",
    )
    scan_p.add_argument(
        "--target",
        dest="targets",
        action="append",
        default=[],
        type=_parse_target_spec,
        metavar="CODE=FILE",
        help="Existing target table for CODE; codes without one start empty.",
    )
    scan_p.add_argument(
        "--dialogue",
        type=Path,
        default=None,
        help="Dialogue elements as JSON ({id: {code: {text_id: text}}}).",
    )
    scan_p.add_argument(
        "--strategy",
        choices=[s.value for s in MergeStrategy],
        default=None,
        help="Merge strategy (default: auto).",
    )
    scan_p.add_argument(
        "--json", action="store_true", help="Print the run summary as JSON on stdout."
    )

    parse_p = sub.add_parser("parse", help="Parse a single translation file.")
    parse_p.add_argument("file", type=Path, help="A .json, .json5 or .jsonc file.")
    parse_p.add_argument(
        "--json", action="store_true", help="Print the parsed record as JSON."
    )

    return p


def _handle_scan(args: argparse.Namespace) -> int:
    overrides: dict[str, object] = {}
    if args.locales:
        overrides["target_locales"] = tuple(args.locales)
    if args.reference_code:
        overrides["reference_locale"] = args.reference_code
    if args.strategy:
        overrides["merge_strategy"] = MergeStrategy(args.strategy)
    try:
        cfg = OverlayConfig.from_env(args.mod_root, **overrides)
        locales: dict = {cfg.reference_locale: load_table(args.reference)}
        target_files = dict(args.targets)
        for code in cfg.target_locales:
            path = target_files.get(code)
            table = load_table(path) if path is not None else {}
            if cfg.merge_strategy is MergeStrategy.DEFERRED:
                locales[code] = LazyLocaleTable(lambda table=table: table)
            else:
                locales[code] = table
        dialogue = load_dialogue_elements(args.dialogue) if args.dialogue else None
    except (OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    report = run_overlay(cfg, OverlayHost.from_tables(locales, dialogue))

    if args.json:
        report_dict = report.to_dict()
        validate_instance(report_dict, "overlay_report.schema.json")
        sys.stdout.write(stable_json_dumps(report_dict))

    return ExitCode.SUCCESS if report.ok else ExitCode.VIOLATION


def _handle_parse(args: argparse.Namespace) -> int:
    dialect = Dialect.from_suffix(args.file.suffix)
    if dialect is None:
        print(f"error: unsupported file type: {args.file.suffix or '<none>'}", file=sys.stderr)
        return ExitCode.ERROR

    try:
        record = parse_file(SourceFile(path=args.file, dialect=dialect))
    except ParseFailure as e:
        print(f"FAIL: {e}", file=sys.stderr)
        return ExitCode.VIOLATION

    if args.json:
        sys.stdout.write(stable_json_dumps(record))
    else:
        print(f"OK: {len(record)} key(s) in {args.file} ({dialect.value})")
    return ExitCode.SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Entry-point: returns an ``ExitCode``."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s" if not args.verbose else "%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "scan":
        return _handle_scan(args)
    if args.command == "parse":
        return _handle_parse(args)

    parser.print_help(sys.stderr)
    return ExitCode.ERROR


if __name__ == "__main__":
    raise SystemExit(main())
