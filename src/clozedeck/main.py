"""CLI entrypoint converting flashcard sources into import files."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import replace

from . import __version__
from .errors import EntriesParseError, EntriesReadError
from .export import ExportSummary, write_entries
from .models import Entries
from .profiles import BUILTIN_PROFILES, DEFAULT_PROFILE, ExportProfile, get_profile, load_profile
from .scanner import parse_entries

LOGGER = logging.getLogger(__name__)

PrintFn = Callable[[str], None]
DEFAULT_PREFIX = "JLPT-N2-JY-2200"
NOTE_INDENT = " " * len("  0000: ")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="clozedeck", description="Convert fixed-layout flashcards for import")
    parser.add_argument("input", help="fixed-layout flashcard source")
    parser.add_argument("output", help="delimited file to create")
    parser.add_argument("-p", "--prefix", default=DEFAULT_PREFIX, help="prefix for card IDs and media files")
    layout = parser.add_mutually_exclusive_group()
    layout.add_argument(
        "--format",
        dest="format_name",
        choices=sorted(BUILTIN_PROFILES),
        default=DEFAULT_PROFILE.name,
        help="built-in export profile",
    )
    layout.add_argument("--profile", dest="profile_path", help="JSON export profile file")
    parser.add_argument("--no-tag-check", action="store_true", help="skip tag balance checks on prompts")
    parser.add_argument("-v", "--verbose", action="store_true", help="log parsing progress")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _resolve_profile(args: argparse.Namespace) -> ExportProfile:
    """Pick the export profile from CLI options."""
    if args.profile_path:
        profile = load_profile(args.profile_path)
    else:
        profile = get_profile(args.format_name)
    if args.no_tag_check:
        profile = replace(profile, check_tags=False)
    return profile


def run(argv: list[str] | None = None, print_fn: PrintFn = print) -> int:
    """Run the converter and return a process exit code."""
    args = _parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        profile = _resolve_profile(args)
    except (OSError, ValueError) as exc:
        print_fn(f"failed to load export profile: {args.profile_path}: {exc}")
        return 1
    LOGGER.info("using export profile %s (tag checks %s)", profile.name, "on" if profile.check_tags else "off")

    try:
        source = open(args.input, encoding="utf-8", newline="\n")
    except OSError as exc:
        print_fn(f"failed to open input file: {args.input}: {exc}")
        return 1
    with source:
        try:
            entries = parse_entries(source, check_tags=profile.check_tags)
        except (EntriesParseError, EntriesReadError) as exc:
            print_fn(f"failed to process input file: {exc}")
            return 1

    try:
        target = open(args.output, "w", encoding="utf-8", newline="")
    except OSError as exc:
        print_fn(f"failed to open output file: {args.output}: {exc}")
        return 1
    with target:
        try:
            summary = write_entries(entries, target, profile, args.prefix)
        except OSError as exc:
            print_fn(f"failed to write output file: {exc}")
            return 1

    _print_summary(entries, summary, print_fn)
    return 0


def _print_summary(entries: Entries, summary: ExportSummary, print_fn: PrintFn) -> None:
    """Print dirty entries with their notes, then the generated count."""
    if summary.dirty:
        print_fn(f"found {summary.dirty} dirty entries.")
        for entry in entries.dirty():
            print_fn("")
            if not entry.notes:
                print_fn(f"  {entry.id:04d}: marked.")
                continue
            first, *rest = entry.notes
            print_fn(f"  {entry.id:04d}: {first}")
            for note in rest:
                print_fn(f"{NOTE_INDENT}{note}")
        print_fn("")
    print_fn(f"generated {summary.written} entries.")


def main_entry() -> None:
    """Console script entrypoint."""
    raise SystemExit(run())


if __name__ == "__main__":  # pragma: no cover
    main_entry()
