#!/usr/bin/env python3
"""
wordweave: Weave-merge wordlists into one file without duplicate lines

Lines are taken round-robin from every input file (first line of each file,
then second line of each, and so on) and each distinct line is written once.

Common usage:
  wordweave -o merged.txt rockyou.txt names.txt
  wordweave -o merged.txt 'lists/*.txt' 'extra/file?.txt'
  wordweave --list-files 'lists/*.txt'

Wildcards `*` and `?` are supported in the last path component only.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import sys
from dataclasses import dataclass
from pathlib import Path

from wordweave.config import apply_config, find_config_file, load_config
from wordweave.errors import WordweaveError
from wordweave.expander import ExpanderConfig, expand_patterns
from wordweave.merge_api import DEFAULT_MAX_OPEN_WARNING, merge_files
from wordweave.merger import DEFAULT_FINGERPRINT, FingerprintScheme
from wordweave.merger.weave import DEFAULT_PROGRESS_INTERVAL
from wordweave.reporting import StderrReporter


@dataclass
class Options:
    """Command-line options for the wordweave tool."""

    patterns: list[str]
    output: str
    fingerprint: str
    progress_interval: int
    max_open_warning: int
    quiet: bool
    sort_matches: bool
    exclude: list[str]
    list_files: bool
    version: bool


# argparse dest name -> Options field name, for flags a config file may also set
_CONFIGURABLE_FLAGS: dict[str, str] = {
    "output": "output",
    "fingerprint": "fingerprint",
    "progress_interval": "progress_interval",
    "max_open_warning": "max_open_warning",
    "quiet": "quiet",
    "sort_matches": "sort_matches",
    "exclude": "exclude",
}


def _build_parser() -> argparse.ArgumentParser:
    # Use the module's docstring as the description
    module_doc = __doc__ or ""
    doc_parts = module_doc.split("\n\n")
    description = doc_parts[0]
    epilog = "\n\n".join(doc_parts[1:])

    parser = argparse.ArgumentParser(
        prog="wordweave",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "patterns",
        nargs="*",
        type=str,
        default=[],
        metavar="PATTERN",
        help="Input files or wildcard patterns (e.g. 'lists/*.txt', 'file?.txt')",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default="merged.txt",
        help="Output file (use '-' for stdout, default: %(default)s)",
    )
    parser.add_argument(
        "--fingerprint",
        type=str,
        choices=[s.value for s in FingerprintScheme],
        default=DEFAULT_FINGERPRINT.value,
        help="How lines are remembered for deduplication: a 128-bit or 64-bit hash, or "
        "the exact line (no collision risk, more memory) (default: %(default)s)",
    )
    parser.add_argument(
        "--sort-matches",
        action="store_true",
        dest="sort_matches",
        help="Sort the files matched by each wildcard pattern by name instead of "
        "using directory order",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Skip wildcard matches whose name matches this gitignore-style pattern. "
        "Can be repeated",
    )
    parser.add_argument(
        "--progress-interval",
        type=int,
        default=DEFAULT_PROGRESS_INTERVAL,
        dest="progress_interval",
        metavar="ROUNDS",
        help="Report progress every this many rounds (0 = never, default: %(default)s)",
    )
    parser.add_argument(
        "--max-open-warning",
        type=int,
        default=DEFAULT_MAX_OPEN_WARNING,
        dest="max_open_warning",
        metavar="N",
        help="Warn when more than this many files will be open at once "
        "(0 = never, default: %(default)s)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only print warnings and errors"
    )
    parser.add_argument(
        "--list-files",
        action="store_true",
        dest="list_files",
        help="Print the resolved input files in merge order without merging",
    )
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show version information and exit",
    )
    return parser


def _explicit_flags(args: list[str] | None) -> set[str]:
    """
    Find which configurable flags were actually given on the command line, by
    re-parsing with defaults suppressed. Comparing against default values would
    miss a flag passed with its default value.
    """
    sentinel_parser = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
    sentinel_parser.add_argument("-o", "--output")
    sentinel_parser.add_argument("--fingerprint")
    sentinel_parser.add_argument("--sort-matches", dest="sort_matches", action="store_true")
    sentinel_parser.add_argument("--exclude", action="append")
    sentinel_parser.add_argument("--progress-interval", dest="progress_interval")
    sentinel_parser.add_argument("--max-open-warning", dest="max_open_warning")
    sentinel_parser.add_argument("-q", "--quiet", action="store_true")
    sentinel_opts, _ = sentinel_parser.parse_known_args(args if args is not None else sys.argv[1:])

    supplied = vars(sentinel_opts)
    return {field for dest, field in _CONFIGURABLE_FLAGS.items() if dest in supplied}


def _parse_args(args: list[str] | None = None) -> tuple[Options, set[str]]:
    """
    Parse command-line arguments.

    Returns `(options, explicit_flags)`, where `explicit_flags` names the
    options the user set on the command line (these win over a config file).
    """
    opts = _build_parser().parse_args(args)
    return (
        Options(
            patterns=opts.patterns,
            output=opts.output,
            fingerprint=opts.fingerprint,
            progress_interval=opts.progress_interval,
            max_open_warning=opts.max_open_warning,
            quiet=opts.quiet,
            sort_matches=opts.sort_matches,
            exclude=opts.exclude,
            list_files=opts.list_files,
            version=opts.version,
        ),
        _explicit_flags(args),
    )


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for the wordweave CLI.

    Args:
        args: Command-line arguments (uses sys.argv if None)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    options, explicit_flags = _parse_args(args)

    if options.version:
        try:
            version = importlib.metadata.version("wordweave")
            print(f"v{version}")
        except importlib.metadata.PackageNotFoundError:
            print("unknown (package not installed)")
        return 0

    if not options.patterns:
        print(
            "Error: No input files specified. Provide files or wildcard patterns"
            " (e.g. '*.txt'). Use --help for more options.",
            file=sys.stderr,
        )
        return 1

    config_path = find_config_file(Path.cwd())
    if config_path:
        try:
            apply_config(options, load_config(config_path), explicit_flags)
        except (ValueError, OSError) as e:
            print(f"Error: Invalid config file {config_path}: {e}", file=sys.stderr)
            return 1

    fingerprint = FingerprintScheme(options.fingerprint)
    reporter = StderrReporter(quiet=options.quiet)
    expander_config = ExpanderConfig(exclude=options.exclude, sort_matches=options.sort_matches)

    try:
        if options.list_files:
            for path in expand_patterns(options.patterns, expander_config, reporter):
                print(path)
            return 0

        stats = merge_files(
            options.patterns,
            options.output,
            config=expander_config,
            fingerprint=fingerprint,
            reporter=reporter,
            progress_interval=options.progress_interval,
            max_open_warning=options.max_open_warning,
        )
    except WordweaveError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    reporter.info(
        f"Merge complete: {stats.lines_written} unique lines written "
        f"({stats.duplicates_dropped} duplicates dropped)"
    )
    reporter.info(f"Memory usage: ~{stats.seen_set_bytes // 1024 // 1024} MB")
    return 0


if __name__ == "__main__":
    sys.exit(main())
