"""Command-line argument parsing for lingest.

This module defines the command-line interface for lingest,
handling argument parsing, validation and conversion into a Configuration.
"""

import argparse
import os
from pathlib import Path

from lingest import __version__
from lingest.config import DEFAULT_OUTPUT_FILENAME, Configuration, split_patterns
from lingest.exclusion_rules.glob_rules import GlobExclusionRules


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Returns:
        An ArgumentParser instance configured with lingest's options.
    """
    description = """
    lingest: Ingest a whole directory into a single text document for LLMs.

    The document starts with a tree of the directory structure, followed by the
    contents of every text file that is not ignored. Files that cannot be read
    as UTF-8 text are listed with a note instead of their content.

    A baseline of ignore patterns (dependency folders, build output, version
    control metadata, lock files, binaries, media, archives, ...) is always
    applied. The output file itself is never included.
    """

    epilog = f"""
    Examples:
      # Process the current directory into {DEFAULT_OUTPUT_FILENAME}
      lingest

      # Process another directory into a custom file, replacing it if it exists
      lingest /path/to/project -o project.md -f

      # Ignore additional patterns
      lingest -i "*.test.js,fixtures/**" -i "**/snapshots"

      # Read additional ignore patterns from a file
      lingest -e .lingestignore

      # Only include Python and Markdown files
      lingest -n "*.py,*.md"

      # Preview what would be included without writing anything
      lingest --dry-run

      # Skip the directory tree section
      lingest -T
    """

    parser = argparse.ArgumentParser(
        prog="lingest",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"lingest {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "directory",
        nargs="?",
        type=Path,
        default=Path("."),
        help="The directory to process (default: current directory). Paths in the output are relative to it.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        default=Path(DEFAULT_OUTPUT_FILENAME),
        help=f"Output file path (default: {DEFAULT_OUTPUT_FILENAME}).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        metavar="PATTERNS",
        action="append",
        default=[],
        help=(
            "Comma-separated glob patterns to ignore (files or directories). Can be specified multiple times. "
            "Ignore patterns always win over include patterns."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action="append",
        default=[],
        help="File with one ignore pattern per line ('#' starts a comment). Can be specified multiple times.",
    )
    parser.add_argument(
        "-n",
        "--include",
        metavar="PATTERNS",
        action="append",
        default=[],
        help=(
            "Comma-separated glob patterns to include. If given, only matching files are processed "
            "(ignore patterns still apply). Can be specified multiple times."
        ),
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite the output file if it already exists.",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress informational messages; warnings and errors are still shown.",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without reading file contents or writing the output file.",
    )
    parser.add_argument(
        "-T",
        "--no-tree",
        action="store_true",
        help="Do not include the directory tree structure in the output.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if not args.directory.is_dir():
        raise ValueError(f"'{args.directory}' is not a valid directory")

    if args.output.is_dir():
        raise ValueError(f"Output path '{args.output}' is a directory")

    parent = Path(os.path.abspath(args.output)).parent
    if not parent.is_dir():
        raise ValueError(f"Output directory '{parent}' does not exist")


def build_configuration(args: argparse.Namespace) -> Configuration:
    """Convert parsed arguments into a run configuration.

    Patterns from -e/--exclude files are merged with the -i/--ignore patterns.

    Args:
        args: Parsed and validated command-line arguments.

    Returns:
        The Configuration for this run.

    Raises:
        FileNotFoundError: If an exclusion file does not exist.
        InvalidPatternError: If an exclusion file contains a negated or malformed pattern.
    """
    file_rules = GlobExclusionRules()
    if args.exclude:
        file_rules.load_rules(args.exclude)

    return Configuration(
        root=args.directory,
        output_path=args.output,
        ignore_patterns=split_patterns(args.ignore) + tuple(file_rules.patterns),
        include_patterns=split_patterns(args.include),
        include_tree=not args.no_tree,
        dry_run=args.dry_run,
        force=args.force,
        quiet=args.quiet,
    )
