"""Command-line interface for lingest.

This module provides the command-line entry point. It parses arguments, sets up
logging, runs the directory processing and maps failures to exit codes.

Logging:
    Informational messages, warnings and errors go to stderr through the
    ``lingest`` logger. ``--quiet`` raises the level to WARNING, so warnings about
    unreadable files and directories and all errors are still shown. The dry-run
    summary is the command's output and goes to stdout.

Exit Codes:
    0: Successful completion
    1: Runtime or configuration error (including an existing output file)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Process the current directory
    $ lingest

    # Preview a run over another directory
    $ lingest /path/to/project --dry-run

    # Display version information
    $ lingest --version
"""

import logging
import sys

from lingest.cli.argparser import build_configuration, create_parser, validate_args
from lingest.lingest import run
from lingest.result_assembler import DryRunSummary

logger = logging.getLogger("lingest")


def configure_logging(quiet: bool) -> None:
    """Send the package's log records to stderr.

    Args:
        quiet: Only report warnings and errors.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.WARNING if quiet else logging.INFO)


def main() -> None:
    """Main entry point for the lingest command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime or configuration error
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
    """
    parser = create_parser()
    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    args = parser.parse_args()

    configure_logging(args.quiet)

    try:
        validate_args(args)
        config = build_configuration(args)

        outcome = run(config, logger=logger)

        if isinstance(outcome, DryRunSummary):
            print(outcome.format())

    except KeyboardInterrupt:
        logger.error("Interrupted.")
        sys.exit(130)
    except Exception as e:
        logger.error("Error: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
