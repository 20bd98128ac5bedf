"""Directory processing entry points.

process_directory() runs the tree renderer and the content collector over one
root with one set of filter rules; run() additionally hands the result to the
ResultAssembler, which writes the document or returns a dry-run summary.
"""

import logging
from typing import Optional

from lingest.config import Configuration
from lingest.content_collector import ContentCollector
from lingest.file_system_tree.tree_renderer import TreeRenderer
from lingest.path_filter import PathFilter
from lingest.result_assembler import Result, ResultAssembler, WriteOutcome, ensure_output_available

__all__ = ["Result", "process_directory", "run"]


def _resolve_logger(config: Configuration, logger: Optional[logging.Logger]) -> logging.Logger:
    """Pick the logger for a run; quiet runs only pass on warnings and errors."""
    logger = logger if logger is not None else logging.getLogger(__name__)
    if config.quiet:
        logger = logger.getChild("quiet")
        logger.setLevel(logging.WARNING)
    return logger


def process_directory(config: Configuration, logger: Optional[logging.Logger] = None) -> Result:
    """Compute the tree and the file records for a configuration.

    The output-exists check happens before anything is traversed. After that,
    every failure (unreadable directories, undecodable files) is absorbed into the
    result rather than raised.

    Args:
        config: Run configuration.
        logger: Destination for diagnostics. Defaults to this module's logger.
            With ``config.quiet`` only warnings and errors are passed on.

    Returns:
        The rendered tree (None if disabled), the file records and the number of
        records with content.

    Raises:
        OutputExistsError: If a real run would overwrite an existing file without force.
        ValueError: If the root is not a directory.
        InvalidPatternError: If an ignore or include pattern is negated or malformed.

    Example:
        >>> result = process_directory(Configuration("src", dry_run=True))  # doctest: +SKIP
        >>> result.processed_count  # doctest: +SKIP
        12
    """
    return _process(config, _resolve_logger(config, logger))


def _process(config: Configuration, logger: logging.Logger) -> Result:
    ensure_output_available(config)

    root = config.root_path
    if not root.is_dir():
        raise ValueError(f"'{config.root}' is not a valid directory")

    path_filter = PathFilter.from_config(config)

    tree = None
    if config.include_tree:
        logger.info("Generating directory tree structure...")
        tree = TreeRenderer(root, path_filter, logger=logger).render()

    logger.info("Processing file contents...")
    records, processed_count = ContentCollector(root, path_filter, logger=logger).collect(dry_run=config.dry_run)

    return Result(tree=tree, file_records=records, processed_count=processed_count)


def run(config: Configuration, logger: Optional[logging.Logger] = None) -> WriteOutcome:
    """Process a directory and write the document (or summarize it in a dry run).

    Args:
        config: Run configuration.
        logger: Destination for diagnostics. Defaults to this module's logger.
            With ``config.quiet`` only warnings and errors are passed on.

    Returns:
        A DryRunSummary in a dry run, otherwise a WrittenDocument.

    Raises:
        OutputExistsError: If a real run would overwrite an existing file without force.
        OutputWriteError: If the document cannot be written.
        ValueError: If the root is not a directory.
        InvalidPatternError: If an ignore or include pattern is negated or malformed.
    """
    logger = _resolve_logger(config, logger)

    logger.info("Starting lingest in directory: %s", config.root_path)
    logger.info("Output will be saved to: %s", config.output_file)
    if config.include_patterns:
        logger.info("Including files matching: %s", ", ".join(config.include_patterns))

    result = _process(config, logger)
    return ResultAssembler(config, logger=logger).assemble(result)
