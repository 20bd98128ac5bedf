"""Assembly of the final document from the tree and the file records.

This module defines the run Result, the fixed layout of the generated document,
the dry-run summary, and the guarded, atomic write of the document.
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from lingest.config import Configuration
from lingest.content_collector import FileRecord
from lingest.exceptions import OutputExistsError, OutputWriteError
from lingest.io.atomic_writer import AtomicWriter

RULE = "=" * 48
NO_CONTENT_PLACEHOLDER = "# No content generated."


@dataclass(frozen=True)
class Result:
    """Outcome of processing a directory.

    Attributes:
        tree: The rendered directory tree, or None if tree rendering was disabled.
        file_records: One record per admitted file, in traversal order.
        processed_count: Number of records whose content was included.
    """

    tree: Optional[str]
    file_records: Tuple[FileRecord, ...]
    processed_count: int

    @property
    def error_records(self) -> Tuple[FileRecord, ...]:
        """Records whose content could not be included."""
        return tuple(record for record in self.file_records if not record.is_processed)


@dataclass(frozen=True)
class DryRunSummary:
    """What a real run would have produced.

    Attributes:
        tree: Tree that would be written, or None if tree rendering was disabled.
        paths: Relative paths of the files whose content would be included.
        processed_count: Number of files that would be processed.
        destination: Absolute path the document would be written to.
    """

    tree: Optional[str]
    paths: Tuple[str, ...]
    processed_count: int
    destination: str

    def format(self) -> str:
        """Render the summary as human-readable text.

        Example:
            >>> summary = DryRunSummary("└── a.txt", ("a.txt",), 1, "/work/out.md")
            >>> print(summary.format())
            [Dry Run] --- Summary ---
            [Dry Run] Directory Structure Preview:
            ================================================
            └── a.txt
            ================================================
            <BLANKLINE>
            [Dry Run] Would include content from 1 file(s):
            FILE: a.txt
            [Dry Run] Output would be saved to: /work/out.md
        """
        lines = ["[Dry Run] --- Summary ---"]
        if self.tree:
            lines.extend(["[Dry Run] Directory Structure Preview:", RULE, self.tree, RULE])
        elif self.tree is not None:
            lines.append("[Dry Run] No directory structure to include based on rules.")

        if self.processed_count > 0:
            lines.extend(["", f"[Dry Run] Would include content from {self.processed_count} file(s):"])
            lines.extend(f"FILE: {path}" for path in self.paths)
        else:
            lines.append("[Dry Run] No files would be processed for content based on rules.")

        lines.append(f"[Dry Run] Output would be saved to: {self.destination}")
        return "\n".join(lines)


@dataclass(frozen=True)
class WrittenDocument:
    """A document that was written to disk.

    Attributes:
        path: Absolute path of the written document.
        processed_count: Number of files whose content was included.
        error_count: Number of files listed with a "content not included" note.
        included_tree: Whether the document contains the directory structure.
    """

    path: str
    processed_count: int
    error_count: int
    included_tree: bool


WriteOutcome = Union[DryRunSummary, WrittenDocument]


def ensure_output_available(config: Configuration) -> None:
    """Refuse to run when a real run would overwrite an existing document.

    Args:
        config: Run configuration.

    Raises:
        OutputExistsError: If the output exists and neither dry_run nor force is set.
    """
    if not config.dry_run and not config.force and os.path.exists(config.output_file):
        raise OutputExistsError(str(config.output_file))


def format_record(record: FileRecord) -> str:
    """Format one file record as a headed block.

    Example:
        >>> print(format_record(FileRecord("a.txt", content="hello")))
        ================================================
        FILE: a.txt
        ================================================
        hello
    """
    header = f"{RULE}\nFILE: {record.relative_path}\n{RULE}"
    if record.content is not None:
        return f"{header}\n{record.content}"
    return f"{header}\n[Content not included: {record.error_reason}]"


def build_document(tree: Optional[str], records: Iterable[FileRecord]) -> str:
    """Lay out the complete document.

    The directory structure section is present when a non-empty tree is given,
    the file contents section when there is at least one record. Surrounding
    whitespace is trimmed; a document with neither section is replaced by a
    short placeholder so the output file is never empty.

    Args:
        tree: Rendered tree, or None/empty to omit the section.
        records: File records in traversal order.

    Returns:
        The document text.

    Example:
        >>> print(build_document("└── a.txt", [FileRecord("a.txt", content="hello")]))
        Directory Structure:
        ================================================
        └── a.txt
        ================================================
        <BLANKLINE>
        File Contents:
        ================================================
        ================================================
        FILE: a.txt
        ================================================
        hello
        ================================================
        >>> build_document(None, [])
        '# No content generated.'
    """
    parts = []
    if tree and tree.strip():
        parts.append(f"Directory Structure:\n{RULE}\n{tree.strip()}\n{RULE}")

    blocks = [format_record(record) for record in records]
    if blocks:
        separator = "\n\n" if parts else ""
        parts.append(f"{separator}File Contents:\n{RULE}\n" + "\n\n".join(blocks) + f"\n{RULE}")

    return "".join(parts).strip() or NO_CONTENT_PLACEHOLDER


class ResultAssembler:
    """Turns a Result into a dry-run summary or a written document.

    Attributes:
        config (Configuration): The run configuration.
    """

    def __init__(self, config: Configuration, logger: Optional[logging.Logger] = None):
        self.config = config
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    def assemble(self, result: Result) -> WriteOutcome:
        """Produce the outcome of a run.

        In a dry run nothing is written and a DryRunSummary is returned. Otherwise
        the document is written atomically to the configured output path.

        Args:
            result: Tree and file records produced by process_directory().

        Returns:
            A DryRunSummary or a WrittenDocument.

        Raises:
            OutputWriteError: If the document cannot be written. The destination
                is left as it was.
        """
        destination = str(self.config.output_file)

        if self.config.dry_run:
            return DryRunSummary(
                tree=result.tree,
                paths=tuple(record.relative_path for record in result.file_records),
                processed_count=result.processed_count,
                destination=destination,
            )

        self.write(build_document(result.tree, result.file_records))

        outcome = WrittenDocument(
            path=destination,
            processed_count=result.processed_count,
            error_count=len(result.error_records),
            included_tree=bool(result.tree),
        )
        self.logger.info("Generated %s with %d file(s).", os.path.relpath(destination), outcome.processed_count)
        if outcome.error_count:
            self.logger.warning(
                "%d file(s) could not be read as text and were listed without content.", outcome.error_count
            )
        return outcome

    def write(self, document: str) -> None:
        """Write the document in one atomic replacement of the output file.

        Raises:
            OutputWriteError: If writing fails or the document cannot be encoded.
        """
        path = self.config.output_file
        try:
            with AtomicWriter(path) as writer:
                writer.write(document)
        except OSError as e:
            raise OutputWriteError(str(path), e.strerror or str(e)) from e
        except UnicodeError as e:
            raise OutputWriteError(str(path), f"Cannot encode document as UTF-8 ({e})") from e

