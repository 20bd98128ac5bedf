"""All-or-nothing output file writing.

This module provides a writing interface that never leaves a partially written
destination behind: data goes to a temporary file next to the destination, which
replaces the destination only once everything was written and closed.
"""

import os
import tempfile
import types
from pathlib import Path
from typing import Optional, Type

from lingest.types import PathType


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


class AtomicWriter:
    """Atomic writing interface for a single output file.

    Used as a context manager, the destination is replaced when the ``with``
    block completes normally. If the block raises, or any write or close fails,
    the temporary file is removed and the destination keeps its previous state.

    Attributes:
        path: Destination file.
        temp_path: Temporary file receiving the data.

    Example:
        >>> import tempfile, os
        >>> target = os.path.join(tempfile.mkdtemp(), "out.md")
        >>> with AtomicWriter(target) as writer:
        ...     writer.write("hello")
        >>> open(target).read()
        'hello'
    """

    def __init__(self, path: PathType):
        """Open a temporary file in the destination's directory.

        Args:
            path: Destination file path.

        Raises:
            OSError: If the temporary file cannot be created.
        """
        self.path = Path(path)
        self._closed = False

        fd, temp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        self.temp_path = Path(temp_name)
        self._file_obj = os.fdopen(fd, "w", encoding="utf-8", newline="")
        # mkstemp creates the file as 0600; give the document the usual umask-based mode
        os.chmod(self.temp_path, 0o666 & ~_current_umask())

    def write(self, data: str) -> None:
        """Write data to the temporary file.

        Raises:
            ValueError: If the writer was already committed or discarded.
            OSError: If an I/O error occurs during writing.
        """
        if self._closed:
            raise ValueError("Cannot write to closed AtomicWriter")
        self._file_obj.write(data)

    def commit(self) -> None:
        """Flush the data and move the temporary file over the destination."""
        if self._closed:
            return
        try:
            self._file_obj.flush()
            os.fsync(self._file_obj.fileno())
            self._file_obj.close()
            os.replace(self.temp_path, self.path)
        except OSError:
            self.discard()
            raise
        self._closed = True

    def discard(self) -> None:
        """Drop the temporary file, leaving the destination untouched."""
        if self._closed:
            return
        self._closed = True
        try:
            self._file_obj.close()
        finally:
            self.temp_path.unlink(missing_ok=True)

    def __enter__(self) -> "AtomicWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Commit on success, discard if the with block raised."""
        if exc_type is None:
            self.commit()
        else:
            self.discard()
