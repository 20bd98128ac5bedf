"""Directory to single-document ingestion utilities.

This package turns a directory tree into one flat text document: an optional
tree of the directory structure followed by the contents of every text file
that survives the ignore and include rules. The document is meant to be handed
to Large Language Models (LLMs) and other text consumers in one piece.
"""

from importlib.metadata import PackageNotFoundError, version

from lingest.config import Configuration
from lingest.lingest import Result, process_directory, run

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("lingest")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["Configuration", "Result", "process_directory", "run", "__version__"]
