class OutputExistsError(Exception):
    """
    Exception raised when the output document already exists and overwriting was not requested.

    This is a pre-flight condition: it is raised before any traversal takes place, so a
    run that fails with it leaves the filesystem untouched.

    Attributes:
        path (str): Path of the existing output file.

    Example:
        >>> error = OutputExistsError("/tmp/out.md")
        >>> str(error)
        'Output file /tmp/out.md already exists. Use -f or --force to overwrite.'
    """

    def __init__(self, path: str) -> None:
        """
        Initialize the exception with the path of the existing output file.

        Args:
            path (str): Path of the existing output file.
        """
        self.path = path
        super().__init__(f"Output file {path} already exists. Use -f or --force to overwrite.")


class OutputWriteError(Exception):
    """
    Exception raised when the output document cannot be written.

    The document is written atomically, so when this exception is raised the
    destination either still holds its previous content or does not exist.

    Attributes:
        path (str): Destination that could not be written.
        reason (str): Description of the underlying failure.

    Example:
        >>> error = OutputWriteError("/tmp/out.md", "Permission denied")
        >>> str(error)
        'Failed to write output file /tmp/out.md: Permission denied'
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write output file {path}: {reason}")


class InvalidPatternError(ValueError):
    """
    Exception raised when an ignore or include pattern cannot be used.

    Patterns combine as a plain logical OR, so negated patterns (``!pattern``)
    have no meaning and are rejected.

    Example:
        >>> error = InvalidPatternError("!keep.txt")
        >>> str(error)
        'Negated patterns are not supported: !keep.txt'
    """

    def __init__(self, pattern: str, message: str = "Negated patterns are not supported") -> None:
        self.pattern = pattern
        super().__init__(f"{message}: {pattern}")
