"""
Error types for EEG Band Power

Boundary errors cover the file collaborators around the pipeline. They are
fatal: the CLI reports the failing operation and stops without writing
partial output. The numeric path itself does not raise for a well-formed
series.
"""

from typing import Optional


class BoundaryError(Exception):
    """Failure in a file collaborator (reading input or writing output)"""

    operation = "boundary"

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        message = super().__str__()
        if self.path:
            return f"{self.operation} failed for '{self.path}': {message}"
        return f"{self.operation} failed: {message}"


class InputReadError(BoundaryError):
    """Input table could not be opened, read or interpreted"""
    operation = "read input"


class OutputWriteError(BoundaryError):
    """Output table could not be created or written"""
    operation = "write output"


class ProcessingCancelled(Exception):
    """Raised when a cancellation event is set between windows"""

    def __init__(self, windows_done: int):
        super().__init__(f"Processing cancelled after {windows_done} windows")
        self.windows_done = windows_done
