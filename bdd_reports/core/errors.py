"""
Custom exceptions for BDD Reports.
"""

from pathlib import Path
from typing import Optional, Union


class BddReportsError(Exception):
    """Base exception for all BDD Reports errors."""
    pass


class RepoRootNotFoundError(BddReportsError):
    """Raised when project root cannot be found."""
    pass


class ConfigurationError(BddReportsError):
    """Raised when configuration is invalid."""
    pass


class PathNotFoundError(BddReportsError):
    """Raised when a required path does not exist."""
    pass


class StepExecutionError(BddReportsError):
    """Raised when a pipeline step fails."""
    pass


class MalformedLogError(BddReportsError):
    """Raised when an execution log is present but not in the expected shape."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = Path(path) if path is not None else None
        if self.path is not None:
            message = f"{message} ({self.path})"
        super().__init__(message)


class ReportWriteError(BddReportsError):
    """Raised when a report document cannot be written."""

    def __init__(self, message: str, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")


class LogReadError(BddReportsError):
    """Raised when an existing execution log cannot be read."""

    def __init__(self, message: str, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"{message}: {self.path}")
