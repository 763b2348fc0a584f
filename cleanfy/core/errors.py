"""Module: errors.py

Author: Michael Economou
Date: 2026-09-15

Exceptions raised by the naming pipeline and the rename executor.
Every error is scoped to the single name being processed.
"""


class CleanfyError(Exception):
    """Base class for all cleanfy errors."""


class MetadataReadError(CleanfyError):
    """Raised when file metadata (modification time) cannot be read."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"cannot read metadata: {reason}")


class EmptyResultError(CleanfyError):
    """Raised when the pipeline produced a zero-length name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("empty result name")


class DestinationExistsError(CleanfyError):
    """Raised when the target exists and auto-resolution is disabled."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__("destination exists")


class ConfigError(CleanfyError, ValueError):
    """Raised for invalid transform configuration values."""
