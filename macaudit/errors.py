from __future__ import annotations


class AuditError(Exception):
    """Base class for all audit failures."""


class InvalidArgument(AuditError):
    """Unrecognized command-line input. Fatal."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Unknown option: {argument}")
        self.argument = argument


class DataUnavailable(AuditError):
    """A single host query could not be answered. Never fatal."""


class OutputSinkFailure(AuditError):
    """The report directory or file could not be written. Fatal."""
