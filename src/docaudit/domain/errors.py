"""Custom exceptions for docaudit.

Rule failures and broken links are *data*, recorded in reports. These
exceptions cover the fatal paths only: preconditions checked before any
processing begins, invalid configuration, and unreadable link sources.
"""

# Process exit statuses shared by every command.
EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_FOUND = 2
EXIT_PERMISSION_DENIED = 13
EXIT_NOT_A_FILE = 21
EXIT_INVALID_ARGUMENT = 22


class DocAuditError(Exception):
    """Base exception for all docaudit errors."""

    exit_code: int = EXIT_FAILURE


class PreconditionError(DocAuditError):
    """Raised when an input file cannot be processed at all."""

    def __init__(self, message: str, exit_code: int = EXIT_FAILURE) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ConfigurationError(DocAuditError):
    """Raised when configuration is invalid or missing."""


class LinkExtractionError(DocAuditError):
    """Raised when links cannot be extracted from a source file."""
