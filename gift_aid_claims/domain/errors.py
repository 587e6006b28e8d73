"""Error taxonomy for claim assembly and envelope reading.

Contract violations are programmer errors raised at the call site and are not
worth retrying. Environment failures come from outside input (a malformed
gateway reply) and the caller may decide to recover.
"""
from __future__ import annotations

from pathlib import Path
from typing import Sequence


class GiftAidError(Exception):
    """Base class for every error raised by this package."""

    recoverable = False

    def __init__(self, message: str, error_code: str) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code


class ContractViolation(GiftAidError):
    recoverable = False


class EnvironmentFailure(GiftAidError):
    recoverable = True


class SchemaValidationError(ContractViolation):
    """Raised when a table lacks one or more required columns."""

    def __init__(self, missing_columns: Sequence[str]) -> None:
        self.missing_columns = list(missing_columns)
        message = "List of missing required columns: " + ", ".join(self.missing_columns)
        super().__init__(message, "missing_columns")


class NotBuiltError(ContractViolation):
    def __init__(self, message: str = "Result requested before it was built") -> None:
        super().__init__(message, "not_built")


class NotReadError(ContractViolation):
    def __init__(self, message: str = "Message not read. Call read_message first.") -> None:
        super().__init__(message, "not_read")


class ReaderReusedError(ContractViolation):
    def __init__(self, state: str) -> None:
        self.state = state
        super().__init__(f"Reader already used (state={state}); create a new reader per message", "reader_reused")


class UnknownDonationKindError(ContractViolation):
    def __init__(self, row_label: object, value: object) -> None:
        self.row_label = row_label
        self.value = value
        super().__init__(f"Row {row_label}: unknown donation type {value!r}", "unknown_donation_kind")


class InvalidRowError(ContractViolation):
    def __init__(self, row_label: object, column: str, value: object, reason: str) -> None:
        self.row_label = row_label
        self.column = column
        self.value = value
        super().__init__(f"Row {row_label}, column {column!r}: {reason} ({value!r})", "invalid_row")


class DeserializationError(EnvironmentFailure):
    """Raised when an inbound envelope cannot be turned into typed values."""

    def __init__(self, cause: BaseException, saved_to: Path | None = None) -> None:
        self.cause = cause
        self.saved_to = saved_to
        super().__init__(f"Could not read gateway message: {cause}", "deserialization_failed")
