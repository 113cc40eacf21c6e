"""Error type shared by the header parsers and formatters."""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ENCODING = "invalid header encoding"
    INVALID_INTEGER = "invalid integer value"
    INVALID_TIMESTAMP = "invalid timestamp format"
    MALFORMED_RANGE = "malformed range value"
    INVALID_CREDENTIAL = "invalid credential input"


class HeaderError(Exception):
    """Raised when a header value can't be parsed or formatted.

    Carries the failure kind, the operation that failed, optional
    key/value context (usually the offending ``value``) and the
    lower-level exception that triggered it, if any.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        operation: str = "",
        context: dict[str, str] | None = None,
        source: BaseException | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.operation = operation
        self.context: dict[str, str] = context or {}
        self.source = source
        if source is not None:
            self.__cause__ = source

    def __str__(self) -> str:
        parts = [f"{self.kind.value}: {self.message}"]
        details = []
        if self.operation:
            details.append(f"operation: {self.operation}")
        details.extend(f"{k}: {v}" for k, v in self.context.items())
        if details:
            parts.append(f"({', '.join(details)})")
        if self.source is not None:
            parts.append(f"caused by {self.source}")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"HeaderError(kind={self.kind.name}, operation={self.operation!r}, "
            f"message={self.message!r})"
        )
