"""Exceptions raised while aggregating the exam archive."""

from __future__ import annotations

from pathlib import Path


class ExamArchiveError(RuntimeError):
    """Base class for failures that abort an aggregation pass.

    ``path`` is the offending entry and ``detail`` the underlying reason
    (OS error text or decoder message) without the path prefix.
    """

    def __init__(self, path: str | Path | None, message: str, detail: str) -> None:
        self.path = Path(path) if path is not None else None
        self.detail = detail
        super().__init__(message)


class ExamReadError(ExamArchiveError):
    """Raised when a directory or file under the archive root cannot be read."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(path, f"failed to read {path}: {reason}", reason)


class ExamParseError(ExamArchiveError):
    """Raised when a non-empty exam file does not parse under its format."""

    def __init__(self, path: str | Path | None, fmt: str, detail: str) -> None:
        self.format = fmt
        label = "JSONC" if fmt == "jsonc" else "JSON"
        where = f" in file {path}" if path is not None else ""
        super().__init__(path, f"failed to parse {label}{where}: {detail}", detail)


class ExamSerializationError(RuntimeError):
    """Raised when an aggregation result cannot be encoded as JSON."""
