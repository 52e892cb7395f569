"""Normalized error hierarchy for bucketpath."""

from __future__ import annotations

from typing import Optional


class S3PathError(Exception):
    """Base class for all bucketpath errors.

    :param message: Human-readable error description.
    :param path: The path involved in the error, if any.
    :param bucket: The bucket involved, if any.
    """

    def __init__(self, message: str = "", *, path: Optional[str] = None, bucket: Optional[str] = None) -> None:
        self.path = path
        self.bucket = bucket
        super().__init__(message)

    def _context(self) -> list[str]:
        parts = []
        if self.path is not None:
            parts.append(f"path={self.path!r}")
        if self.bucket is not None:
            parts.append(f"bucket={self.bucket!r}")
        return parts

    def __str__(self) -> str:
        message = super().__str__()
        parts = [message, *self._context()] if message else self._context()
        return " | ".join(parts)

    def __repr__(self) -> str:
        cls = type(self).__name__
        args = [repr(self.args[0] if self.args else ""), *self._context()]
        return f"{cls}({', '.join(args)})"


class InvalidPath(S3PathError, ValueError):
    """Raised when a path string or bucket name cannot form a valid path."""


class NotAbsolute(S3PathError):
    """Raised when an operation needs a bucket but the path is relative."""


class PathIndexOutOfRange(S3PathError, IndexError):
    """Raised for out-of-bounds ``name_at``/``subpath`` arguments.

    :param index: The offending index, or ``(begin, end)`` for a range.
    """

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[str] = None,
        bucket: Optional[str] = None,
        index: int | tuple[int, int] | None = None,
    ) -> None:
        self.index = index
        super().__init__(message, path=path, bucket=bucket)

    def _context(self) -> list[str]:
        parts = super()._context()
        if self.index is not None:
            parts.append(f"index={self.index!r}")
        return parts


class IncompatiblePaths(S3PathError, ValueError):
    """Raised when two paths cannot be combined.

    :param other: The second path involved.
    :param reason: Which precondition failed (e.g. ``"bucket mismatch"``).
    """

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[str] = None,
        bucket: Optional[str] = None,
        other: Optional[str] = None,
        reason: str = "",
    ) -> None:
        self.other = other
        self.reason = reason
        super().__init__(message, path=path, bucket=bucket)

    def _context(self) -> list[str]:
        parts = super()._context()
        if self.other is not None:
            parts.append(f"other={self.other!r}")
        if self.reason:
            parts.append(f"reason={self.reason!r}")
        return parts


class OperationNotSupported(S3PathError, NotImplementedError):
    """Raised when a path operation has no meaning for an object store.

    :param operation: The name of the unsupported operation.
    """

    def __init__(
        self,
        message: str = "",
        *,
        path: Optional[str] = None,
        bucket: Optional[str] = None,
        operation: str = "",
    ) -> None:
        self.operation = operation
        super().__init__(message, path=path, bucket=bucket)

    def _context(self) -> list[str]:
        parts = super()._context()
        if self.operation:
            parts.append(f"operation={self.operation!r}")
        return parts


class ForeignPath(S3PathError, TypeError):
    """Raised when a value that is not an ``S3Path`` (or ``str``) is passed as a path."""
