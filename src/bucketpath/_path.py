"""S3Path — immutable path value over a bucket-scoped key namespace."""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING, Final
from urllib.parse import quote

from bucketpath._base import HierarchicalPath
from bucketpath._errors import (
    ForeignPath,
    IncompatiblePaths,
    InvalidPath,
    NotAbsolute,
    OperationNotSupported,
    PathIndexOutOfRange,
)
from bucketpath._filesystem import default_filesystem
from bucketpath._models import ObjectLocation
from bucketpath._types import SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Iterator
    from typing import Any, NoReturn

    from bucketpath._filesystem import S3FileSystem
    from bucketpath._types import PathArg, Parts


def _strip(value: str) -> str:
    return value.replace(SEPARATOR, "")


@functools.total_ordering
class S3Path(HierarchicalPath):
    """An immutable path within an S3 filesystem.

    Accepts ``"/{bucket}"``, ``"/{bucket}/{key}"`` or a relative ``"{key}"``.
    Redundant separators are dropped, so ``"/b//a/"`` is ``/b/a``.

    :param path: The raw path string.
    :param filesystem: Owning filesystem; defaults to :func:`default_filesystem`.
    :raises InvalidPath: If ``path`` is absolute but names no bucket.
    :raises ForeignPath: If ``path`` is not a string.
    """

    __slots__ = ("_bucket", "_parts", "_fs")
    _bucket: Final[str | None]  # type: ignore[misc]
    _parts: Final[Parts]  # type: ignore[misc]
    _fs: Final[S3FileSystem]  # type: ignore[misc]

    def __init__(self, path: str, *, filesystem: S3FileSystem | None = None) -> None:
        if not isinstance(path, str):
            raise ForeignPath(f"Expected a path string, got {type(path).__name__}")
        tokens = [t for t in path.split(SEPARATOR) if t]
        bucket = None
        if path.startswith(SEPARATOR):
            if not tokens:
                raise InvalidPath("Absolute path must start with a bucket name", path=path)
            bucket, tokens = tokens[0], tokens[1:]
        object.__setattr__(self, "_bucket", bucket)
        object.__setattr__(self, "_parts", tuple(tokens))
        object.__setattr__(self, "_fs", filesystem or default_filesystem())

    @classmethod
    def from_parts(cls, bucket: str | None, *segments: str, filesystem: S3FileSystem | None = None) -> S3Path:
        """Build a path from a bucket and explicit segments.

        Separators are stripped from the bucket and from every segment, not
        split on: ``from_parts("b", "x/y")`` has the single segment ``"xy"``.

        :param bucket: Bucket name, or ``None`` for a relative path.
        :raises InvalidPath: If ``bucket`` is empty after stripping.
        """
        if bucket is not None:
            bucket = _strip(bucket)
            if not bucket:
                raise InvalidPath("Bucket name must not be empty", path=SEPARATOR)
        parts = tuple(s for s in map(_strip, segments) if s)
        return cls._new(bucket, parts, filesystem or default_filesystem())

    @classmethod
    def for_path(cls, path: str) -> S3Path:
        """Parse ``path`` against the default filesystem."""
        return cls(path)

    @classmethod
    def _new(cls, bucket: str | None, parts: Parts, fs: S3FileSystem) -> S3Path:
        p = object.__new__(cls)
        object.__setattr__(p, "_bucket", bucket)
        object.__setattr__(p, "_parts", parts)
        object.__setattr__(p, "_fs", fs)
        return p

    def _derive(self, bucket: str | None, parts: Parts) -> S3Path:
        return S3Path._new(bucket, parts, self._fs)

    def _coerce(self, other: object) -> S3Path:
        if isinstance(other, S3Path):
            return other
        if isinstance(other, str):
            return S3Path(other, filesystem=self._fs)
        raise ForeignPath(
            f"Expected an S3Path or str, got {type(other).__name__}",
            path=str(self),
            bucket=self._bucket,
        )

    def _unsupported(self, operation: str) -> OperationNotSupported:
        return OperationNotSupported(
            f"Operation '{operation}' is not supported by S3 paths",
            operation=operation,
            path=str(self),
        )

    # region: accessors

    @property
    def bucket(self) -> str | None:
        """Bucket name, or ``None`` for a relative path."""
        return self._bucket

    @property
    def key(self) -> str:
        """Object key: the segments joined by ``/``.

        Never ends with a separator. Callers writing a "directory" object
        append it themselves (see :attr:`ObjectLocation.directory_marker`).
        """
        return SEPARATOR.join(self._parts)

    @property
    def parts(self) -> Parts:
        return self._parts

    @property
    def filesystem(self) -> S3FileSystem:
        return self._fs

    def is_absolute(self) -> bool:
        return self._bucket is not None

    # endregion

    # region: navigation

    @property
    def root(self) -> S3Path | None:
        """Bucket root (same bucket, no segments), or ``None`` for a relative path."""
        if self._bucket is None:
            return None
        return self._derive(self._bucket, ())

    @property
    def file_name(self) -> S3Path | None:
        """Last segment as a relative path, or ``None`` if there are no segments."""
        if not self._parts:
            return None
        return self._derive(None, self._parts[-1:])

    @property
    def parent(self) -> S3Path | None:
        """Parent path, or ``None`` if there is none.

        The bucket is kept: ``/b/a`` has parent ``/b``, while ``/b`` and the
        relative ``a`` have no parent.
        """
        if not self._parts:
            return None
        if len(self._parts) == 1 and self._bucket is None:
            return None
        return self._derive(self._bucket, self._parts[:-1])

    def name_at(self, index: int) -> S3Path:
        """Return segment ``index`` as a single-segment relative path.

        :raises PathIndexOutOfRange: If ``index`` is outside ``[0, name_count)``.
        """
        if not 0 <= index < len(self._parts):
            raise PathIndexOutOfRange(
                f"Index {index} out of range for {len(self._parts)} segment(s)",
                path=str(self),
                index=index,
            )
        return self._derive(None, (self._parts[index],))

    def subpath(self, begin: int, end: int) -> S3Path:
        """Return segments ``[begin, end)`` as a relative path.

        :raises PathIndexOutOfRange: If ``begin < 0``, ``end > name_count`` or ``begin >= end``.
        """
        if begin < 0 or end > len(self._parts) or begin >= end:
            raise PathIndexOutOfRange(
                f"Invalid range [{begin}, {end}) for {len(self._parts)} segment(s)",
                path=str(self),
                index=(begin, end),
            )
        return self._derive(None, self._parts[begin:end])

    def normalize(self) -> S3Path:
        """Return ``self``: parsing already drops empty segments."""
        return self

    def __iter__(self) -> Iterator[S3Path]:
        for part in self._parts:
            yield self._derive(None, (part,))

    # endregion

    # region: combination

    def resolve(self, other: PathArg) -> S3Path:
        """Resolve ``other`` against this path.

        An absolute ``other`` is returned as is; an empty one returns ``self``.

        :raises ForeignPath: If ``other`` is neither an ``S3Path`` nor a ``str``.
        """
        other_path = self._coerce(other)
        if other_path.is_absolute():
            return other_path
        if not other_path._parts:
            return self
        return self._derive(self._bucket, self._parts + other_path._parts)

    def resolve_sibling(self, other: PathArg) -> S3Path:
        """Resolve ``other`` against this path's parent.

        Returns ``other`` if there is no parent or ``other`` is absolute.
        """
        other_path = self._coerce(other)
        parent = self.parent
        if parent is None or other_path.is_absolute():
            return other_path
        if not other_path._parts:
            return parent
        return self._derive(self._bucket, self._parts[:-1] + other_path._parts)

    def relativize(self, other: PathArg) -> S3Path:
        """Return the relative path from this path to ``other``.

        Equal paths give the empty relative path. Otherwise both paths must be
        absolute within the same bucket; the shared leading segments are
        dropped and the rest of ``other`` is returned. Object stores have no
        ``..`` navigation, so ``/b/x/y`` relativized against ``/b/x/z`` is ``z``.

        :raises IncompatiblePaths: If either path is relative or the buckets differ.
        """
        other_path = self._coerce(other)
        if self == other_path:
            return self._derive(None, ())

        if self._bucket is None:
            reason, msg = "this is relative", "Path is already relative"
        elif other_path._bucket is None:
            reason, msg = "other is relative", "Cannot relativize against a relative path"
        elif self._bucket != other_path._bucket:
            reason, msg = "bucket mismatch", "Cannot relativize paths with different buckets"
        else:
            common = 0
            for mine, theirs in zip(self._parts, other_path._parts):
                if mine != theirs:
                    break
                common += 1
            return self._derive(None, other_path._parts[common:])

        raise IncompatiblePaths(msg, path=str(self), bucket=self._bucket, other=str(other_path), reason=reason)

    def starts_with(self, other: PathArg) -> NoReturn:
        """Not supported for S3 paths.

        :raises OperationNotSupported: Always.
        """
        raise self._unsupported("starts_with")

    def ends_with(self, other: PathArg) -> bool:
        """Return ``True`` if the segments of ``other`` are a suffix of this path's.

        An absolute or empty ``other`` only matches an equal path. A string is
        parsed in this path's filesystem.
        """
        other_path = self._coerce(other)
        if other_path.is_absolute() or not other_path._parts:
            return self == other_path
        n = len(other_path._parts)
        return n <= len(self._parts) and self._parts[-n:] == other_path._parts

    def __truediv__(self, other: PathArg) -> S3Path:
        if not isinstance(other, (str, S3Path)):
            return NotImplemented
        return self.resolve(other)

    # endregion

    # region: conversion

    def to_uri(self) -> str:
        """Return ``s3://{bucket}/{key}`` with bucket and key percent-encoded.

        A separator always follows the bucket, unlike the bare
        ``s3://{bucket}{key}`` join, so ``/b/x`` is ``s3://b/x`` and not ``s3://bx``.

        :raises NotAbsolute: If the path is relative.
        """
        if self._bucket is None:
            raise NotAbsolute("Relative path has no URI", path=str(self))
        return f"s3://{quote(self._bucket, safe='')}{SEPARATOR}{quote(self.key, safe=SEPARATOR)}"

    def to_absolute_path(self) -> S3Path:
        """Return ``self`` if absolute; there is no working directory to resolve against.

        :raises NotAbsolute: If the path is relative.
        """
        if self._bucket is None:
            raise NotAbsolute("Relative path cannot be made absolute", path=str(self))
        return self

    def to_location(self) -> ObjectLocation:
        """Return the ``(bucket, key)`` pair an object-store client needs.

        :raises NotAbsolute: If the path is relative.
        """
        if self._bucket is None:
            raise NotAbsolute("Relative path has no object location", path=str(self))
        return ObjectLocation(bucket=self._bucket, key=self.key)

    def to_real_path(self) -> NoReturn:
        raise self._unsupported("real_path")

    def to_file(self) -> NoReturn:
        raise self._unsupported("to_file")

    def register(self, watcher: Any, *events: Any) -> NoReturn:
        raise self._unsupported("watch")

    # endregion

    # region: dunder

    def compare_to(self, other: S3Path) -> int:
        """Compare string forms: negative, zero or positive.

        :raises ForeignPath: If ``other`` is not an ``S3Path``.
        """
        if not isinstance(other, S3Path):
            raise ForeignPath(f"Expected an S3Path, got {type(other).__name__}", path=str(self))
        mine, theirs = str(self), str(other)
        return (mine > theirs) - (mine < theirs)

    def __str__(self) -> str:
        if self._bucket is None:
            return self.key
        return f"{SEPARATOR}{self._bucket}{SEPARATOR}{self.key}"

    def __repr__(self) -> str:
        return f"S3Path({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, S3Path):
            return self._bucket == other._bucket and self._parts == other._parts
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, S3Path):
            return str(self) < str(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self._bucket, self._parts))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"S3Path is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"S3Path is immutable: cannot delete '{name}'")

    # endregion
