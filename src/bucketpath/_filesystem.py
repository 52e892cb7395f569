"""S3FileSystem — the object-store context paths are bound to."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from bucketpath._config import FileSystemConfig
from bucketpath._types import SEPARATOR

if TYPE_CHECKING:
    from bucketpath._path import S3Path

log = logging.getLogger(__name__)


class S3FileSystem:
    """A logical S3 filesystem that hands out :class:`S3Path` values.

    Paths keep a read-only reference to the filesystem that created them;
    the filesystem never tracks the paths it creates.

    :param config: Optional configuration. Defaults to the plain ``s3:///`` filesystem.
    """

    def __init__(self, config: FileSystemConfig | None = None) -> None:
        self._config = config or FileSystemConfig()
        log.debug("Created S3 filesystem for %s", self._config.uri)

    def __repr__(self) -> str:
        return f"S3FileSystem(uri={self.uri!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, S3FileSystem):
            return self._config == other._config
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._config.endpoint)

    @property
    def config(self) -> FileSystemConfig:
        return self._config

    @property
    def uri(self) -> str:
        return self._config.uri

    @property
    def scheme(self) -> str:
        return "s3"

    @property
    def separator(self) -> str:
        return SEPARATOR

    def get_path(self, first: str, *more: str) -> S3Path:
        """Join the non-empty arguments with the separator and parse the result.

        Example: ``fs.get_path("/bucket", "a/b", "c")`` returns ``/bucket/a/b/c``.

        :raises InvalidPath: If the joined string is absolute but names no bucket.
        """
        from bucketpath._path import S3Path

        joined = SEPARATOR.join(p for p in (first, *more) if p)
        return S3Path(joined, filesystem=self)

    def path_from_parts(self, bucket: str | None, *segments: str) -> S3Path:
        """Build a path from a bucket (``None`` for relative) and explicit segments."""
        from bucketpath._path import S3Path

        return S3Path.from_parts(bucket, *segments, filesystem=self)


_default: S3FileSystem | None = None
_default_lock = threading.Lock()


def default_filesystem() -> S3FileSystem:
    """Return the process-wide default ``s3:///`` filesystem, creating it on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                log.debug("Initializing default S3 filesystem")
                _default = S3FileSystem()
    return _default
