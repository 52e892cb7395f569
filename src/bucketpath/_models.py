"""Immutable object-store addressing model."""

from __future__ import annotations

import dataclasses

from bucketpath._types import SEPARATOR


@dataclasses.dataclass(frozen=True)
class ObjectLocation:
    """The ``(bucket, key)`` pair an object-store client addresses an object by.

    The key never carries a trailing separator. A client writing a
    "directory" object uses :attr:`directory_marker` instead.

    :param bucket: Bucket name.
    :param key: Object key, ``""`` for the bucket root.
    """

    bucket: str
    key: str = ""

    @property
    def is_bucket_root(self) -> bool:
        """``True`` if this location denotes the bucket itself."""
        return self.key == ""

    @property
    def directory_marker(self) -> str:
        """Key of the zero-byte object marking a "directory" (``""`` at the bucket root)."""
        if self.is_bucket_root:
            return ""
        return self.key + SEPARATOR
