"""Type aliases used throughout bucketpath."""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from bucketpath._path import S3Path

PathArg = Union[str, "S3Path"]  # noqa: UP007
Parts = tuple[str, ...]

SEPARATOR = "/"
