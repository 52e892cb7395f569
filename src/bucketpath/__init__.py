"""Hierarchical path model over bucket-scoped object-store keys."""

from bucketpath._base import HierarchicalPath
from bucketpath._config import FileSystemConfig
from bucketpath._errors import (
    ForeignPath,
    IncompatiblePaths,
    InvalidPath,
    NotAbsolute,
    OperationNotSupported,
    PathIndexOutOfRange,
    S3PathError,
)
from bucketpath._filesystem import S3FileSystem, default_filesystem
from bucketpath._models import ObjectLocation
from bucketpath._path import S3Path

__version__ = "0.1.0"

__all__ = [
    # Core
    "S3Path",
    "HierarchicalPath",
    "S3FileSystem",
    "default_filesystem",
    # Models
    "ObjectLocation",
    # Config
    "FileSystemConfig",
    # Errors
    "S3PathError",
    "InvalidPath",
    "NotAbsolute",
    "PathIndexOutOfRange",
    "IncompatiblePaths",
    "OperationNotSupported",
    "ForeignPath",
    # Version
    "__version__",
]
