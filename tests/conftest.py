"""Shared test fixtures."""

from __future__ import annotations

import pytest

from bucketpath._config import FileSystemConfig
from bucketpath._filesystem import S3FileSystem


@pytest.fixture()
def fs() -> S3FileSystem:
    """A filesystem distinct from the process-wide default."""
    return S3FileSystem(FileSystemConfig(endpoint="minio.test:9000"))
