"""Configuration model — immutable data container describing a filesystem context."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class FileSystemConfig:
    """Describes an S3 filesystem context.

    Instances are frozen but not hashable, because ``options`` is a dict.

    :param endpoint: Authority of the filesystem URI (empty for the default S3 filesystem).
    :param options: Client-specific options, passed through untouched.
    """

    endpoint: str = ""
    options: dict[str, object] = dataclasses.field(default_factory=dict)

    @property
    def uri(self) -> str:
        """Filesystem URI, e.g. ``s3:///`` or ``s3://minio.local:9000/``."""
        return f"s3://{self.endpoint}/"

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> FileSystemConfig:
        """Construct from a plain dict (e.g. parsed TOML/JSON).

        :param data: Dict with optional ``endpoint`` and ``options`` keys.
        """
        raw_options = data.get("options", {})
        if not isinstance(raw_options, dict):
            msg = "Expected 'options' to be a dict"
            raise TypeError(msg)
        return cls(endpoint=str(data.get("endpoint", "")), options=dict(raw_options))
