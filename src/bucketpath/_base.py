"""HierarchicalPath abstract base class — the path contract."""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterator

    from bucketpath._types import Parts


class HierarchicalPath(abc.ABC):
    """Abstract base class for hierarchical path values.

    Implementations are immutable. Every operation returning a path returns
    a new value of the implementing type; optional operations that have no
    meaning for the underlying store raise ``OperationNotSupported``.
    """

    __slots__ = ()

    @property
    @abc.abstractmethod
    def parts(self) -> Parts:
        """Path segments, in order."""

    @property
    @abc.abstractmethod
    def root(self) -> HierarchicalPath | None:
        """Root component, or ``None`` for a relative path."""

    @property
    @abc.abstractmethod
    def file_name(self) -> HierarchicalPath | None:
        """Last segment as a relative path, or ``None`` if there are no segments."""

    @property
    @abc.abstractmethod
    def parent(self) -> HierarchicalPath | None:
        """Parent path, or ``None`` if there is none."""

    @property
    def name_count(self) -> int:
        """Number of segments."""
        return len(self.parts)

    @abc.abstractmethod
    def is_absolute(self) -> bool:
        """Return ``True`` if the path carries a root component."""

    @abc.abstractmethod
    def name_at(self, index: int) -> HierarchicalPath:
        """Return segment ``index`` as a single-segment relative path.

        :raises PathIndexOutOfRange: If ``index`` is outside ``[0, name_count)``.
        """

    @abc.abstractmethod
    def subpath(self, begin: int, end: int) -> HierarchicalPath:
        """Return segments ``[begin, end)`` as a relative path.

        :raises PathIndexOutOfRange: If the range is empty or out of bounds.
        """

    @abc.abstractmethod
    def normalize(self) -> HierarchicalPath:
        """Return the path in normal form."""

    @abc.abstractmethod
    def resolve(self, other: Any) -> HierarchicalPath:
        """Resolve ``other`` against this path."""

    @abc.abstractmethod
    def resolve_sibling(self, other: Any) -> HierarchicalPath:
        """Resolve ``other`` against this path's parent."""

    @abc.abstractmethod
    def relativize(self, other: Any) -> HierarchicalPath:
        """Return a relative path that leads from this path to ``other``."""

    @abc.abstractmethod
    def starts_with(self, other: Any) -> bool:
        """Return ``True`` if this path starts with ``other``."""

    @abc.abstractmethod
    def ends_with(self, other: Any) -> bool:
        """Return ``True`` if this path ends with ``other``."""

    @abc.abstractmethod
    def to_uri(self) -> str:
        """Return the URI form of this path."""

    @abc.abstractmethod
    def to_absolute_path(self) -> HierarchicalPath:
        """Return the absolute form of this path.

        :raises NotAbsolute: If there is no base to resolve against.
        """

    @abc.abstractmethod
    def to_real_path(self) -> HierarchicalPath:
        """Resolve symbolic links."""

    @abc.abstractmethod
    def to_file(self) -> Any:
        """Return a local file handle for this path."""

    @abc.abstractmethod
    def register(self, watcher: Any, *events: Any) -> Any:
        """Register this path with a change-notification service."""

    @abc.abstractmethod
    def __iter__(self) -> Iterator[HierarchicalPath]:
        """Iterate over segments as single-segment relative paths."""
