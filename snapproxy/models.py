"""Core snapshot types and the interface a snapshotter implements."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Kind(enum.Enum):
    """Snapshot kinds, valued by their wire number."""

    UNKNOWN = 0
    VIEW = 1
    ACTIVE = 2
    COMMITTED = 3


@dataclass
class Info:
    """Information about a particular snapshot."""

    kind: Kind = Kind.UNKNOWN
    name: str = ""
    parent: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)


@dataclass
class Usage:
    """Disk resources consumed by a snapshot itself, excluding its parents."""

    inodes: int = 0
    size: int = 0

    def __iadd__(self, other: Usage) -> Usage:
        self.inodes += other.inodes
        self.size += other.size
        return self


class Snapshotter(abc.ABC):
    """Allocates, snapshots and mounts filesystem changesets.

    Every snapshot has a parent; the empty parent is the empty string.
    Mounts are returned as lists of mount descriptions, passed through
    to the caller unchanged. Any exception raised by a method is reported
    to the client as an internal error.
    """

    @abc.abstractmethod
    async def stat(self, key: str) -> Info:
        """Return the info for an active or committed snapshot."""

    @abc.abstractmethod
    async def update(self, info: Info, fieldpaths: list[str] | None) -> Info:
        """Update the mutable properties of a snapshot."""

    @abc.abstractmethod
    async def usage(self, key: str) -> Usage:
        """Return the resource usage of a snapshot, excluding its parents."""

    @abc.abstractmethod
    async def mounts(self, key: str) -> list[Any]:
        """Return the mounts of the active snapshot identified by key."""

    @abc.abstractmethod
    async def prepare(self, key: str, parent: str, labels: dict[str, str]) -> list[Any]:
        """Create an active snapshot descending from parent."""

    @abc.abstractmethod
    async def view(self, key: str, parent: str, labels: dict[str, str]) -> list[Any]:
        """Create a read-only view on parent tracked by key."""

    @abc.abstractmethod
    async def commit(self, name: str, key: str, labels: dict[str, str]) -> None:
        """Capture the changes of key into a committed snapshot called name."""

    @abc.abstractmethod
    async def remove(self, key: str) -> None:
        """Remove the committed or active snapshot identified by key."""

    async def clear(self) -> None:
        """Perform deferred resource cleanup; does nothing by default."""
        return None