"""Request and response messages of the snapshots service."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NANOS_PER_SECOND = 1_000_000_000


@dataclass
class Timestamp:
    """A point in time as seconds and nanoseconds since the Unix epoch."""

    seconds: int = 0
    nanos: int = 0

    @classmethod
    def from_datetime(cls, value: datetime) -> Timestamp:
        """Build a timestamp from a datetime; naive values are taken as UTC."""
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        delta = value - _EPOCH
        return cls(
            seconds=delta.days * 86400 + delta.seconds,
            nanos=delta.microseconds * 1000,
        )

    def to_datetime(self) -> datetime:
        """Return the UTC datetime, truncated to microseconds.

        Raises ValueError when the time cannot be represented.
        """
        extra, nanos = divmod(self.nanos, _NANOS_PER_SECOND)
        seconds = self.seconds + extra
        try:
            return _EPOCH + timedelta(seconds=seconds, microseconds=nanos // 1000)
        except OverflowError as exc:
            raise ValueError(
                f"timestamp out of range: seconds={self.seconds}, nanos={self.nanos}"
            ) from exc


@dataclass
class InfoMessage:
    """Snapshot information as carried on the wire."""

    name: str = ""
    parent: str = ""
    kind: int = 0
    created_at: Timestamp | None = None
    updated_at: Timestamp | None = None
    labels: dict[str, str] = field(default_factory=dict)


@dataclass
class FieldMask:
    """The set of field paths an update applies to."""

    paths: list[str] = field(default_factory=list)


@dataclass
class PrepareSnapshotRequest:
    snapshotter: str = ""
    key: str = ""
    parent: str = ""
    labels: dict[str, str] = field(default_factory=dict)


@dataclass
class PrepareSnapshotResponse:
    mounts: list[Any] = field(default_factory=list)


@dataclass
class ViewSnapshotRequest:
    snapshotter: str = ""
    key: str = ""
    parent: str = ""
    labels: dict[str, str] = field(default_factory=dict)


@dataclass
class ViewSnapshotResponse:
    mounts: list[Any] = field(default_factory=list)


@dataclass
class MountsRequest:
    snapshotter: str = ""
    key: str = ""


@dataclass
class MountsResponse:
    mounts: list[Any] = field(default_factory=list)


@dataclass
class CommitSnapshotRequest:
    snapshotter: str = ""
    name: str = ""
    key: str = ""
    labels: dict[str, str] = field(default_factory=dict)


@dataclass
class RemoveSnapshotRequest:
    snapshotter: str = ""
    key: str = ""


@dataclass
class StatSnapshotRequest:
    snapshotter: str = ""
    key: str = ""


@dataclass
class StatSnapshotResponse:
    info: InfoMessage | None = None


@dataclass
class UpdateSnapshotRequest:
    snapshotter: str = ""
    info: InfoMessage | None = None
    update_mask: FieldMask | None = None


@dataclass
class UpdateSnapshotResponse:
    info: InfoMessage | None = None


@dataclass
class ListSnapshotsRequest:
    snapshotter: str = ""
    filters: list[str] = field(default_factory=list)


@dataclass
class UsageRequest:
    snapshotter: str = ""
    key: str = ""


@dataclass
class UsageResponse:
    size: int = 0
    inodes: int = 0


@dataclass
class CleanupRequest:
    snapshotter: str = ""