"""Serves snapshots service requests by delegating to a Snapshotter."""

from __future__ import annotations

from snapproxy.convert import ConversionError, info_from_message, info_to_message
from snapproxy.messages import (
    CleanupRequest,
    CommitSnapshotRequest,
    ListSnapshotsRequest,
    MountsRequest,
    MountsResponse,
    PrepareSnapshotRequest,
    PrepareSnapshotResponse,
    RemoveSnapshotRequest,
    StatSnapshotRequest,
    StatSnapshotResponse,
    UpdateSnapshotRequest,
    UpdateSnapshotResponse,
    UsageRequest,
    UsageResponse,
    ViewSnapshotRequest,
    ViewSnapshotResponse,
)
from snapproxy.models import Snapshotter
from snapproxy.status import Status, StatusCode


def status(err: BaseException) -> Status:
    """Report a snapshotter failure as an internal RPC error."""
    return Status(StatusCode.INTERNAL, repr(err))


class Wrapper:
    """Handles service requests with a Snapshotter implementation.

    Every method raises Status on failure.
    """

    def __init__(self, snapshotter: Snapshotter) -> None:
        self.snapshotter = snapshotter

    async def prepare(self, request: PrepareSnapshotRequest) -> PrepareSnapshotResponse:
        try:
            mounts = await self.snapshotter.prepare(
                request.key, request.parent, request.labels
            )
        except Exception as err:
            raise status(err) from err
        return PrepareSnapshotResponse(mounts=list(mounts))

    async def view(self, request: ViewSnapshotRequest) -> ViewSnapshotResponse:
        try:
            mounts = await self.snapshotter.view(
                request.key, request.parent, request.labels
            )
        except Exception as err:
            raise status(err) from err
        return ViewSnapshotResponse(mounts=list(mounts))

    async def mounts(self, request: MountsRequest) -> MountsResponse:
        try:
            mounts = await self.snapshotter.mounts(request.key)
        except Exception as err:
            raise status(err) from err
        return MountsResponse(mounts=list(mounts))

    async def commit(self, request: CommitSnapshotRequest) -> None:
        try:
            await self.snapshotter.commit(request.name, request.key, request.labels)
        except Exception as err:
            raise status(err) from err

    async def remove(self, request: RemoveSnapshotRequest) -> None:
        try:
            await self.snapshotter.remove(request.key)
        except Exception as err:
            raise status(err) from err

    async def stat(self, request: StatSnapshotRequest) -> StatSnapshotResponse:
        try:
            info = await self.snapshotter.stat(request.key)
        except Exception as err:
            raise status(err) from err
        return StatSnapshotResponse(info=info_to_message(info))

    async def update(self, request: UpdateSnapshotRequest) -> UpdateSnapshotResponse:
        if request.info is None:
            raise Status(StatusCode.FAILED_PRECONDITION, "info is required")
        try:
            info = info_from_message(request.info)
        except ConversionError as err:
            raise Status(
                StatusCode.INVALID_ARGUMENT, f"Failed to convert timestamp: {err}"
            ) from err

        fields = list(request.update_mask.paths) if request.update_mask is not None else None

        try:
            updated = await self.snapshotter.update(info, fields)
        except Exception as err:
            raise status(err) from err
        return UpdateSnapshotResponse(info=info_to_message(updated))

    async def list(self, request: ListSnapshotsRequest):
        raise Status(StatusCode.UNIMPLEMENTED, "not implemented")

    async def usage(self, request: UsageRequest) -> UsageResponse:
        try:
            usage = await self.snapshotter.usage(request.key)
        except Exception as err:
            raise status(err) from err
        return UsageResponse(size=usage.size, inodes=usage.inodes)

    async def cleanup(self, request: CleanupRequest) -> None:
        try:
            await self.snapshotter.clear()
        except Exception as err:
            raise status(err) from err


def server(snapshotter: Snapshotter) -> Wrapper:
    """Create a service handler for any Snapshotter."""
    return Wrapper(snapshotter)