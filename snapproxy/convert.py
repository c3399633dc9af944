"""Conversions between wire messages and native snapshot types."""

from __future__ import annotations

from snapproxy.messages import InfoMessage, Timestamp
from snapproxy.models import Info, Kind
from snapproxy.status import Status, StatusCode


class ConversionError(ValueError):
    """A wire message could not be converted to a native type."""


def kind_to_int(kind: Kind) -> int:
    """Return the wire number of a snapshot kind."""
    return kind.value


def kind_from_int(value: int) -> Kind:
    """Return the snapshot kind for a wire number."""
    try:
        return Kind(value)
    except ValueError:
        raise ConversionError(f"Invalid enum value: {value}") from None


def _to_datetime(timestamp: Timestamp | None):
    try:
        return (timestamp or Timestamp()).to_datetime()
    except ValueError as exc:
        raise ConversionError(f"Failed to convert GRPC timestamp: {exc}") from exc


def info_from_message(message: InfoMessage) -> Info:
    """Build native snapshot info from its wire form; missing times mean the epoch."""
    return Info(
        kind=kind_from_int(message.kind),
        name=message.name,
        parent=message.parent,
        labels=dict(message.labels),
        created_at=_to_datetime(message.created_at),
        updated_at=_to_datetime(message.updated_at),
    )


def info_to_message(info: Info) -> InfoMessage:
    """Build the wire form of native snapshot info."""
    return InfoMessage(
        name=info.name,
        parent=info.parent,
        kind=kind_to_int(info.kind),
        created_at=Timestamp.from_datetime(info.created_at),
        updated_at=Timestamp.from_datetime(info.updated_at),
        labels=dict(info.labels),
    )


def conversion_status(err: ConversionError) -> Status:
    """Report a conversion failure as an internal RPC error."""
    return Status(StatusCode.INTERNAL, str(err))