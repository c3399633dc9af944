from datetime import datetime, timezone

import pytest

from snapproxy.convert import (
    ConversionError,
    conversion_status,
    info_from_message,
    info_to_message,
    kind_from_int,
    kind_to_int,
)
from snapproxy.messages import InfoMessage, Timestamp
from snapproxy.models import Info, Kind
from snapproxy.status import StatusCode


@pytest.mark.parametrize("kind", list(Kind))
def test_kind_round_trip(kind):
    assert kind_from_int(kind_to_int(kind)) is kind


def test_kind_numbers_fixed():
    assert kind_to_int(Kind.UNKNOWN) == 0
    assert kind_to_int(Kind.VIEW) == 1
    assert kind_to_int(Kind.ACTIVE) == 2
    assert kind_to_int(Kind.COMMITTED) == 3


@pytest.mark.parametrize("value", [4, -1, 100])
def test_invalid_kind_rejected(value):
    with pytest.raises(ConversionError) as caught:
        kind_from_int(value)
    assert str(caught.value) == f"Invalid enum value: {value}"


def _sample_info():
    return Info(
        kind=Kind.COMMITTED,
        name="layer",
        parent="base",
        labels={"a": "b"},
        created_at=datetime(2022, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc),
        updated_at=datetime(2022, 2, 3, 4, 5, 6, tzinfo=timezone.utc),
    )


def test_info_round_trip():
    info = _sample_info()
    assert info_from_message(info_to_message(info)) == info


def test_info_to_message_fields():
    message = info_to_message(_sample_info())
    assert message.kind == kind_to_int(Kind.COMMITTED)
    assert message.name == "layer"
    assert message.parent == "base"
    assert message.created_at == Timestamp.from_datetime(_sample_info().created_at)


def test_missing_timestamps_mean_epoch():
    info = info_from_message(InfoMessage(name="x", kind=2))
    epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert info.created_at == epoch
    assert info.updated_at == epoch
    assert info.kind is Kind.ACTIVE


def test_labels_copied():
    message = InfoMessage(labels={"k": "v"})
    info = info_from_message(message)
    message.labels["k"] = "changed"
    assert info.labels == {"k": "v"}


def test_invalid_kind_in_message():
    with pytest.raises(ConversionError):
        info_from_message(InfoMessage(kind=9))


def test_bad_timestamp_in_message():
    message = InfoMessage(created_at=Timestamp(seconds=10**12))
    with pytest.raises(ConversionError) as caught:
        info_from_message(message)
    assert str(caught.value).startswith("Failed to convert GRPC timestamp")


def test_conversion_status_is_internal():
    err = ConversionError("Invalid enum value: 7")
    status = conversion_status(err)
    assert status.code is StatusCode.INTERNAL
    assert status.message == "Invalid enum value: 7"