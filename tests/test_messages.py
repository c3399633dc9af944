from datetime import datetime, timedelta, timezone

import pytest

from snapproxy.messages import (
    FieldMask,
    InfoMessage,
    PrepareSnapshotRequest,
    Timestamp,
    UpdateSnapshotRequest,
    UsageResponse,
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_epoch_is_zero_timestamp():
    assert Timestamp.from_datetime(EPOCH) == Timestamp(0, 0)
    assert Timestamp().to_datetime() == EPOCH


@pytest.mark.parametrize(
    "value",
    [
        datetime(2023, 5, 17, 12, 30, 45, 123456, tzinfo=timezone.utc),
        datetime(1960, 1, 1, 0, 0, 0, 1, tzinfo=timezone.utc),
        EPOCH,
    ],
)
def test_datetime_round_trip(value):
    assert Timestamp.from_datetime(value).to_datetime() == value


def test_nanos_stay_in_range():
    ts = Timestamp.from_datetime(datetime(1960, 6, 1, 0, 0, 0, 500, tzinfo=timezone.utc))
    assert 0 <= ts.nanos < 1_000_000_000
    assert ts.seconds < 0


def test_naive_datetime_taken_as_utc():
    naive = datetime(2020, 1, 2, 3, 4, 5)
    aware = naive.replace(tzinfo=timezone.utc)
    assert Timestamp.from_datetime(naive) == Timestamp.from_datetime(aware)


def test_offset_datetime_same_instant():
    value = datetime(2021, 3, 4, 10, 0, tzinfo=timezone(timedelta(hours=2)))
    assert Timestamp.from_datetime(value).to_datetime() == value


def test_excess_nanos_normalised():
    plain = Timestamp(seconds=11, nanos=0).to_datetime()
    overflowing = Timestamp(seconds=10, nanos=1_000_000_000).to_datetime()
    assert plain == overflowing


def test_out_of_range_raises():
    with pytest.raises(ValueError):
        Timestamp(seconds=10**12).to_datetime()


def test_info_message_defaults():
    message = InfoMessage()
    assert message.created_at is None
    assert message.updated_at is None
    assert message.labels == {}


def test_request_labels_not_shared():
    first, second = PrepareSnapshotRequest(), PrepareSnapshotRequest()
    first.labels["x"] = "y"
    assert second.labels == {}


def test_update_request_fields():
    mask = FieldMask(paths=["labels.a"])
    request = UpdateSnapshotRequest(info=InfoMessage(name="n"), update_mask=mask)
    assert request.update_mask.paths == ["labels.a"]
    assert request.info.name == "n"


def test_usage_response_values():
    response = UsageResponse(size=4096, inodes=7)
    assert (response.size, response.inodes) == (4096, 7)