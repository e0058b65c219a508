from datetime import datetime, timedelta, timezone

import pytest

from flagkit.values import (
    SERIALIZE_PREFIX,
    Float64Slice,
    Int64Slice,
    IntSlice,
    StringSlice,
    Timestamp,
    go_layout_to_strftime,
    split_multi_values,
)


def test_split_multi_values_keeps_whitespace():
    assert split_multi_values("a, b,c") == ["a", " b", "c"]


def test_defaults_are_kept_until_first_set():
    s = IntSlice(1, 2)
    assert s.value() == [1, 2]
    s.set("3")
    assert s.value() == [3]
    s.set("4, 5")
    assert s.value() == [3, 4, 5]


def test_int_slice_prefixes():
    s = IntSlice()
    s.set("0x10,010,0b11")
    assert s.value() == [0x10, 0o10, 0b11]


@pytest.mark.parametrize("bad", ["abc", "1.5", "", "--1"])
def test_int_slice_rejects_invalid(bad):
    with pytest.raises(ValueError):
        IntSlice().set(bad)


def test_int64_slice_range():
    s = Int64Slice()
    s.set(str(2**63 - 1))
    assert s.value() == [2**63 - 1]
    with pytest.raises(ValueError):
        s.set(str(2**63))


def test_set_int_replaces_defaults():
    s = IntSlice(7)
    s.set_int(9)
    s.set_int(10)
    assert s.value() == [9, 10]


@pytest.mark.parametrize("cls, items", [
    (IntSlice, (1, -2, 3)),
    (Int64Slice, (2**62, -5)),
    (Float64Slice, (0.1, 1e21, 1e-7, -2.5, 3.0)),
    (StringSlice, ("a,b", "<x>&y", "ünï")),
])
def test_serialize_round_trip(cls, items):
    original = cls(*items)
    text = original.serialize()
    assert text.startswith(SERIALIZE_PREFIX)
    restored = cls(99) if cls is not StringSlice else cls("old")
    restored.set(text)
    assert restored.value() == list(items)
    assert restored.has_been_set


def test_malformed_serialized_payload_is_ignored():
    s = IntSlice(1)
    s.set(SERIALIZE_PREFIX + "not json")
    assert s.value() == []


def test_clone_is_independent():
    s = IntSlice(1, 2)
    s.set("3")
    copy = s.clone()
    copy.set("4")
    assert s.value() == [3]
    assert copy.value() == [3, 4]
    assert copy.has_been_set


def test_int_slice_str():
    assert str(IntSlice(1, 2)) == "[]int{1, 2}"
    assert str(Int64Slice(1, 2)) == "[]int64{1, 2}"


def test_float_slice_str():
    assert str(Float64Slice(1.5, 2.0)) == "[]float64{1.5, 2}"


def test_string_slice_str():
    assert str(StringSlice("a", "b")) == "[a b]"


def test_float_slice_parses_and_trims():
    f = Float64Slice(9.0)
    f.set("1.5, 2.25")
    assert f.value() == [1.5, 2.25]


def test_float_slice_rejects_invalid():
    with pytest.raises(ValueError):
        Float64Slice().set("nope")
    with pytest.raises(ValueError):
        Float64Slice().set("1e999")


def test_string_slice_trims_parts():
    s = StringSlice("x")
    s.set(" a , b")
    assert s.value() == ["a", "b"]


def test_layout_conversion_rfc3339():
    assert go_layout_to_strftime("2006-01-02T15:04:05Z07:00") == "%Y-%m-%dT%H:%M:%S%z"


def test_timestamp_set_parses_with_layout():
    t = Timestamp()
    t.set_layout("2006-01-02T15:04:05")
    t.set("2022-03-04T05:06:07")
    assert t.value() == datetime(2022, 3, 4, 5, 6, 7, tzinfo=timezone.utc)
    assert t.has_been_set
    assert t.layout == "2006-01-02T15:04:05"


def test_timestamp_with_zone():
    t = Timestamp()
    t.set_layout("2006-01-02T15:04:05Z07:00")
    t.set("2022-01-01T10:00:00+02:00")
    assert t.value().utcoffset() == timedelta(hours=2)
    assert t.value().hour == 10


def test_timestamp_fractional_seconds():
    t = Timestamp()
    t.set_layout("2006-01-02 15:04:05.000")
    t.set("2022-01-01 00:00:01.250")
    assert t.value().microsecond == 250000


def test_timestamp_set_rejects_mismatch():
    t = Timestamp()
    t.set_layout("2006-01-02")
    with pytest.raises(ValueError):
        t.set("not a date")


def test_set_timestamp_only_first_time():
    first = datetime(2020, 1, 1)
    second = datetime(2021, 1, 1)
    t = Timestamp(datetime(2000, 1, 1))
    t.set_timestamp(first)
    t.set_timestamp(second)
    assert t.value() == first


def test_set_timestamp_ignored_after_parse():
    t = Timestamp()
    t.set_layout("2006-01-02")
    t.set("2022-05-06")
    t.set_timestamp(datetime(1999, 1, 1))
    assert t.value() == datetime(2022, 5, 6, tzinfo=timezone.utc)


def test_timestamp_str_round_trips_iso():
    moment = datetime(2022, 5, 6, 7, 8, 9, tzinfo=timezone.utc)
    assert datetime.fromisoformat(str(Timestamp(moment))) == moment