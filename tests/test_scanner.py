from __future__ import annotations

import logging

import pytest
from samples import SAMPLES

from admap.core import data_types as dt
from admap.core import descriptors as ds
from admap.core.errors import ErrorKind, InvalidDataSize, UnsupportedTag
from admap.core.scanner import (
    encode_advertising_data,
    parse_advertising_data,
    parse_descriptor,
    parse_record,
    parse_records,
    split_records,
)

FLAGS = bytes([2, 0x01, 0x06])
NAME = bytes([4, 0x08]) + b"foo"


def test_scan_every_type_in_order() -> None:
    payload = encode_advertising_data(SAMPLES)
    results = parse_advertising_data(payload)
    assert results.ok
    assert len(results) == len(SAMPLES)
    assert results.values() == SAMPLES

    offset = 0
    for outcome, value in zip(results, SAMPLES):
        assert outcome.offset == offset
        assert outcome.tag == value.tag
        assert outcome.raw == bytes(value)
        offset += len(outcome.raw)


def test_empty_payload() -> None:
    results = parse_advertising_data(b"")
    assert len(results) == 0
    assert results.ok


def test_zero_length_terminates() -> None:
    results = parse_advertising_data(FLAGS + b"\x00\xff\xff\xff")
    assert len(results) == 1
    assert results[0].is_type(dt.Flags)


def test_unknown_tag_keeps_raw_bytes() -> None:
    unknown = bytes([3, 0x99, 0x01, 0x02])
    results = parse_advertising_data(unknown + FLAGS)
    assert len(results) == 2

    first = results[0]
    assert not first.ok
    assert first.unsupported
    assert isinstance(first.error, UnsupportedTag)
    assert first.error.tag == 0x99
    assert first.error.data == unknown
    assert first.raw == unknown
    assert first.tag == 0x99

    assert results[1].ok and results[1].offset == 4


def test_overrun_stops_scan() -> None:
    results = parse_advertising_data(FLAGS + bytes([5, 0x09]) + b"a")
    assert len(results) == 2
    last = results[1]
    assert isinstance(last.error, InvalidDataSize)
    assert last.raw == bytes([5, 0x09]) + b"a"
    assert last.offset == 3
    assert last.tag == 0x09

    # Only the length byte is left: no tag to report
    cut = parse_advertising_data(FLAGS + b"\x05")
    assert isinstance(cut[1].error, InvalidDataSize)
    assert cut[1].tag is None


def test_failure_does_not_stop_scan() -> None:
    short_appearance = bytes([2, 0x19, 0x40])
    bad_name = bytes([3, 0x09, 0xFF, 0xFE])
    results = parse_advertising_data(short_appearance + bad_name + FLAGS)
    assert [o.ok for o in results] == [False, False, True]
    assert results[0].error.kind is ErrorKind.INVALID_DATA_SIZE
    assert results[1].error.kind is ErrorKind.INVALID_ENCODING
    assert not results.ok
    assert len(results.failures()) == 2


@pytest.mark.parametrize("value", SAMPLES, ids=lambda v: type(v).__name__)
def test_truncation_never_raises(value: dt.DataType) -> None:
    data = bytes(value)
    for cut in range(len(data)):
        results = parse_advertising_data(data[:cut])
        if cut == 0:
            assert len(results) == 0
        else:
            assert len(results) == 1
            assert results[0].error.kind is ErrorKind.INVALID_DATA_SIZE


def test_result_helpers() -> None:
    results = parse_advertising_data(FLAGS + bytes([2, 0x99, 0x00]) + NAME)
    assert results.of_type(dt.ShortenedLocalName) == [dt.ShortenedLocalName("foo")]
    assert results.first(dt.Flags) == dt.Flags.from_bytes(FLAGS)
    assert results.first(dt.CompleteLocalName) is None
    assert len(results.values()) == 2
    assert results[-1].unwrap().shortened_local_name == "foo"
    with pytest.raises(UnsupportedTag):
        results[1].unwrap()
    assert [o.offset for o in results[:2]] == [0, 3]


def test_split_records() -> None:
    assert split_records(FLAGS + NAME + b"\x00\x00") == [FLAGS, NAME]
    assert split_records(FLAGS + b"\x09\x08ab") == [FLAGS, b"\x09\x08ab"]


def test_parse_record() -> None:
    assert parse_record(NAME).value == dt.ShortenedLocalName("foo")
    for record in (b"", b"\x01"):
        outcome = parse_record(record)
        assert isinstance(outcome.error, InvalidDataSize)
    assert parse_record(bytes([1, 0x99])).unsupported


def test_parse_records() -> None:
    results = parse_records([FLAGS, NAME, b"\x01"])
    assert len(results) == 3
    assert [o.offset for o in results] == [0, 3, 8]
    assert results[0].ok and results[1].ok
    assert not results[2].ok


def test_parse_descriptor() -> None:
    outcome = parse_descriptor(0x2902, b"\x01\x00")
    assert outcome.ok
    assert outcome.value == ds.ClientCharacteristicConfiguration(1)
    assert outcome.value.is_notification()

    short = parse_descriptor(0x2902, b"\x01")
    assert isinstance(short.error, InvalidDataSize)

    unknown = parse_descriptor(0x2A00, b"\x01")
    assert unknown.unsupported
    assert unknown.raw == b"\x01"


def test_encode_advertising_data() -> None:
    values = [dt.Flags((False, True, True)), dt.ShortenedLocalName("foo")]
    assert encode_advertising_data(values) == FLAGS + NAME
    assert encode_advertising_data([]) == b""


def test_failures_logged_with_offset(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="admap.core.scanner"):
        parse_advertising_data(FLAGS + bytes([1, 0x99]) + bytes([9, 0x09]))
    messages = [r.getMessage() for r in caplog.records]
    assert any("Unsupported tag 0x99 at offset 0x3" in m for m in messages)
    assert any("offset 0x5" in m for m in messages)
