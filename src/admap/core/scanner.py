"""Walk an advertising payload as a stream of length-tag-value records."""

from __future__ import annotations

import logging
from typing import Iterable

from admap.core.data_types import DataType
from admap.core.errors import CodecError, InvalidDataSize, UnsupportedTag
from admap.core.outcome import ParseOutcome, ParseResults
from admap.core.registry import lookup, lookup_descriptor

logger = logging.getLogger(__name__)


def _decode_record(record: bytes, offset: int) -> ParseOutcome:
    tag = record[1]
    cls = lookup(tag)
    if cls is None:
        logger.debug(f"Unsupported tag {tag:#04x} at offset {offset:#x}")
        error = UnsupportedTag(f"Unsupported tag {tag:#04x}", record, tag=tag)
        return ParseOutcome(error=error, raw=record, offset=offset, tag=tag)
    try:
        value = cls.from_bytes(record)
    except CodecError as e:
        logger.debug(f"{cls.__name__} at offset {offset:#x}: {e}")
        return ParseOutcome(error=e, raw=record, offset=offset, tag=tag)
    return ParseOutcome(value=value, raw=record, offset=offset, tag=tag)


def parse_advertising_data(payload: bytes) -> ParseResults:
    """Decode every record in an AD/EIR/SRD payload.

    Scanning stops at a zero length byte (the rest is padding) or at a length
    that runs past the end of the payload; the latter is reported as an
    InvalidDataSize outcome. Every other failure is recorded and the scan
    continues with the next record.
    """
    payload = bytes(payload)
    outcomes: list[ParseOutcome] = []
    offset = 0
    size = len(payload)

    while offset < size:
        length = payload[offset]
        if length == 0:
            logger.debug(f"Zero length at offset {offset:#x}, stopping")
            break

        if offset + 1 + length > size:
            remaining = payload[offset:]
            logger.debug(
                f"Record extends beyond end at offset {offset:#x}: "
                f"need {1 + length}, have {size - offset}"
            )
            error = InvalidDataSize(
                f"Invalid data size :{size - offset} (length byte claims {length})", remaining
            )
            tag = remaining[1] if len(remaining) >= 2 else None
            outcomes.append(ParseOutcome(error=error, raw=remaining, offset=offset, tag=tag))
            break

        record = payload[offset : offset + 1 + length]
        outcomes.append(_decode_record(record, offset))
        offset += 1 + length

    return ParseResults(tuple(outcomes))


def split_records(payload: bytes) -> list[bytes]:
    """Frame a payload into records without decoding them.

    A trailing record whose length overruns the payload is returned as the
    remaining bytes.
    """
    payload = bytes(payload)
    records: list[bytes] = []
    offset = 0
    while offset < len(payload):
        length = payload[offset]
        if length == 0:
            break
        records.append(payload[offset : offset + 1 + length])
        offset += 1 + length
    return records


def parse_record(record: bytes, offset: int = 0) -> ParseOutcome:
    """Classify and decode one pre-sliced record."""
    record = bytes(record)
    if len(record) < 2:
        error = InvalidDataSize(f"Invalid data size :{len(record)}", record)
        return ParseOutcome(error=error, raw=record, offset=offset)
    return _decode_record(record, offset)


def parse_records(records: Iterable[bytes]) -> ParseResults:
    """Decode records that were already split, one outcome per element."""
    outcomes = []
    offset = 0
    for record in records:
        record = bytes(record)
        outcomes.append(parse_record(record, offset))
        offset += len(record)
    return ParseResults(tuple(outcomes))


def parse_descriptor(uuid16: int, value: bytes) -> ParseOutcome:
    """Decode a descriptor value by its 16-bit UUID."""
    value = bytes(value)
    cls = lookup_descriptor(uuid16)
    if cls is None:
        logger.debug(f"Unsupported descriptor UUID {uuid16:#06x}")
        error = UnsupportedTag(f"Unsupported descriptor UUID {uuid16:#06x}", value, tag=uuid16)
        return ParseOutcome(error=error, raw=value, tag=uuid16)
    try:
        decoded = cls.from_bytes(value)
    except CodecError as e:
        logger.debug(f"{cls.__name__}: {e}")
        return ParseOutcome(error=e, raw=value, tag=uuid16)
    return ParseOutcome(value=decoded, raw=value, tag=uuid16)


def encode_advertising_data(values: Iterable[DataType]) -> bytes:
    """Concatenate the encodings of `values` in order."""
    return b"".join(v.to_bytes() for v in values)
