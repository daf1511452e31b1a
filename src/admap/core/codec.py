"""Interpreter that decodes and encodes payloads from a wire layout."""

from __future__ import annotations

import uuid
from typing import Any, Mapping

from admap.core.errors import InvalidDataSize, InvalidListSize
from admap.core.fields import (
    BASE_UUID,
    INT_SIZES,
    UUID_SIZES,
    bits_from_bytes,
    bytes_from_bits,
    decode_int,
    decode_utf8,
    decode_uuid,
    encode_int,
    encode_utf8,
    encode_uuid,
    pad_bits,
    uuid_from_16bit,
    uuid_from_32bit,
)
from admap.core.layout import FieldDef, Layout


def _decode_scalar(type_name: str, data: bytes) -> Any:
    if type_name in INT_SIZES:
        return decode_int(data, type_name)
    return decode_uuid(data, UUID_SIZES[type_name])


def _encode_scalar(type_name: str, value: Any) -> bytes:
    if type_name in INT_SIZES:
        return encode_int(value, type_name)
    return encode_uuid(value, UUID_SIZES[type_name])


def _decode_field(fd: FieldDef, data: bytes) -> Any:
    if fd.type in INT_SIZES or fd.type in UUID_SIZES:
        return _decode_scalar(fd.type, data)
    if fd.type == "bytes":
        return bytes(data)
    if fd.type == "bits":
        return bits_from_bytes(data)
    if fd.type == "utf8":
        return decode_utf8(data)
    if fd.type == "list":
        width = fd.element_size
        if len(data) % width != 0:
            raise InvalidListSize(
                f"Invalid list size :{len(data)} (not a multiple of {width})", data
            )
        return tuple(
            _decode_scalar(fd.element, data[i : i + width]) for i in range(0, len(data), width)
        )
    raise ValueError(f"Unsupported field type: {fd.type}")


def _encode_field(fd: FieldDef, value: Any) -> bytes:
    if fd.type in INT_SIZES or fd.type in UUID_SIZES:
        return _encode_scalar(fd.type, value)
    if fd.type == "bytes":
        return bytes(value)
    if fd.type == "bits":
        return bytes_from_bits(value, fd.length)
    if fd.type == "utf8":
        return encode_utf8(value)
    if fd.type == "list":
        return b"".join(_encode_scalar(fd.element, v) for v in value)
    raise ValueError(f"Unsupported field type: {fd.type}")


def decode_payload(layout: Layout, payload: bytes) -> dict[str, Any]:
    """Decode a value-only payload into a field mapping.

    Fixed fields before the variable tail are read from the front, fixed
    fields after it from the back; the tail gets whatever is in between.

    Raises:
        InvalidDataSize: If the payload is shorter than the fixed fields
        InvalidListSize: If a list tail is not a multiple of its element width
        InvalidEncoding: If a text tail is not valid UTF-8
    """
    payload = bytes(payload)
    fixed = layout.fixed_size
    if len(payload) < fixed:
        raise InvalidDataSize(
            f"Invalid data size :{len(payload)} ({layout.name} needs at least {fixed})", payload
        )
    tail_size = len(payload) - fixed

    values: dict[str, Any] = {}
    pos = 0
    for fd in layout.fields:
        size = fd.size if fd.size is not None else tail_size
        values[fd.name] = _decode_field(fd, payload[pos : pos + size])
        pos += size
    return values


def encode_payload(layout: Layout, values: Mapping[str, Any] | Any) -> bytes:
    """Encode field values (a mapping or an object with matching attributes)."""
    out = bytearray()
    for fd in layout.fields:
        if isinstance(values, Mapping):
            value = values[fd.name]
        else:
            value = getattr(values, fd.name)
        out += _encode_field(fd, value)
    return bytes(out)


def _coerce_uuid(owner: str, type_name: str, value: Any) -> uuid.UUID:
    if isinstance(value, bool):
        raise TypeError(f"{owner}: {type_name} expects a UUID, got bool")
    if isinstance(value, int) and type_name == "uuid128":
        if not 0 <= value < (1 << 128):
            raise ValueError(f"{owner}: {value} out of range for {type_name}")
        return uuid.UUID(int=value)
    limit = (1 << (UUID_SIZES[type_name] * 8)) - 1
    if isinstance(value, int):
        if not 0 <= value <= limit:
            raise ValueError(f"{owner}: {value:#x} out of range for {type_name}")
        return uuid_from_16bit(value) if type_name == "uuid16" else uuid_from_32bit(value)
    if isinstance(value, str):
        value = uuid.UUID(value)
    elif not isinstance(value, uuid.UUID):
        raise TypeError(f"{owner}: {type_name} expects a UUID, got {type(value).__name__}")

    if type_name != "uuid128":
        # Short forms can only carry the alias bits of a Base UUID
        if value.int & ~(0xFFFFFFFF << 96) != BASE_UUID.int:
            raise ValueError(f"{owner}: {value} is not based on the Bluetooth Base UUID")
        if value.int >> 96 > limit:
            raise ValueError(f"{owner}: {value} does not fit in {type_name}")
    return value


def _coerce_scalar(owner: str, type_name: str, value: Any) -> Any:
    if type_name in UUID_SIZES:
        return _coerce_uuid(owner, type_name, value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{owner}: {type_name} expects an int, got {type(value).__name__}")
    bits = INT_SIZES[type_name] * 8
    if type_name.startswith("i"):
        lo, hi = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    else:
        lo, hi = 0, (1 << bits) - 1
    if not lo <= value <= hi:
        raise ValueError(f"{owner}: {value} out of range for {type_name}")
    return value


def normalize_field(fd: FieldDef, value: Any, owner: str = "") -> Any:
    """Coerce a constructor argument to the canonical in-memory form.

    Lists and bit vectors become tuples, bit vectors are padded to whole
    bytes, short UUIDs may be given as ints.

    Raises:
        ValueError: If a value does not fit its wire field
    """
    owner = f"{owner}.{fd.name}" if owner else fd.name
    if fd.type in INT_SIZES or fd.type in UUID_SIZES:
        return _coerce_scalar(owner, fd.type, value)
    if fd.type == "bytes":
        if isinstance(value, int):
            raise TypeError(f"{owner}: expected bytes, got {type(value).__name__}")
        value = bytes(value)
        if fd.length is not None and len(value) != fd.length:
            raise ValueError(f"{owner}: expected {fd.length} bytes, got {len(value)}")
        return value
    if fd.type == "bits":
        return pad_bits(value, fd.length)
    if fd.type == "utf8":
        if not isinstance(value, str):
            raise TypeError(f"{owner}: expected str, got {type(value).__name__}")
        return value
    if fd.type == "list":
        return tuple(_coerce_scalar(owner, fd.element, v) for v in value)
    raise ValueError(f"Unsupported field type: {fd.type}")
