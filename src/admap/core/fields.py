"""Fixed-width field primitives: little-endian integers, UTF-8 text, UUIDs, bit vectors."""

from __future__ import annotations

import uuid
from typing import Iterable

from admap.core.errors import InsufficientBytes, InvalidEncoding

# Wire width in bytes for each integer field type
INT_SIZES = {
    "u8": 1,
    "i8": 1,
    "u16": 2,
    "u24": 3,
    "u32": 4,
    "u48": 6,
    "u64": 8,
    "u128": 16,
}

UUID_SIZES = {
    "uuid16": 2,
    "uuid32": 4,
    "uuid128": 16,
}

# Bluetooth Base UUID; 16- and 32-bit UUIDs are aliases inside it.
BASE_UUID = uuid.UUID("00000000-0000-1000-8000-00805F9B34FB")


def _window(data: bytes, offset: int, width: int, type_name: str) -> bytes:
    if offset < 0 or offset + width > len(data):
        have = max(0, len(data) - max(offset, 0))
        raise InsufficientBytes(
            f"{type_name} needs {width} bytes at offset {offset}, have {have}",
            bytes(data[max(offset, 0):]),
        )
    return bytes(data[offset : offset + width])


def decode_int(data: bytes, type_name: str, offset: int = 0) -> int:
    """Decode a little-endian integer field.

    Args:
        data: Source bytes
        type_name: One of the INT_SIZES keys (u8, i8, u16, ...)
        offset: Position of the field in `data`

    Returns:
        Decoded integer value

    Raises:
        InsufficientBytes: If fewer than the field width remain at `offset`
        ValueError: If type_name is not a supported integer type
    """
    if type_name not in INT_SIZES:
        raise ValueError(f"Unsupported integer type: {type_name}")
    width = INT_SIZES[type_name]
    window = _window(data, offset, width, type_name)
    return int.from_bytes(window, byteorder="little", signed=type_name.startswith("i"))


def encode_int(value: int, type_name: str) -> bytes:
    """Encode an integer as exactly the field width, little-endian.

    Values are masked to the field width so encoding never fails.
    """
    if type_name not in INT_SIZES:
        raise ValueError(f"Unsupported integer type: {type_name}")
    width = INT_SIZES[type_name]
    mask = (1 << (width * 8)) - 1
    return (int(value) & mask).to_bytes(width, byteorder="little", signed=False)


def decode_u8(data: bytes, offset: int = 0) -> int:
    return decode_int(data, "u8", offset)


def decode_i8(data: bytes, offset: int = 0) -> int:
    return decode_int(data, "i8", offset)


def decode_u16(data: bytes, offset: int = 0) -> int:
    return decode_int(data, "u16", offset)


def decode_u24(data: bytes, offset: int = 0) -> int:
    return decode_int(data, "u24", offset)


def decode_u32(data: bytes, offset: int = 0) -> int:
    return decode_int(data, "u32", offset)


def decode_u48(data: bytes, offset: int = 0) -> int:
    return decode_int(data, "u48", offset)


def decode_u64(data: bytes, offset: int = 0) -> int:
    return decode_int(data, "u64", offset)


def decode_u128(data: bytes, offset: int = 0) -> int:
    return decode_int(data, "u128", offset)


def encode_u8(value: int) -> bytes:
    return encode_int(value, "u8")


def encode_i8(value: int) -> bytes:
    return encode_int(value, "i8")


def encode_u16(value: int) -> bytes:
    return encode_int(value, "u16")


def encode_u24(value: int) -> bytes:
    return encode_int(value, "u24")


def encode_u32(value: int) -> bytes:
    return encode_int(value, "u32")


def encode_u48(value: int) -> bytes:
    return encode_int(value, "u48")


def encode_u64(value: int) -> bytes:
    return encode_int(value, "u64")


def encode_u128(value: int) -> bytes:
    return encode_int(value, "u128")


def decode_utf8(data: bytes) -> str:
    """Decode UTF-8 text, raising InvalidEncoding instead of UnicodeDecodeError."""
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidEncoding(f"Invalid UTF-8 at byte {e.start}: {e.reason}", bytes(data)) from None


def encode_utf8(text: str) -> bytes:
    return text.encode("utf-8")


def uuid_from_16bit(value: int) -> uuid.UUID:
    """Expand a 16-bit UUID alias into the Bluetooth Base UUID."""
    return uuid.UUID(int=BASE_UUID.int | ((value & 0xFFFF) << 96))


def uuid_from_32bit(value: int) -> uuid.UUID:
    """Expand a 32-bit UUID alias into the Bluetooth Base UUID."""
    return uuid.UUID(int=BASE_UUID.int | ((value & 0xFFFFFFFF) << 96))


def decode_uuid(data: bytes, width: int, offset: int = 0) -> uuid.UUID:
    """Decode a 2-, 4- or 16-byte little-endian UUID."""
    window = _window(data, offset, width, f"uuid{width * 8}")
    if width == 16:
        return uuid.UUID(bytes=window[::-1])
    if width in (2, 4):
        return uuid.UUID(int=BASE_UUID.int | (int.from_bytes(window, "little") << 96))
    raise ValueError(f"Unsupported UUID width: {width}")


def encode_uuid(value: uuid.UUID, width: int) -> bytes:
    """Encode a UUID in its 2-, 4- or 16-byte little-endian wire form.

    For the short forms only the alias bits (bits 96..127) are written.
    """
    if width == 16:
        return value.bytes[::-1]
    if width in (2, 4):
        alias = value.int >> 96
        return (alias & ((1 << (width * 8)) - 1)).to_bytes(width, "little")
    raise ValueError(f"Unsupported UUID width: {width}")


def bits_from_bytes(data: bytes) -> tuple[bool, ...]:
    """Expand bytes into booleans, least significant bit of each byte first."""
    return tuple(bool(b & (1 << i)) for b in data for i in range(8))


def bytes_from_bits(bits: Iterable[bool], width: int | None = None) -> bytes:
    """Pack booleans (LSB first) into bytes.

    `width` pads or truncates the result to a fixed byte count.
    """
    bits = list(bits)
    size = (len(bits) + 7) // 8 if width is None else width
    out = bytearray(size)
    for i, bit in enumerate(bits[: size * 8]):
        if bit:
            out[i // 8] |= 1 << (i % 8)
    return bytes(out)


def pad_bits(bits: Iterable[bool], width: int | None = None) -> tuple[bool, ...]:
    """Normalize a bit vector to whole bytes (or exactly `width` bytes)."""
    return bits_from_bytes(bytes_from_bits(bits, width))
