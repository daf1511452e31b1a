"""Error kinds raised by the field primitives and record codecs."""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Category of a codec failure."""

    INSUFFICIENT_BYTES = "insufficient_bytes"
    INVALID_DATA_SIZE = "invalid_data_size"
    INVALID_ENCODING = "invalid_encoding"
    INVALID_LIST_SIZE = "invalid_list_size"
    UNSUPPORTED_TAG = "unsupported_tag"


class CodecError(ValueError):
    """Base class for decode failures.

    Carries the offending bytes so callers can fall back to their own handling.
    """

    kind: ErrorKind

    def __init__(self, message: str, data: bytes = b"") -> None:
        super().__init__(message)
        self.message = message
        self.data = bytes(data)


class InsufficientBytes(CodecError):
    """A fixed-width field was given fewer bytes than its width."""

    kind = ErrorKind.INSUFFICIENT_BYTES


class InvalidDataSize(CodecError):
    """Declared or required size does not fit the available bytes."""

    kind = ErrorKind.INVALID_DATA_SIZE


class InvalidEncoding(CodecError):
    """Text field is not valid UTF-8."""

    kind = ErrorKind.INVALID_ENCODING


class InvalidListSize(CodecError):
    """List payload is not a multiple of its element width."""

    kind = ErrorKind.INVALID_LIST_SIZE


class UnsupportedTag(CodecError):
    """No codec is registered for the observed tag or UUID."""

    kind = ErrorKind.UNSUPPORTED_TAG

    def __init__(self, message: str, data: bytes = b"", tag: int | None = None) -> None:
        super().__init__(message, data)
        self.tag = tag


class LayoutError(Exception):
    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = errors
