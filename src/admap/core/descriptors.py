"""GATT characteristic descriptor values, keyed by 16-bit UUID.

Descriptor encodings carry no length/tag header: the attribute value is the
whole byte string.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import ClassVar, TypeVar
from uuid import UUID

from admap.core.codec import decode_payload, encode_payload, normalize_field
from admap.core.errors import InvalidDataSize, LayoutError
from admap.core.fields import uuid_from_16bit
from admap.core.layout import Layout, default_layouts

D = TypeVar("D", bound="Descriptor")


def _bind_layout(cls: type[D]) -> type[D]:
    layout = default_layouts().descriptors.get(cls.__name__)
    if layout is None:
        raise LayoutError([f"no layout for descriptor {cls.__name__}"])
    names = [f.name for f in dataclasses.fields(cls)]
    expected = [fd.name for fd in layout.fields]
    if names != expected:
        raise LayoutError([f"{cls.__name__}: fields {names} do not match layout {expected}"])
    cls.layout = layout
    cls.uuid = uuid_from_16bit(layout.uuid)
    return cls


@dataclass(frozen=True)
class Descriptor:
    """Base class for one descriptor value."""

    uuid: ClassVar[UUID]
    layout: ClassVar[Layout]

    def __post_init__(self) -> None:
        for fd in self.layout.fields:
            value = normalize_field(fd, getattr(self, fd.name), type(self).__name__)
            object.__setattr__(self, fd.name, value)

    @classmethod
    def uuid_16bit(cls) -> int:
        return cls.layout.uuid

    @classmethod
    def from_bytes(cls: type[D], data: bytes, offset: int = 0) -> D:
        """Decode the descriptor value that starts at `offset`.

        Raises:
            InvalidDataSize: If a fixed-size value is not exactly its size,
                or a variable value is shorter than its fixed fields
            InvalidEncoding: If a text value is not valid UTF-8
            InvalidListSize: If a handle list has an odd byte count
        """
        data = bytes(data[offset:])
        if cls.layout.exact and len(data) != cls.layout.fixed_size:
            raise InvalidDataSize(
                f"Invalid data size :{len(data)} ({cls.__name__} is {cls.layout.fixed_size} bytes)",
                data,
            )
        return cls(**decode_payload(cls.layout, data))

    def to_bytes(self) -> bytes:
        return encode_payload(self.layout, self)

    def __bytes__(self) -> bytes:
        return self.to_bytes()


RELIABLE_WRITE = 0b0000_0000_0000_0001
WRITABLE_AUXILIARIES = 0b0000_0000_0000_0010


@_bind_layout
@dataclass(frozen=True)
class CharacteristicExtendedProperties(Descriptor):
    """Characteristic Extended Properties (0x2900)."""

    properties: int

    def is_reliable_write(self) -> bool:
        return bool(self.properties & RELIABLE_WRITE)

    def is_writable_auxiliaries(self) -> bool:
        return bool(self.properties & WRITABLE_AUXILIARIES)


@_bind_layout
@dataclass(frozen=True)
class CharacteristicUserDescription(Descriptor):
    description: str


NOTIFICATION = 0b0000_0000_0000_0001
INDICATION = 0b0000_0000_0000_0010


@_bind_layout
@dataclass(frozen=True)
class ClientCharacteristicConfiguration(Descriptor):
    """Client Characteristic Configuration (0x2902)."""

    configuration: int

    def is_notification(self) -> bool:
        return bool(self.configuration & NOTIFICATION)

    def is_indication(self) -> bool:
        return bool(self.configuration & INDICATION)


BROADCAST = 0b0000_0000_0000_0001


@_bind_layout
@dataclass(frozen=True)
class ServerCharacteristicConfiguration(Descriptor):
    configuration: int

    def is_broadcast(self) -> bool:
        return bool(self.configuration & BROADCAST)


# Namespace value for the Bluetooth SIG Assigned Numbers
NAME_SPACE_BLUETOOTH_SIG = 0x01


@_bind_layout
@dataclass(frozen=True)
class CharacteristicPresentationFormat(Descriptor):
    """Characteristic Presentation Format (0x2904).

    `exponent` scales the characteristic value: actual = value * 10**exponent.
    """

    format: int
    exponent: int
    unit: int
    name_space: int
    description: int

    def scale(self, value: int) -> float:
        return value * 10.0**self.exponent


@_bind_layout
@dataclass(frozen=True)
class CharacteristicAggregateFormat(Descriptor):
    """Characteristic Aggregate Format (0x2905): handles of presentation format descriptors."""

    list_of_attribute_handles: tuple[int, ...] = ()


ALL_DESCRIPTORS: tuple[type[Descriptor], ...] = (
    CharacteristicExtendedProperties,
    CharacteristicUserDescription,
    ClientCharacteristicConfiguration,
    ServerCharacteristicConfiguration,
    CharacteristicPresentationFormat,
    CharacteristicAggregateFormat,
)
