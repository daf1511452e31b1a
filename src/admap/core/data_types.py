"""Typed values for the EIR/AD/SRD/ACAD/OOB data types.

See "Supplement to the Bluetooth Core Specification", Part A, and
"Assigned Numbers", 2.3 Common Data Types.

Every class is a frozen dataclass whose wire layout comes from
``layouts.yaml``. Decoding keeps the wire length byte verbatim; constructing
a value fresh computes it from the encoded payload.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeVar
from uuid import UUID

from admap.core.codec import decode_payload, encode_payload, normalize_field
from admap.core.errors import InvalidDataSize, LayoutError
from admap.core.fields import (
    decode_int,
    decode_utf8,
    encode_int,
    encode_utf8,
)
from admap.core.layout import Layout, default_layouts

# Header is the length byte plus the tag byte
HEADER_SIZE = 2
MAX_LENGTH = 0xFF

T = TypeVar("T", bound="DataType")


def _bind_layout(cls: type[T]) -> type[T]:
    """Attach the class's layout and tag, checking fields against the table."""
    layout = default_layouts().data_types.get(cls.__name__)
    if layout is None:
        raise LayoutError([f"no layout for data type {cls.__name__}"])
    if not layout.custom:
        names = [f.name for f in dataclasses.fields(cls) if f.name != "length"]
        expected = [fd.name for fd in layout.fields]
        if names != expected:
            raise LayoutError([f"{cls.__name__}: fields {names} do not match layout {expected}"])
    cls.layout = layout
    cls.tag = layout.tag
    return cls


@dataclass(frozen=True)
class DataType:
    """Base class for one length-tag-value record."""

    length: int | None = field(default=None, kw_only=True)

    tag: ClassVar[int]
    layout: ClassVar[Layout]

    def __post_init__(self) -> None:
        self._normalize()
        if self.length is None:
            size = len(self._encode_payload()) + 1
            if size > MAX_LENGTH:
                raise ValueError(
                    f"{type(self).__name__}: payload of {size - 1} bytes exceeds a one-byte length"
                )
            object.__setattr__(self, "length", size)
        elif not 0 <= self.length <= MAX_LENGTH:
            raise ValueError(f"{type(self).__name__}: length {self.length} out of range")

    @classmethod
    def data_type(cls) -> int:
        return cls.tag

    # Hooks; custom codecs override these
    def _normalize(self) -> None:
        for fd in self.layout.fields:
            value = normalize_field(fd, getattr(self, fd.name), type(self).__name__)
            object.__setattr__(self, fd.name, value)

    def _encode_payload(self) -> bytes:
        return encode_payload(self.layout, self)

    @classmethod
    def _decode_payload(cls, payload: bytes, length: int) -> dict[str, Any]:
        return decode_payload(cls.layout, payload)

    @classmethod
    def _min_payload_size(cls) -> int:
        return cls.layout.fixed_size

    @classmethod
    def _payload_window(cls, record: bytes, length: int) -> bytes:
        # Fixed-width layouts read a fixed window whatever the length byte says
        if cls.layout.tail is None and not cls.layout.custom:
            return record[HEADER_SIZE : HEADER_SIZE + cls.layout.fixed_size]
        return record[HEADER_SIZE : 1 + length]

    @classmethod
    def from_bytes(cls: type[T], data: bytes, offset: int = 0) -> T:
        """Decode the record that starts at `offset`.

        Raises:
            InvalidDataSize: If the data is shorter than the header plus the
                fixed fields, or shorter than the wire length byte implies
            InvalidEncoding: If a text field is not valid UTF-8
            InvalidListSize: If a list payload is not a multiple of its element width
        """
        record = bytes(data[offset:])
        need = HEADER_SIZE + cls._min_payload_size()
        if len(record) < need:
            raise InvalidDataSize(f"Invalid data size :{len(record)}", record)
        length = record[0]
        if len(record) < 1 + length:
            raise InvalidDataSize(
                f"Invalid data size :{len(record)} (length byte claims {length})", record
            )
        values = cls._decode_payload(cls._payload_window(record, length), length)
        return cls(**values, length=length)

    def to_bytes(self) -> bytes:
        return bytes([self.length, self.tag]) + self._encode_payload()

    def __bytes__(self) -> bytes:
        return self.to_bytes()


# -----------------------------------------------------------------------------
# Flags and names
# -----------------------------------------------------------------------------
LE_LIMITED_DISCOVERABLE_MODE = 0
LE_GENERAL_DISCOVERABLE_MODE = 1
BR_EDR_NOT_SUPPORTED = 2
SIMULTANEOUS_LE_AND_BR_EDR_CONTROLLER = 3


@_bind_layout
@dataclass(frozen=True)
class Flags(DataType):
    """Flags (0x01). Bit vector, least significant bit of the first byte first."""

    flags: tuple[bool, ...] = ()

    def _bit(self, index: int) -> bool:
        return index < len(self.flags) and self.flags[index]

    def is_le_limited_discoverable_mode(self) -> bool:
        return self._bit(LE_LIMITED_DISCOVERABLE_MODE)

    def is_le_general_discoverable_mode(self) -> bool:
        return self._bit(LE_GENERAL_DISCOVERABLE_MODE)

    def is_br_edr_not_supported(self) -> bool:
        return self._bit(BR_EDR_NOT_SUPPORTED)

    def is_simultaneous_controller(self) -> bool:
        return self._bit(SIMULTANEOUS_LE_AND_BR_EDR_CONTROLLER)


@_bind_layout
@dataclass(frozen=True)
class ShortenedLocalName(DataType):
    shortened_local_name: str


@_bind_layout
@dataclass(frozen=True)
class CompleteLocalName(DataType):
    complete_local_name: str


# -----------------------------------------------------------------------------
# Service UUID lists
# -----------------------------------------------------------------------------
@_bind_layout
@dataclass(frozen=True)
class IncompleteListOf16BitServiceUuids(DataType):
    uuids: tuple[UUID, ...] = ()


@_bind_layout
@dataclass(frozen=True)
class CompleteListOf16BitServiceUuids(DataType):
    uuids: tuple[UUID, ...] = ()


@_bind_layout
@dataclass(frozen=True)
class IncompleteListOf32BitServiceUuids(DataType):
    uuids: tuple[UUID, ...] = ()


@_bind_layout
@dataclass(frozen=True)
class CompleteListOf32BitServiceUuids(DataType):
    uuids: tuple[UUID, ...] = ()


@_bind_layout
@dataclass(frozen=True)
class IncompleteListOf128BitServiceUuids(DataType):
    uuids: tuple[UUID, ...] = ()


@_bind_layout
@dataclass(frozen=True)
class CompleteListOf128BitServiceUuids(DataType):
    uuids: tuple[UUID, ...] = ()


@_bind_layout
@dataclass(frozen=True)
class ListOf16BitServiceSolicitationUuids(DataType):
    uuids: tuple[UUID, ...] = ()


@_bind_layout
@dataclass(frozen=True)
class ListOf32BitServiceSolicitationUuids(DataType):
    uuids: tuple[UUID, ...] = ()


@_bind_layout
@dataclass(frozen=True)
class ListOf128BitServiceSolicitationUuids(DataType):
    uuids: tuple[UUID, ...] = ()


# -----------------------------------------------------------------------------
# Service data and manufacturer data
# -----------------------------------------------------------------------------
@_bind_layout
@dataclass(frozen=True)
class ServiceData16BitUuid(DataType):
    uuid: UUID
    additional_service_data: bytes = b""


@_bind_layout
@dataclass(frozen=True)
class ServiceData32BitUuid(DataType):
    uuid: UUID
    additional_service_data: bytes = b""


@_bind_layout
@dataclass(frozen=True)
class ServiceData128BitUuid(DataType):
    uuid: UUID
    additional_service_data: bytes = b""


@_bind_layout
@dataclass(frozen=True)
class ManufacturerSpecificData(DataType):
    """Manufacturer Specific Data (0xFF): company identifier then opaque bytes."""

    company_identifier: int
    manufacturer_specific_data: bytes = b""


# -----------------------------------------------------------------------------
# Device properties
# -----------------------------------------------------------------------------
@_bind_layout
@dataclass(frozen=True)
class TxPowerLevel(DataType):
    """Tx Power Level (0x0A) in dBm, -127..127."""

    tx_power_level: int


CLASS_OF_DEVICE_MAJOR_SERVICE_CLASSES_MASK = 0b11111111_11100000_00000000
CLASS_OF_DEVICE_MAJOR_DEVICE_CLASS_MASK = 0b00000000_00011111_00000000
CLASS_OF_DEVICE_MINOR_DEVICE_CLASS_MASK = 0b00000000_00000000_11111100


@_bind_layout
@dataclass(frozen=True)
class ClassOfDevice(DataType):
    """Class of Device (0x0D), 24 bits."""

    class_of_device: int

    def major_service_classes(self) -> int:
        return self.class_of_device & CLASS_OF_DEVICE_MAJOR_SERVICE_CLASSES_MASK

    def major_device_class(self) -> int:
        return self.class_of_device & CLASS_OF_DEVICE_MAJOR_DEVICE_CLASS_MASK

    def minor_device_class(self) -> int:
        return self.class_of_device & CLASS_OF_DEVICE_MINOR_DEVICE_CLASS_MASK


@_bind_layout
@dataclass(frozen=True)
class Appearance(DataType):
    """Appearance (0x19): 10-bit category, 6-bit subcategory."""

    appearance: int

    @property
    def category(self) -> int:
        return self.appearance >> 6

    @property
    def subcategory(self) -> int:
        return self.appearance & 0x3F


ONLY_PERIPHERAL_ROLE_SUPPORTED = 0x00
ONLY_CENTRAL_ROLE_SUPPORTED = 0x01
PERIPHERAL_ROLE_PREFERRED_FOR_CONNECTION_ESTABLISHMENT = 0x02
CENTRAL_ROLE_PREFERRED_FOR_CONNECTION_ESTABLISHMENT = 0x03


@_bind_layout
@dataclass(frozen=True)
class LeRole(DataType):
    le_role: int

    def is_only_peripheral_role_supported(self) -> bool:
        return self.le_role == ONLY_PERIPHERAL_ROLE_SUPPORTED

    def is_only_central_role_supported(self) -> bool:
        return self.le_role == ONLY_CENTRAL_ROLE_SUPPORTED

    def is_peripheral_role_preferred_for_connection_establishment(self) -> bool:
        return self.le_role == PERIPHERAL_ROLE_PREFERRED_FOR_CONNECTION_ESTABLISHMENT

    def is_central_role_preferred_for_connection_establishment(self) -> bool:
        return self.le_role == CENTRAL_ROLE_PREFERRED_FOR_CONNECTION_ESTABLISHMENT


ADDRESS_TYPE_RANDOM = 0b0000_0001


@_bind_layout
@dataclass(frozen=True)
class LeBluetoothDeviceAddress(DataType):
    """LE Bluetooth Device Address (0x1B): 48-bit address plus address type byte."""

    le_bluetooth_device_address: int
    address_type: int = 0

    def is_random_address(self) -> bool:
        return bool(self.address_type & ADDRESS_TYPE_RANDOM)

    @property
    def address(self) -> str:
        raw = self.le_bluetooth_device_address.to_bytes(6, "big")
        return ":".join(f"{b:02X}" for b in raw)


@_bind_layout
@dataclass(frozen=True)
class PublicTargetAddress(DataType):
    public_target_address: tuple[int, ...] = ()


@_bind_layout
@dataclass(frozen=True)
class RandomTargetAddress(DataType):
    random_target_address: tuple[int, ...] = ()


# -----------------------------------------------------------------------------
# Timing
# -----------------------------------------------------------------------------
ADVINTERVAL_VALUE = 0.625  # ms per unit
CONNECTION_INTERVAL_RANGE = 1.25  # ms per unit
CONNECTION_INTERVAL_NO_SPECIFIC_VALUE = 0xFFFF


@_bind_layout
@dataclass(frozen=True)
class AdvertisingInterval(DataType):
    advertising_interval: int

    def advertising_interval_millis(self) -> float:
        return self.advertising_interval * ADVINTERVAL_VALUE


@_bind_layout
@dataclass(frozen=True)
class AdvertisingIntervalLong(DataType):
    """Advertising Interval - long (0x2F).

    The interval is 3 bytes on the wire (length 4) or 4 bytes (length 5).
    A 3-byte interval keeps only the low 24 bits.
    """

    advertising_interval_long: int
    is_u32: bool = True

    def _normalize(self) -> None:
        if not 0 <= self.advertising_interval_long <= 0xFFFFFFFF:
            raise ValueError(f"advertising_interval_long {self.advertising_interval_long} out of range")
        if not self.is_u32:
            object.__setattr__(
                self, "advertising_interval_long", self.advertising_interval_long & 0x00FFFFFF
            )

    def _encode_payload(self) -> bytes:
        return encode_int(self.advertising_interval_long, "u32" if self.is_u32 else "u24")

    @classmethod
    def _min_payload_size(cls) -> int:
        return 3

    @classmethod
    def _payload_window(cls, record: bytes, length: int) -> bytes:
        width = 4 if length == 5 else 3
        return record[HEADER_SIZE : HEADER_SIZE + width]

    @classmethod
    def _decode_payload(cls, payload: bytes, length: int) -> dict[str, Any]:
        is_u32 = length == 5
        return {
            "advertising_interval_long": decode_int(payload, "u32" if is_u32 else "u24"),
            "is_u32": is_u32,
        }

    def advertising_interval_long_millis(self) -> float:
        return self.advertising_interval_long * ADVINTERVAL_VALUE


@_bind_layout
@dataclass(frozen=True)
class PeripheralConnectionIntervalRange(DataType):
    minimum_value: int
    maximum_value: int

    def minimum_value_millis(self) -> float:
        return self.minimum_value * CONNECTION_INTERVAL_RANGE

    def maximum_value_millis(self) -> float:
        return self.maximum_value * CONNECTION_INTERVAL_RANGE

    def is_no_specific_minimum_value(self) -> bool:
        return self.minimum_value == CONNECTION_INTERVAL_NO_SPECIFIC_VALUE

    def is_no_specific_maximum_value(self) -> bool:
        return self.maximum_value == CONNECTION_INTERVAL_NO_SPECIFIC_VALUE


@_bind_layout
@dataclass(frozen=True)
class PeriodicAdvertisingResponseTimingInformation(DataType):
    rsp_aa: bytes
    num_subevents: int
    subevent_interval: int
    response_slot_delay: int
    response_slot_spacing: int


@_bind_layout
@dataclass(frozen=True)
class ChannelMapUpdateIndication(DataType):
    """Channel Map Update Indication (0x28): 40-bit channel map, u16 instant.

    Only the first 37 bits are data channels; the rest are reserved.
    """

    ch_m: tuple[bool, ...]
    instant: int

    def used_channels(self) -> list[int]:
        return [i for i, used in enumerate(self.ch_m[:37]) if used]


# -----------------------------------------------------------------------------
# Security
# -----------------------------------------------------------------------------
@_bind_layout
@dataclass(frozen=True)
class SecureSimplePairingHashC192(DataType):
    secure_simple_pairing_hash_c192: int


@_bind_layout
@dataclass(frozen=True)
class SecureSimplePairingRandomizerR192(DataType):
    secure_simple_pairing_randomizer_r192: int


@_bind_layout
@dataclass(frozen=True)
class SecureSimplePairingHashC256(DataType):
    secure_simple_pairing_hash_c256: int


@_bind_layout
@dataclass(frozen=True)
class SecureSimplePairingRandomizerR256(DataType):
    secure_simple_pairing_randomizer_r256: int


@_bind_layout
@dataclass(frozen=True)
class SecurityManagerTkValue(DataType):
    security_manager_tk_value: int


@_bind_layout
@dataclass(frozen=True)
class LeSecureConnectionsConfirmationValue(DataType):
    le_secure_connections_confirmation_value: int


@_bind_layout
@dataclass(frozen=True)
class LeSecureConnectionsRandomValue(DataType):
    le_secure_connections_random_value: int


SECURITY_MANAGER_OOB_DATA_PRESENT = 0
SECURITY_MANAGER_LE_SUPPORTED = 1
SECURITY_MANAGER_ADDRESS_TYPE = 3


@_bind_layout
@dataclass(frozen=True)
class SecurityManagerOutOfBand(DataType):
    """Security Manager Out of Band Flags (0x11), one byte of flag bits."""

    security_manager_oob: tuple[bool, ...]

    def is_oob_flags_field(self) -> bool:
        return self.security_manager_oob[SECURITY_MANAGER_OOB_DATA_PRESENT]

    def is_le_supported(self) -> bool:
        return self.security_manager_oob[SECURITY_MANAGER_LE_SUPPORTED]

    def is_random_address(self) -> bool:
        return self.security_manager_oob[SECURITY_MANAGER_ADDRESS_TYPE]


@_bind_layout
@dataclass(frozen=True)
class BroadcastCode(DataType):
    broadcast_code: bytes


@_bind_layout
@dataclass(frozen=True)
class EncryptedData(DataType):
    """Encrypted Data (0x31): 5-byte randomizer, encrypted payload, 4-byte MIC."""

    randomizer: bytes
    payload: bytes
    mic: bytes


# -----------------------------------------------------------------------------
# Feature bit vector
# -----------------------------------------------------------------------------
LE_FEATURE_BITS: dict[str, tuple[int, ...]] = {
    "le_encryption": (0,),
    "connection_parameters_request_procedure": (1,),
    "extended_reject_indication": (2,),
    "peripheral_initiated_features_exchange": (3,),
    "le_ping": (4,),
    "le_data_packet_length_extension": (5,),
    "ll_privacy": (6,),
    "extended_scanning_filter_policies": (7,),
    "le_2m_phy": (8,),
    "stable_modulation_index_transmitter": (9,),
    "stable_modulation_index_receiver": (10,),
    "le_coded_phy": (11,),
    "le_extended_advertising": (12,),
    "le_periodic_advertising": (13,),
    "channel_selection_algorithm2": (14,),
    "le_power_class1": (15,),
    "minimum_number_of_used_channels_procedure": (16,),
    "connection_cte_request": (17,),
    "connection_cte_response": (18,),
    "connectionless_cte_transmitter": (19,),
    "connectionless_cte_receiver": (20,),
    "antenna_switching_during_cte_transmission_aod": (21,),
    "antenna_switching_during_cte_reception_aoa": (22,),
    "receiving_constant_tone_extensions": (23,),
    "periodic_advertising_sync_transfer_sender": (24,),
    "periodic_advertising_sync_transfer_recipient": (25,),
    "sleep_clock_accuracy_updates": (26,),
    "remote_public_key_validation": (27,),
    "connected_isochronous_stream_central": (28,),
    "connected_isochronous_stream_peripheral": (29,),
    "isochronous_broadcaster": (30,),
    "synchronized_receiver": (31,),
    "connected_isochronous_stream_host_support": (32,),
    "le_power_control_request": (33, 34),
    "le_path_loss_monitoring": (35,),
    "periodic_advertising_adi_support": (36,),
    "connection_subrating": (37,),
    "connection_subrating_host_support": (38,),
    "channel_classification": (39,),
    "advertising_coding_selection": (40,),
    "advertising_coding_selection_host_support": (41,),
    "periodic_advertising_with_responses_advertiser": (43,),
    "periodic_advertising_with_responses_scanner": (44,),
}


@_bind_layout
@dataclass(frozen=True)
class LeSupportedFeatures(DataType):
    """LE Supported Features (0x27). Trailing zero bytes may be omitted on the wire."""

    le_supported_features: tuple[bool, ...] = ()

    def is_supported(self, feature: str) -> bool:
        """True when any bit assigned to `feature` is set.

        Raises:
            KeyError: If `feature` is not a name in LE_FEATURE_BITS
        """
        bits = self.le_supported_features
        return any(i < len(bits) and bits[i] for i in LE_FEATURE_BITS[feature])

    def supported(self) -> list[str]:
        return [name for name in LE_FEATURE_BITS if self.is_supported(name)]


# -----------------------------------------------------------------------------
# URI
# -----------------------------------------------------------------------------
# Scheme name string provider (Assigned Numbers 2.7), a few common entries
URI_SCHEMES = {
    "\x01": "",
    "\x16": "http:",
    "\x17": "https:",
    "\x1a": "mailto:",
    "\x2c": "tel:",
}


@_bind_layout
@dataclass(frozen=True)
class UniformResourceIdentifier(DataType):
    """Uniform Resource Identifier (0x24).

    The first UTF-8 code point is the scheme; the rest is the hier-part.
    """

    scheme: str
    uniform_resource_identifier: str

    def _normalize(self) -> None:
        if not isinstance(self.scheme, str) or len(self.scheme) != 1:
            raise ValueError("scheme must be a single character")
        if not isinstance(self.uniform_resource_identifier, str):
            raise TypeError("uniform_resource_identifier must be a str")

    def _encode_payload(self) -> bytes:
        return encode_utf8(self.scheme + self.uniform_resource_identifier)

    @classmethod
    def _min_payload_size(cls) -> int:
        return 1

    @classmethod
    def _decode_payload(cls, payload: bytes, length: int) -> dict[str, Any]:
        text = decode_utf8(payload)
        if not text:
            raise InvalidDataSize("Invalid data size :0 (missing URI scheme)", payload)
        return {"scheme": text[0], "uniform_resource_identifier": text[1:]}

    @classmethod
    def from_uri(cls, text: str) -> UniformResourceIdentifier:
        """Build from a URI whose first character is the scheme code point."""
        return cls(text[:1], text[1:])

    @property
    def uri(self) -> str:
        prefix = URI_SCHEMES.get(self.scheme, self.scheme)
        return prefix + self.uniform_resource_identifier


# -----------------------------------------------------------------------------
# BIGInfo
# -----------------------------------------------------------------------------
# (field, bit width) in wire order, least significant bit first
BIG_INFO_FIELDS: tuple[tuple[str, int], ...] = (
    ("big_offset", 14),
    ("big_offset_units", 1),
    ("iso_interval", 12),
    ("num_bis", 5),
    ("nse", 5),
    ("bn", 3),
    ("sub_interval", 20),
    ("pto", 4),
    ("bis_spacing", 20),
    ("irc", 4),
    ("max_pdu", 8),
    ("rfu", 8),
    ("seed_access_address", 32),
    ("sdu_interval", 20),
    ("max_sdu", 12),
    ("base_crc_init", 16),
    ("ch_m", 37),
    ("phy", 3),
    ("bis_payload_count", 39),
    ("framing", 1),
)
BIG_INFO_SIZE = 33
BIG_INFO_ENCRYPTED_LENGTH = 58  # adds GIV (8 bytes) and GSKD (16 bytes)
BIG_INFO_FLAGS = {"big_offset_units", "framing"}


@_bind_layout
@dataclass(frozen=True)
class BigInfo(DataType):
    """BIGInfo (0x2C).

    33 bytes of packed bit fields; an encrypted BIG appends GIV and GSKD.
    """

    big_offset: int
    big_offset_units: bool
    iso_interval: int
    num_bis: int
    nse: int
    bn: int
    sub_interval: int
    pto: int
    bis_spacing: int
    irc: int
    max_pdu: int
    rfu: int
    seed_access_address: int
    sdu_interval: int
    max_sdu: int
    base_crc_init: int
    ch_m: int
    phy: int
    bis_payload_count: int
    framing: bool
    giv: bytes | None = None
    gskd: bytes | None = None

    def _normalize(self) -> None:
        for name, bits in BIG_INFO_FIELDS:
            value = getattr(self, name)
            if name in BIG_INFO_FLAGS:
                object.__setattr__(self, name, bool(value))
            elif not 0 <= value < (1 << bits):
                raise ValueError(f"BigInfo.{name}: {value} does not fit in {bits} bits")
        if (self.giv is None) != (self.gskd is None):
            raise ValueError("BigInfo: giv and gskd must be given together")
        if self.giv is not None:
            object.__setattr__(self, "giv", bytes(self.giv))
            object.__setattr__(self, "gskd", bytes(self.gskd))
            if len(self.giv) != 8 or len(self.gskd) != 16:
                raise ValueError("BigInfo: giv must be 8 bytes and gskd 16 bytes")

    def is_encrypted(self) -> bool:
        return self.giv is not None

    def _encode_payload(self) -> bytes:
        packed = 0
        shift = 0
        for name, bits in BIG_INFO_FIELDS:
            packed |= (int(getattr(self, name)) & ((1 << bits) - 1)) << shift
            shift += bits
        out = packed.to_bytes(BIG_INFO_SIZE, "little")
        if self.giv is not None:
            out += self.giv + self.gskd
        return out

    @classmethod
    def _min_payload_size(cls) -> int:
        return BIG_INFO_SIZE

    @classmethod
    def _decode_payload(cls, payload: bytes, length: int) -> dict[str, Any]:
        packed = int.from_bytes(payload[:BIG_INFO_SIZE], "little")
        values: dict[str, Any] = {}
        for name, bits in BIG_INFO_FIELDS:
            value = packed & ((1 << bits) - 1)
            values[name] = bool(value) if name in BIG_INFO_FLAGS else value
            packed >>= bits
        if length == BIG_INFO_ENCRYPTED_LENGTH:
            values["giv"] = payload[BIG_INFO_SIZE : BIG_INFO_SIZE + 8]
            values["gskd"] = payload[BIG_INFO_SIZE + 8 : BIG_INFO_SIZE + 24]
        return values


ALL_DATA_TYPES: tuple[type[DataType], ...] = (
    Flags,
    IncompleteListOf16BitServiceUuids,
    CompleteListOf16BitServiceUuids,
    IncompleteListOf32BitServiceUuids,
    CompleteListOf32BitServiceUuids,
    IncompleteListOf128BitServiceUuids,
    CompleteListOf128BitServiceUuids,
    ShortenedLocalName,
    CompleteLocalName,
    TxPowerLevel,
    ClassOfDevice,
    SecureSimplePairingHashC192,
    SecureSimplePairingRandomizerR192,
    SecurityManagerTkValue,
    SecurityManagerOutOfBand,
    PeripheralConnectionIntervalRange,
    ListOf16BitServiceSolicitationUuids,
    ListOf128BitServiceSolicitationUuids,
    ServiceData16BitUuid,
    PublicTargetAddress,
    RandomTargetAddress,
    Appearance,
    AdvertisingInterval,
    LeBluetoothDeviceAddress,
    LeRole,
    SecureSimplePairingHashC256,
    SecureSimplePairingRandomizerR256,
    ListOf32BitServiceSolicitationUuids,
    ServiceData32BitUuid,
    ServiceData128BitUuid,
    LeSecureConnectionsConfirmationValue,
    LeSecureConnectionsRandomValue,
    UniformResourceIdentifier,
    LeSupportedFeatures,
    ChannelMapUpdateIndication,
    BigInfo,
    BroadcastCode,
    AdvertisingIntervalLong,
    EncryptedData,
    PeriodicAdvertisingResponseTimingInformation,
    ManufacturerSpecificData,
)
