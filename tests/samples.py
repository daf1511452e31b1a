"""One constructed value per data type, shared by the round-trip and scan tests."""

from __future__ import annotations

from uuid import UUID

from admap.core import data_types as dt

NUS_SERVICE = UUID("6e400001-b5a3-f393-e0a9-e50e24dcca9e")
NUS_RX = UUID("6e400002-b5a3-f393-e0a9-e50e24dcca9e")

BIG_INFO = dt.BigInfo(
    big_offset=0x1ABC,
    big_offset_units=True,
    iso_interval=0x0F1,
    num_bis=2,
    nse=4,
    bn=1,
    sub_interval=0x12345,
    pto=3,
    bis_spacing=0x0ABCD,
    irc=2,
    max_pdu=120,
    rfu=0,
    seed_access_address=0x8E89BED6,
    sdu_interval=10000,
    max_sdu=0x3C0,
    base_crc_init=0x5555,
    ch_m=0x1FFFFFFFFF,
    phy=2,
    bis_payload_count=0x7FFFFFFF01,
    framing=True,
)

SAMPLES: list[dt.DataType] = [
    dt.Flags((False, True, True)),
    dt.IncompleteListOf16BitServiceUuids((0x180D, 0x180F)),
    dt.CompleteListOf16BitServiceUuids((0x1812,)),
    dt.IncompleteListOf32BitServiceUuids((0x0000180D,)),
    dt.CompleteListOf32BitServiceUuids((0x12345678,)),
    dt.IncompleteListOf128BitServiceUuids((NUS_SERVICE,)),
    dt.CompleteListOf128BitServiceUuids((NUS_SERVICE, NUS_RX)),
    dt.ShortenedLocalName("foo"),
    dt.CompleteLocalName("Heart Rate Sensor"),
    dt.TxPowerLevel(-8),
    dt.ClassOfDevice(0x5A020C),
    dt.SecureSimplePairingHashC192((1 << 128) - 1),
    dt.SecureSimplePairingRandomizerR192(0x0102030405060708090A0B0C0D0E0F10),
    dt.SecurityManagerTkValue(0),
    dt.SecurityManagerOutOfBand((True, False, True)),
    dt.PeripheralConnectionIntervalRange(6, 3200),
    dt.ListOf16BitServiceSolicitationUuids((0x1802,)),
    dt.ListOf128BitServiceSolicitationUuids((NUS_RX,)),
    dt.ServiceData16BitUuid(0xFEAA, b"\x10\x00"),
    dt.PublicTargetAddress((0x112233445566,)),
    dt.RandomTargetAddress((1, 2)),
    dt.Appearance(0x03C1),
    dt.AdvertisingInterval(160),
    dt.LeBluetoothDeviceAddress(0xC0FFEE123456, 1),
    dt.LeRole(2),
    dt.SecureSimplePairingHashC256(1),
    dt.SecureSimplePairingRandomizerR256(2),
    dt.ListOf32BitServiceSolicitationUuids((0x0000FEED,)),
    dt.ServiceData32BitUuid(0x0000FEED, b"abc"),
    dt.ServiceData128BitUuid(NUS_SERVICE, b""),
    dt.LeSecureConnectionsConfirmationValue(3),
    dt.LeSecureConnectionsRandomValue(4),
    dt.UniformResourceIdentifier("\x17", "//example.org"),
    dt.LeSupportedFeatures((True,) * 12),
    dt.ChannelMapUpdateIndication((True,) * 37, 0x0010),
    BIG_INFO,
    dt.BroadcastCode(bytes(range(16))),
    dt.AdvertisingIntervalLong(0x123456, is_u32=False),
    dt.EncryptedData(b"\x01" * 5, b"secret", b"\xaa" * 4),
    dt.PeriodicAdvertisingResponseTimingInformation(b"\x01\x02\x03\x04", 1, 2, 3, 4),
    dt.ManufacturerSpecificData(0x004C, b"\x02\x15"),
]
