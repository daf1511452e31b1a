from __future__ import annotations

import pytest

from admap.core import data_types as dt
from admap.core import descriptors as ds
from admap.core import registry
from admap.core.fields import uuid_from_16bit
from admap.core.registry import DATA_TYPES, DESCRIPTORS, lookup, lookup_descriptor


def test_tables() -> None:
    assert len(DATA_TYPES) == 41
    assert len(DESCRIPTORS) == 6
    for tag, cls in DATA_TYPES.items():
        assert cls.tag == tag


def test_lookup() -> None:
    assert lookup(0x01) is dt.Flags
    assert lookup(0x08) is dt.ShortenedLocalName
    assert lookup(0x09) is dt.CompleteLocalName
    assert lookup(0x1B) is dt.LeBluetoothDeviceAddress
    assert lookup(0xFF) is dt.ManufacturerSpecificData
    assert lookup(0x99) is None
    assert lookup_descriptor(0x2902) is ds.ClientCharacteristicConfiguration
    assert lookup_descriptor(0x2A00) is None


def test_tables_are_read_only() -> None:
    with pytest.raises(TypeError):
        DATA_TYPES[0x99] = dt.Flags  # type: ignore[index]
    with pytest.raises(TypeError):
        del DESCRIPTORS[0x2902]  # type: ignore[attr-defined]


def test_tag_predicates() -> None:
    assert registry.is_complete_local_name(0x09)
    assert not registry.is_complete_local_name(0x08)
    assert registry.is_shortened_local_name(0x08)
    assert registry.is_public_target_address(0x17)
    assert registry.is_le_bluetooth_device_address(0x1B)
    assert registry.is_manufacturer_specific_data(0xFF)
    assert not registry.is_flags(0x99)


def test_descriptor_predicates() -> None:
    assert registry.is_client_characteristic_configuration(0x2902)
    assert registry.is_client_characteristic_configuration(uuid_from_16bit(0x2902))
    assert not registry.is_client_characteristic_configuration(0x2903)
    assert registry.is_characteristic_presentation_format(0x2904)


def test_one_predicate_per_type() -> None:
    predicates = [getattr(registry, n) for n in dir(registry) if n.startswith("is_")]
    assert len(predicates) == len(DATA_TYPES) + len(DESCRIPTORS)
    for tag in DATA_TYPES:
        assert sum(p(tag) for p in predicates) == 1
    for uuid16 in DESCRIPTORS:
        assert sum(p(uuid16) for p in predicates) == 1
