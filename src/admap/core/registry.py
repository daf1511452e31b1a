"""Read-only tag and UUID registries for data types and descriptors."""

from __future__ import annotations

from types import MappingProxyType
from typing import Callable, Iterable, Mapping

from admap.core import data_types as dt
from admap.core import descriptors as ds
from admap.core.errors import LayoutError
from admap.core.fields import uuid_from_16bit


def _build(classes: Iterable[type], key: Callable[[type], int], label: str) -> Mapping[int, type]:
    table: dict[int, type] = {}
    errors: list[str] = []
    for cls in classes:
        ident = key(cls)
        if ident in table:
            errors.append(f"duplicate {label} {ident:#x}: {table[ident].__name__} and {cls.__name__}")
            continue
        table[ident] = cls
    if errors:
        raise LayoutError(errors)
    return MappingProxyType(table)


DATA_TYPES: Mapping[int, type[dt.DataType]] = _build(dt.ALL_DATA_TYPES, lambda c: c.tag, "tag")
DESCRIPTORS: Mapping[int, type[ds.Descriptor]] = _build(
    ds.ALL_DESCRIPTORS, lambda c: c.uuid_16bit(), "descriptor UUID"
)


def lookup(tag: int) -> type[dt.DataType] | None:
    """Data type class for an AD tag, or None when the tag is not supported."""
    return DATA_TYPES.get(tag)


def lookup_descriptor(uuid16: int) -> type[ds.Descriptor] | None:
    """Descriptor class for a 16-bit UUID, or None when it is not supported."""
    return DESCRIPTORS.get(uuid16)


def _tag_predicate(cls: type[dt.DataType]) -> Callable[[int], bool]:
    tag = cls.tag

    def predicate(value: int) -> bool:
        return value == tag

    predicate.__doc__ = f"True when `value` is the {cls.__name__} tag ({tag:#04x})."
    return predicate


def _uuid_predicate(cls: type[ds.Descriptor]) -> Callable[[object], bool]:
    uuid16 = cls.uuid_16bit()
    full = uuid_from_16bit(uuid16)

    def predicate(value: object) -> bool:
        # Accepts the 16-bit alias or the full UUID
        return value == uuid16 or value == full

    predicate.__doc__ = f"True when `value` is the {cls.__name__} UUID ({uuid16:#06x})."
    return predicate


is_flags = _tag_predicate(dt.Flags)
is_incomplete_list_of_16bit_service_uuids = _tag_predicate(dt.IncompleteListOf16BitServiceUuids)
is_complete_list_of_16bit_service_uuids = _tag_predicate(dt.CompleteListOf16BitServiceUuids)
is_incomplete_list_of_32bit_service_uuids = _tag_predicate(dt.IncompleteListOf32BitServiceUuids)
is_complete_list_of_32bit_service_uuids = _tag_predicate(dt.CompleteListOf32BitServiceUuids)
is_incomplete_list_of_128bit_service_uuids = _tag_predicate(dt.IncompleteListOf128BitServiceUuids)
is_complete_list_of_128bit_service_uuids = _tag_predicate(dt.CompleteListOf128BitServiceUuids)
is_shortened_local_name = _tag_predicate(dt.ShortenedLocalName)
is_complete_local_name = _tag_predicate(dt.CompleteLocalName)
is_tx_power_level = _tag_predicate(dt.TxPowerLevel)
is_class_of_device = _tag_predicate(dt.ClassOfDevice)
is_secure_simple_pairing_hash_c192 = _tag_predicate(dt.SecureSimplePairingHashC192)
is_secure_simple_pairing_randomizer_r192 = _tag_predicate(dt.SecureSimplePairingRandomizerR192)
is_security_manager_tk_value = _tag_predicate(dt.SecurityManagerTkValue)
is_security_manager_out_of_band = _tag_predicate(dt.SecurityManagerOutOfBand)
is_peripheral_connection_interval_range = _tag_predicate(dt.PeripheralConnectionIntervalRange)
is_list_of_16bit_service_solicitation_uuids = _tag_predicate(dt.ListOf16BitServiceSolicitationUuids)
is_list_of_128bit_service_solicitation_uuids = _tag_predicate(
    dt.ListOf128BitServiceSolicitationUuids
)
is_service_data_16bit_uuid = _tag_predicate(dt.ServiceData16BitUuid)
is_public_target_address = _tag_predicate(dt.PublicTargetAddress)
is_random_target_address = _tag_predicate(dt.RandomTargetAddress)
is_appearance = _tag_predicate(dt.Appearance)
is_advertising_interval = _tag_predicate(dt.AdvertisingInterval)
is_le_bluetooth_device_address = _tag_predicate(dt.LeBluetoothDeviceAddress)
is_le_role = _tag_predicate(dt.LeRole)
is_secure_simple_pairing_hash_c256 = _tag_predicate(dt.SecureSimplePairingHashC256)
is_secure_simple_pairing_randomizer_r256 = _tag_predicate(dt.SecureSimplePairingRandomizerR256)
is_list_of_32bit_service_solicitation_uuids = _tag_predicate(dt.ListOf32BitServiceSolicitationUuids)
is_service_data_32bit_uuid = _tag_predicate(dt.ServiceData32BitUuid)
is_service_data_128bit_uuid = _tag_predicate(dt.ServiceData128BitUuid)
is_le_secure_connections_confirmation_value = _tag_predicate(
    dt.LeSecureConnectionsConfirmationValue
)
is_le_secure_connections_random_value = _tag_predicate(dt.LeSecureConnectionsRandomValue)
is_uniform_resource_identifier = _tag_predicate(dt.UniformResourceIdentifier)
is_le_supported_features = _tag_predicate(dt.LeSupportedFeatures)
is_channel_map_update_indication = _tag_predicate(dt.ChannelMapUpdateIndication)
is_big_info = _tag_predicate(dt.BigInfo)
is_broadcast_code = _tag_predicate(dt.BroadcastCode)
is_advertising_interval_long = _tag_predicate(dt.AdvertisingIntervalLong)
is_encrypted_data = _tag_predicate(dt.EncryptedData)
is_periodic_advertising_response_timing_information = _tag_predicate(
    dt.PeriodicAdvertisingResponseTimingInformation
)
is_manufacturer_specific_data = _tag_predicate(dt.ManufacturerSpecificData)

is_characteristic_extended_properties = _uuid_predicate(ds.CharacteristicExtendedProperties)
is_characteristic_user_description = _uuid_predicate(ds.CharacteristicUserDescription)
is_client_characteristic_configuration = _uuid_predicate(ds.ClientCharacteristicConfiguration)
is_server_characteristic_configuration = _uuid_predicate(ds.ServerCharacteristicConfiguration)
is_characteristic_presentation_format = _uuid_predicate(ds.CharacteristicPresentationFormat)
is_characteristic_aggregate_format = _uuid_predicate(ds.CharacteristicAggregateFormat)
