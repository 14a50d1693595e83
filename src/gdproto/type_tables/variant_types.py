"""Variant tags used when registering bound properties."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

VARIANT_NIL = "godot::Variant::NIL"
VARIANT_OBJECT = "godot::Variant::OBJECT"
VARIANT_INT = "godot::Variant::INT"

_VARIANT_BY_TARGET_TYPE: Mapping[str, str] = MappingProxyType(
    {
        "bool": "godot::Variant::BOOL",
        "int32_t": VARIANT_INT,
        "int64_t": VARIANT_INT,
        "uint32_t": VARIANT_INT,
        "uint64_t": VARIANT_INT,
        "float": "godot::Variant::FLOAT",
        "double": "godot::Variant::FLOAT",
        "godot::String": "godot::Variant::STRING",
        "godot::PackedByteArray": "godot::Variant::PACKED_BYTE_ARRAY",
        "godot::PackedStringArray": "godot::Variant::PACKED_STRING_ARRAY",
        "godot::Dictionary": "godot::Variant::DICTIONARY",
        "godot::Array": "godot::Variant::ARRAY",
    }
)


def variant_type(target_type: str, *, is_custom: bool, is_enum: bool) -> str:
    """Return the variant tag for a resolved field type."""
    if is_enum:
        return VARIANT_INT
    if is_custom:
        return VARIANT_OBJECT
    return _VARIANT_BY_TARGET_TYPE.get(target_type, VARIANT_NIL)
