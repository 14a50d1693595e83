"""Builtin google.protobuf message types with fixed engine equivalents."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

WELL_KNOWN_PACKAGE = "google.protobuf"
BUILTIN_NAMESPACE = "google::protobuf"


@dataclass(frozen=True)
class WellKnownBinding:
    """Engine representation of one well-known type."""

    name: str
    target_type: str
    doc_type: str
    note: str


def _binding(name: str, target_type: str, doc_type: str, representation: str) -> WellKnownBinding:
    note = (
        f"Note: This field is a Google Protobuf {name}. "
        f"In Godot, it is represented as {representation}."
    )
    return WellKnownBinding(name=name, target_type=target_type, doc_type=doc_type, note=note)


_BINDINGS = (
    _binding("Timestamp", "int64_t", "int", "an int64 (Unix timestamp in milliseconds)"),
    _binding("Duration", "double", "float", "a double (seconds)"),
    _binding("Struct", "godot::Dictionary", "Dictionary", "a Dictionary"),
    _binding("Any", "godot::Dictionary", "Dictionary", "a Dictionary"),
    _binding("ListValue", "godot::Array", "Array", "an Array"),
    _binding("Value", "godot::Variant", "Variant", "a Variant"),
    _binding("Empty", "godot::Variant", "Variant", "a Variant"),
    _binding("StringValue", "godot::String", "String", "a String"),
    _binding("BytesValue", "godot::PackedByteArray", "PackedByteArray", "a PackedByteArray"),
    _binding("BoolValue", "bool", "bool", "a bool"),
    _binding("Int32Value", "int32_t", "int", "an int32"),
    _binding("Int64Value", "int64_t", "int", "an int64"),
    _binding("UInt32Value", "uint32_t", "int", "a uint32"),
    _binding("UInt64Value", "uint64_t", "int", "a uint64"),
    _binding("FloatValue", "float", "float", "a float"),
    _binding("DoubleValue", "double", "float", "a double"),
    _binding(
        "FieldMask", "godot::PackedStringArray", "PackedStringArray", "a PackedStringArray of paths"
    ),
)

WELL_KNOWN_BINDINGS: Mapping[str, WellKnownBinding] = MappingProxyType(
    {binding.name: binding for binding in _BINDINGS}
)

# Only these types get their note appended to field documentation.
DOCUMENTED_WELL_KNOWN_TYPES = frozenset({"Timestamp", "Duration", "Struct"})


def is_well_known_name(full_name: str) -> bool:
    """Return True when a fully-qualified name lives in the google.protobuf package."""
    return full_name.startswith(f"{WELL_KNOWN_PACKAGE}.")


def lookup_well_known(short_name: str) -> WellKnownBinding | None:
    """Return the binding for a well-known short name, or None when unlisted."""
    return WELL_KNOWN_BINDINGS.get(short_name)


def documentation_note(short_name: str) -> str | None:
    """Return the note appended to field docs for a well-known type, if any."""
    if short_name not in DOCUMENTED_WELL_KNOWN_TYPES:
        return None
    return WELL_KNOWN_BINDINGS[short_name].note
