"""Scalar field kinds bound to engine primitive types."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from google.protobuf.descriptor_pb2 import FieldDescriptorProto

from gdproto.resolution_errors import UnsupportedPrimitiveError

ARRAY_TARGET_TYPE = "godot::Array"
ARRAY_DOC_TYPE = "Array"
DICTIONARY_TARGET_TYPE = "godot::Dictionary"
DICTIONARY_DOC_TYPE = "Dictionary"
# Enums bind as plain ints.
ENUM_TARGET_TYPE = "int32_t"
ENUM_DOC_TYPE = "int"


@dataclass(frozen=True)
class PrimitiveBinding:
    """Engine type used for one scalar kind."""

    target_type: str
    doc_type: str


_INT32 = PrimitiveBinding(target_type="int32_t", doc_type="int")
_INT64 = PrimitiveBinding(target_type="int64_t", doc_type="int")

PRIMITIVE_BINDINGS: Mapping[int, PrimitiveBinding] = MappingProxyType(
    {
        FieldDescriptorProto.TYPE_STRING: PrimitiveBinding("godot::String", "String"),
        FieldDescriptorProto.TYPE_BOOL: PrimitiveBinding("bool", "bool"),
        FieldDescriptorProto.TYPE_INT32: _INT32,
        FieldDescriptorProto.TYPE_SINT32: _INT32,
        FieldDescriptorProto.TYPE_FIXED32: _INT32,
        FieldDescriptorProto.TYPE_SFIXED32: _INT32,
        FieldDescriptorProto.TYPE_INT64: _INT64,
        FieldDescriptorProto.TYPE_SINT64: _INT64,
        FieldDescriptorProto.TYPE_FIXED64: _INT64,
        FieldDescriptorProto.TYPE_SFIXED64: _INT64,
        FieldDescriptorProto.TYPE_UINT32: PrimitiveBinding("uint32_t", "int"),
        FieldDescriptorProto.TYPE_UINT64: PrimitiveBinding("uint64_t", "int"),
        FieldDescriptorProto.TYPE_FLOAT: PrimitiveBinding("float", "float"),
        FieldDescriptorProto.TYPE_DOUBLE: PrimitiveBinding("double", "float"),
        FieldDescriptorProto.TYPE_BYTES: PrimitiveBinding(
            "godot::PackedByteArray", "PackedByteArray"
        ),
    }
)


def lookup_primitive(kind: int) -> PrimitiveBinding:
    """Return the primitive binding for a scalar field kind."""
    try:
        return PRIMITIVE_BINDINGS[kind]
    except KeyError as exc:
        raise UnsupportedPrimitiveError(kind) from exc
