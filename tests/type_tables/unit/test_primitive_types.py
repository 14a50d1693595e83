"""Primitive type table tests."""

from __future__ import annotations

import pytest
from gdproto.resolution_errors import UnsupportedPrimitiveError
from gdproto.type_tables import PRIMITIVE_BINDINGS, lookup_primitive
from google.protobuf.descriptor_pb2 import FieldDescriptorProto


@pytest.mark.parametrize(
    ("kind", "target_type", "doc_type"),
    [
        (FieldDescriptorProto.TYPE_STRING, "godot::String", "String"),
        (FieldDescriptorProto.TYPE_BOOL, "bool", "bool"),
        (FieldDescriptorProto.TYPE_INT32, "int32_t", "int"),
        (FieldDescriptorProto.TYPE_SFIXED32, "int32_t", "int"),
        (FieldDescriptorProto.TYPE_SINT64, "int64_t", "int"),
        (FieldDescriptorProto.TYPE_UINT32, "uint32_t", "int"),
        (FieldDescriptorProto.TYPE_UINT64, "uint64_t", "int"),
        (FieldDescriptorProto.TYPE_FLOAT, "float", "float"),
        (FieldDescriptorProto.TYPE_DOUBLE, "double", "float"),
        (FieldDescriptorProto.TYPE_BYTES, "godot::PackedByteArray", "PackedByteArray"),
    ],
)
def test_scalar_kinds_map_to_engine_primitives(kind: int, target_type: str, doc_type: str) -> None:
    binding = lookup_primitive(kind)

    assert binding.target_type == target_type
    assert binding.doc_type == doc_type


def test_lookup_is_stable_for_every_listed_kind() -> None:
    for kind, binding in PRIMITIVE_BINDINGS.items():
        assert lookup_primitive(kind) == binding
        assert lookup_primitive(kind).target_type


@pytest.mark.parametrize(
    "kind",
    [
        FieldDescriptorProto.TYPE_GROUP,
        FieldDescriptorProto.TYPE_MESSAGE,
        FieldDescriptorProto.TYPE_ENUM,
        99,
    ],
)
def test_non_scalar_or_unknown_kinds_are_rejected(kind: int) -> None:
    with pytest.raises(UnsupportedPrimitiveError, match="unsupported proto type"):
        lookup_primitive(kind)


def test_unsupported_primitive_error_names_the_kind() -> None:
    with pytest.raises(UnsupportedPrimitiveError) as excinfo:
        lookup_primitive(FieldDescriptorProto.TYPE_GROUP)

    assert "TYPE_GROUP" in str(excinfo.value)
    assert excinfo.value.kind == FieldDescriptorProto.TYPE_GROUP
