"""Tests for template context export."""

from __future__ import annotations

import json

import pytest
import yaml
from gdproto.model_export import build_template_context, dump_template_context
from gdproto.schema_resolution import ResolvedSchemaSet, resolve_schema_set
from google.protobuf import text_format
from google.protobuf.descriptor_pb2 import FileDescriptorProto

_UNITS_PROTO = """
name: "game/units.proto"
package: "game"
message_type {
  name: "Unit"
  field { name: "hp" number: 1 label: LABEL_OPTIONAL type: TYPE_INT32 }
  field { name: "kind" number: 2 label: LABEL_OPTIONAL type: TYPE_ENUM type_name: ".game.Kind" }
  field { name: "kinds" number: 3 label: LABEL_REPEATED type: TYPE_ENUM type_name: ".game.Kind" }
  field { name: "leader" number: 4 label: LABEL_OPTIONAL type: TYPE_MESSAGE
          type_name: ".game.Unit" }
  field { name: "tags" number: 5 label: LABEL_REPEATED type: TYPE_MESSAGE
          type_name: ".game.Unit.TagsEntry" }
  field { name: "a" number: 6 label: LABEL_OPTIONAL type: TYPE_INT32 oneof_index: 0 }
  nested_type {
    name: "TagsEntry"
    field { name: "key" number: 1 label: LABEL_OPTIONAL type: TYPE_STRING }
    field { name: "value" number: 2 label: LABEL_OPTIONAL type: TYPE_STRING }
    options { map_entry: true }
  }
  oneof_decl { name: "choice" }
}
enum_type { name: "Kind" value { name: "MELEE" number: 0 } value { name: "RANGED" number: 1 } }
"""


@pytest.fixture(name="resolved")
def _resolved() -> ResolvedSchemaSet:
    return resolve_schema_set([text_format.Parse(_UNITS_PROTO, FileDescriptorProto())])


def _fields(context: dict) -> dict[str, dict]:
    message = context["files"][0]["messages"][0]
    return {field["name"]: field for field in message["fields"]}


def test_context_carries_extension_metadata(resolved: ResolvedSchemaSet) -> None:
    context = build_template_context(
        resolved, extension_name="gdbufgen", protobuf_version="29.3"
    )

    assert context["extension_name"] == "gdbufgen"
    assert context["protobuf_version"] == "29.3"
    assert context["root_namespace"] == "gdbuf"
    assert context["registration_classes"] == ["gdbuf::units::Unit"]
    assert context["files"][0]["namespace"] == "gdbuf::units"


def test_fields_carry_variant_tags(resolved: ResolvedSchemaSet) -> None:
    fields = _fields(build_template_context(resolved, extension_name="gdbufgen"))

    assert fields["hp"]["variant_type"] == "godot::Variant::INT"
    assert fields["kind"]["variant_type"] == "godot::Variant::INT"
    assert fields["kinds"]["variant_type"] == "godot::Variant::ARRAY"
    assert fields["leader"]["variant_type"] == "godot::Variant::OBJECT"
    assert fields["tags"]["variant_type"] == "godot::Variant::DICTIONARY"


def test_map_sides_and_oneofs_are_plain_data(resolved: ResolvedSchemaSet) -> None:
    context = build_template_context(resolved, extension_name="gdbufgen")
    fields = _fields(context)

    assert fields["tags"]["map_key"] == {
        "target_type": "godot::String",
        "doc_type": "String",
        "is_custom": False,
        "is_enum": False,
    }
    assert fields["hp"]["map_key"] is None
    assert context["files"][0]["messages"][0]["oneofs"] == [{"name": "choice", "fields": ["a"]}]
    assert context["files"][0]["enums"][0]["values"] == [
        {"name": "MELEE", "number": 0},
        {"name": "RANGED", "number": 1},
    ]
    assert context["files"][0]["enums"][0]["local_name"] == "Kind"


def test_yaml_and_json_dumps_round_trip(resolved: ResolvedSchemaSet) -> None:
    context = build_template_context(resolved, extension_name="gdbufgen")

    assert yaml.safe_load(dump_template_context(context, "yaml")) == context
    rendered_json = dump_template_context(context, "json")
    assert rendered_json.endswith("\n")
    assert json.loads(rendered_json) == context


def test_yaml_dump_keeps_key_order(resolved: ResolvedSchemaSet) -> None:
    context = build_template_context(resolved, extension_name="gdbufgen")

    rendered = dump_template_context(context)

    assert rendered.startswith("extension_name: gdbufgen\n")


def test_unknown_output_format_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported output format: toml"):
        dump_template_context({}, "toml")
