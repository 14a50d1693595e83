"""Plain-data export of a resolved schema set for the template emitter."""

from __future__ import annotations

import json
from typing import Any

import yaml

from gdproto.message_extraction import EnumType, FieldType, MapSide, MessageType, SchemaFile
from gdproto.schema_resolution import ResolvedSchemaSet
from gdproto.type_tables import variant_type

OUTPUT_FORMATS = ("yaml", "json")


def build_template_context(
    resolved: ResolvedSchemaSet, *, extension_name: str, protobuf_version: str = ""
) -> dict[str, Any]:
    """Return the template data for a whole extension."""
    return {
        "extension_name": extension_name,
        "protobuf_version": protobuf_version,
        "root_namespace": resolved.root_namespace,
        "registration_classes": list(resolved.registration_classes()),
        "files": [_file_context(schema_file) for schema_file in resolved.files],
    }


def dump_template_context(context: dict[str, Any], output_format: str = "yaml") -> str:
    """Serialise a template context as YAML or JSON text."""
    if output_format == "yaml":
        return yaml.safe_dump(context, sort_keys=False, allow_unicode=True)
    if output_format == "json":
        return json.dumps(context, indent=2, ensure_ascii=False) + "\n"
    raise ValueError(f"Unsupported output format: {output_format}")


def _file_context(schema_file: SchemaFile) -> dict[str, Any]:
    return {
        "path": schema_file.path,
        "package": schema_file.package,
        "namespace": schema_file.namespace,
        "dependencies": list(schema_file.dependencies),
        "dependency_headers": list(schema_file.dependency_headers),
        "forward_declarations": [
            {"namespace": declaration.namespace, "class_name": declaration.class_name}
            for declaration in schema_file.forward_declarations
        ],
        "messages": [_message_context(message) for message in schema_file.messages],
        "enums": [_enum_context(enum) for enum in schema_file.enums],
    }


def _message_context(message: MessageType) -> dict[str, Any]:
    return {
        "full_name": message.full_name,
        "name": message.name,
        "description": message.description,
        "fields": [_field_context(field) for field in message.fields],
        "oneofs": [
            {"name": group.name, "fields": [field.name for field in group.fields]}
            for group in message.oneofs
        ],
    }


def _field_context(field: FieldType) -> dict[str, Any]:
    return {
        "name": field.name,
        "number": field.number,
        "proto_type_name": field.proto_type_name,
        "target_type": field.target_type,
        "doc_type": field.doc_type,
        "inner_target_type": field.inner_target_type,
        "inner_doc_type": field.inner_doc_type,
        "variant_type": variant_type(
            field.target_type,
            is_custom=field.is_custom,
            is_enum=field.is_enum and not field.is_repeated,
        ),
        "is_custom": field.is_custom,
        "is_inner_custom": field.is_inner_custom,
        "is_enum": field.is_enum,
        "is_repeated": field.is_repeated,
        "is_map": field.is_map,
        "is_optional": field.is_optional,
        "oneof_name": field.oneof_name,
        "origin_file": field.origin_file,
        "description": field.description,
        "map_key": _map_side_context(field.map_key),
        "map_value": _map_side_context(field.map_value),
    }


def _map_side_context(side: MapSide | None) -> dict[str, Any] | None:
    if side is None:
        return None
    return {
        "target_type": side.target_type,
        "doc_type": side.doc_type,
        "is_custom": side.is_custom,
        "is_enum": side.is_enum,
    }


def _enum_context(enum: EnumType) -> dict[str, Any]:
    return {
        "full_name": enum.full_name,
        "name": enum.name,
        "local_name": enum.local_name,
        "description": enum.description,
        "options": list(enum.options),
        "values": [{"name": name, "number": number} for name, number in enum.values],
    }
