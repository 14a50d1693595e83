"""Resolved binding model handed to the code emitter."""

from __future__ import annotations

from dataclasses import dataclass

from gdproto.dependency_tracking import ForwardDeclaration, header_path


@dataclass(frozen=True)
class MapSide:
    """Resolved key or value type of a map field."""

    target_type: str
    doc_type: str
    is_custom: bool
    is_enum: bool


@dataclass(frozen=True)
class FieldType:  # pylint: disable=too-many-instance-attributes
    """One message field with its resolved engine type.

    ``inner_target_type``/``inner_doc_type`` carry the element type of repeated
    fields and mirror the plain type otherwise. ``map_key`` and ``map_value``
    are only set when ``is_map`` is true.
    """

    name: str
    number: int
    proto_type_name: str
    target_type: str
    doc_type: str
    inner_target_type: str
    inner_doc_type: str
    is_custom: bool
    is_inner_custom: bool
    is_enum: bool
    is_repeated: bool
    is_map: bool
    is_optional: bool
    oneof_name: str | None
    origin_file: str | None
    description: str
    map_key: MapSide | None = None
    map_value: MapSide | None = None


@dataclass(frozen=True)
class OneofGroup:
    """Named oneof declaration and its member fields."""

    name: str
    fields: tuple[FieldType, ...]


@dataclass(frozen=True)
class MessageType:
    """Generated class for one (possibly nested) message."""

    full_name: str
    name: str
    description: str
    fields: tuple[FieldType, ...]
    oneofs: tuple[OneofGroup, ...]


@dataclass(frozen=True)
class EnumType:
    """Enum declaration with its value names in declaration order."""

    full_name: str
    name: str
    local_name: str
    options: tuple[str, ...]
    values: tuple[tuple[str, int], ...]
    description: str


@dataclass(frozen=True)
class SchemaFile:
    """Fully resolved output for one input schema file."""

    path: str
    package: str
    namespace: str
    messages: tuple[MessageType, ...]
    enums: tuple[EnumType, ...]
    dependencies: tuple[str, ...]
    forward_declarations: tuple[ForwardDeclaration, ...]

    @property
    def dependency_headers(self) -> tuple[str, ...]:
        """Return the generated headers this file's header must include."""
        return tuple(header_path(dependency) for dependency in self.dependencies)
