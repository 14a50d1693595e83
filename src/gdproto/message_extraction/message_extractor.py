"""Message, field and enum extraction for one schema file."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from google.protobuf.descriptor_pb2 import (
    DescriptorProto,
    EnumDescriptorProto,
    FieldDescriptorProto,
    FileDescriptorProto,
)

from gdproto.dependency_tracking import FileDependencyCollector
from gdproto.resolution_errors import MalformedOneofIndexError
from gdproto.symbol_tables import (
    SymbolTable,
    file_namespace_segment,
    normalize_reference,
    qualify,
    short_name,
)
from gdproto.type_resolution import (
    DEFAULT_ROOT_NAMESPACE,
    MapResolution,
    TypeResolution,
    resolve_field_type,
)
from gdproto.type_tables import (
    ARRAY_DOC_TYPE,
    ARRAY_TARGET_TYPE,
    documentation_note,
    is_well_known_name,
)

from .binding_models import EnumType, FieldType, MapSide, MessageType, OneofGroup, SchemaFile
from .source_comments import (
    FILE_ENUM_TYPES,
    FILE_MESSAGE_TYPES,
    MESSAGE_ENUM_TYPES,
    MESSAGE_FIELDS,
    MESSAGE_NESTED_TYPES,
    SourceComments,
)

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Scope:
    """Fully-qualified prefix and descriptor path of one declaration."""

    full_name: str
    path: tuple[int, ...]

    def child(self, local_name: str, *path: int) -> _Scope:
        return _Scope(full_name=qualify(self.full_name, local_name), path=self.path + path)


@dataclass(frozen=True)
class _ExtractionContext:
    """Read-only inputs shared by every declaration of one file."""

    file_path: str
    symbols: SymbolTable
    root_namespace: str
    comments: SourceComments


@dataclass
class _ExtractionState:
    """Mutable collector for one file's extraction outcome."""

    messages: list[MessageType]
    nested_enums: list[EnumType]
    dependencies: FileDependencyCollector


def extract_schema_file(
    file: FileDescriptorProto,
    symbols: SymbolTable,
    *,
    root_namespace: str = DEFAULT_ROOT_NAMESPACE,
) -> SchemaFile:
    """Build the resolved model of one schema file.

    Messages are emitted depth-first, each followed by its nested messages.
    Synthetic map entries are never emitted. Any resolution error aborts the
    extraction.
    """
    context = _ExtractionContext(
        file_path=file.name,
        symbols=symbols,
        root_namespace=root_namespace,
        comments=SourceComments.from_file(file),
    )
    state = _ExtractionState(
        messages=[], nested_enums=[], dependencies=FileDependencyCollector(file.name)
    )
    root = _Scope(full_name=file.package, path=())

    for index, message in enumerate(file.message_type):
        _extract_message(
            message,
            scope=root.child(message.name, FILE_MESSAGE_TYPES, index),
            context=context,
            state=state,
        )

    top_level_enums = [
        _extract_enum(enum, scope=root.child(enum.name, FILE_ENUM_TYPES, index), context=context)
        for index, enum in enumerate(file.enum_type)
    ]

    return SchemaFile(
        path=file.name,
        package=file.package,
        namespace=f"{root_namespace}::{file_namespace_segment(file.name)}",
        messages=tuple(state.messages),
        enums=tuple(top_level_enums + state.nested_enums),
        dependencies=state.dependencies.dependencies,
        forward_declarations=state.dependencies.forward_declarations,
    )


def _extract_message(
    message: DescriptorProto,
    *,
    scope: _Scope,
    context: _ExtractionContext,
    state: _ExtractionState,
) -> None:
    if context.symbols.is_map_entry(scope.full_name):
        return

    _LOGGER.debug("extracting message %s", scope.full_name)
    synthetic_oneofs = _synthetic_oneof_indexes(message)
    fields = tuple(
        _extract_field(
            field,
            message=message,
            field_path=scope.path + (MESSAGE_FIELDS, index),
            message_name=scope.full_name,
            synthetic_oneofs=synthetic_oneofs,
            context=context,
            state=state,
        )
        for index, field in enumerate(message.field)
    )
    oneofs = tuple(
        OneofGroup(
            name=declaration.name,
            fields=tuple(
                field_type
                for field, field_type in zip(message.field, fields, strict=True)
                if _is_oneof_member(field, index)
            ),
        )
        for index, declaration in enumerate(message.oneof_decl)
        if index not in synthetic_oneofs
    )
    state.messages.append(
        MessageType(
            full_name=scope.full_name,
            name=context.symbols.identifier(scope.full_name),
            description=context.comments.lookup(scope.path),
            fields=fields,
            oneofs=oneofs,
        )
    )

    for index, nested in enumerate(message.nested_type):
        _extract_message(
            nested,
            scope=scope.child(nested.name, MESSAGE_NESTED_TYPES, index),
            context=context,
            state=state,
        )
    for index, enum in enumerate(message.enum_type):
        state.nested_enums.append(
            _extract_enum(
                enum, scope=scope.child(enum.name, MESSAGE_ENUM_TYPES, index), context=context
            )
        )


def _extract_field(  # pylint: disable=too-many-arguments
    field: FieldDescriptorProto,
    *,
    message: DescriptorProto,
    field_path: tuple[int, ...],
    message_name: str,
    synthetic_oneofs: frozenset[int],
    context: _ExtractionContext,
    state: _ExtractionState,
) -> FieldType:
    oneof_name = _oneof_name(field, message, message_name, synthetic_oneofs)
    resolution = resolve_field_type(
        field, context.file_path, context.symbols, root_namespace=context.root_namespace
    )
    state.dependencies.record(resolution)

    description = _append_note(context.comments.lookup(field_path), _well_known_note(field))
    common = {
        "name": field.name,
        "number": field.number,
        "proto_type_name": field.type_name,
        "is_enum": resolution.is_enum,
        "is_optional": field.proto3_optional,
        "oneof_name": oneof_name,
        "origin_file": resolution.origin_file,
        "description": description,
    }

    if isinstance(resolution, MapResolution):
        return FieldType(
            target_type=resolution.target_type,
            doc_type=resolution.doc_type,
            inner_target_type=resolution.target_type,
            inner_doc_type=resolution.doc_type,
            is_custom=False,
            is_inner_custom=False,
            is_repeated=False,
            is_map=True,
            map_key=_map_side(resolution.key),
            map_value=_map_side(resolution.value),
            **common,
        )
    if field.label == FieldDescriptorProto.LABEL_REPEATED:
        return FieldType(
            target_type=ARRAY_TARGET_TYPE,
            doc_type=ARRAY_DOC_TYPE,
            inner_target_type=resolution.target_type,
            inner_doc_type=resolution.doc_type,
            is_custom=False,
            is_inner_custom=resolution.is_custom,
            is_repeated=True,
            is_map=False,
            **common,
        )
    return FieldType(
        target_type=resolution.target_type,
        doc_type=resolution.doc_type,
        inner_target_type=resolution.target_type,
        inner_doc_type=resolution.doc_type,
        is_custom=resolution.is_custom,
        is_inner_custom=resolution.is_custom,
        is_repeated=False,
        is_map=False,
        **common,
    )


def _extract_enum(
    enum: EnumDescriptorProto, *, scope: _Scope, context: _ExtractionContext
) -> EnumType:
    return EnumType(
        full_name=scope.full_name,
        name=context.symbols.identifier(scope.full_name),
        local_name=enum.name,
        options=tuple(value.name for value in enum.value),
        values=tuple((value.name, value.number) for value in enum.value),
        description=context.comments.lookup(scope.path),
    )


def _synthetic_oneof_indexes(message: DescriptorProto) -> frozenset[int]:
    """Return oneof indexes that only express proto3 explicit optionality."""
    return frozenset(
        field.oneof_index
        for field in message.field
        if field.HasField("oneof_index") and field.proto3_optional
    )


def _is_oneof_member(field: FieldDescriptorProto, index: int) -> bool:
    return (
        field.HasField("oneof_index")
        and field.oneof_index == index
        and not field.proto3_optional
    )


def _oneof_name(
    field: FieldDescriptorProto,
    message: DescriptorProto,
    message_name: str,
    synthetic_oneofs: frozenset[int],
) -> str | None:
    if not field.HasField("oneof_index"):
        return None
    index = field.oneof_index
    declared = len(message.oneof_decl)
    if not 0 <= index < declared:
        raise MalformedOneofIndexError(message_name, field.name, index, declared)
    if field.proto3_optional or index in synthetic_oneofs:
        return None
    return message.oneof_decl[index].name


def _well_known_note(field: FieldDescriptorProto) -> str | None:
    if field.type != FieldDescriptorProto.TYPE_MESSAGE:
        return None
    full_name = normalize_reference(field.type_name)
    if not is_well_known_name(full_name):
        return None
    return documentation_note(short_name(full_name))


def _append_note(description: str, note: str | None) -> str:
    if not note:
        return description
    return f"{description}\n{note}" if description else note


def _map_side(resolution: TypeResolution) -> MapSide:
    return MapSide(
        target_type=resolution.target_type,
        doc_type=resolution.doc_type,
        is_custom=resolution.is_custom,
        is_enum=resolution.is_enum,
    )
