"""Field type resolution service."""

from __future__ import annotations

import logging

from google.protobuf.descriptor_pb2 import FieldDescriptorProto

from gdproto.resolution_errors import UnresolvedTypeReferenceError
from gdproto.symbol_tables import (
    SymbolTable,
    file_namespace_segment,
    normalize_reference,
    short_name,
)
from gdproto.type_tables import (
    BUILTIN_NAMESPACE,
    is_well_known_name,
    lookup_primitive,
    lookup_well_known,
)

from .resolution_models import (
    CustomObjectResolution,
    EnumResolution,
    MapResolution,
    PrimitiveResolution,
    TypeResolution,
    WellKnownResolution,
)

DEFAULT_ROOT_NAMESPACE = "gdbuf"

_LOGGER = logging.getLogger(__name__)


def resolve_field_type(
    field: FieldDescriptorProto,
    current_file: str,
    symbols: SymbolTable,
    *,
    root_namespace: str = DEFAULT_ROOT_NAMESPACE,
) -> TypeResolution:
    """Resolve one field descriptor to its engine type.

    Args:
      field: Field descriptor as found in the descriptor set.
      current_file: Path of the file declaring the field.
      symbols: Symbol table built over the whole descriptor set.
      root_namespace: Root C++ namespace of generated classes.

    Returns:
      The tagged resolution for the field's declared type.

    Raises:
      UnresolvedTypeReferenceError: If a message or enum reference is declared nowhere.
      UnsupportedPrimitiveError: If a scalar kind has no primitive binding.
    """
    if field.type == FieldDescriptorProto.TYPE_MESSAGE:
        return _resolve_message_reference(field, current_file, symbols, root_namespace)
    if field.type == FieldDescriptorProto.TYPE_ENUM:
        return _resolve_enum_reference(field, current_file, symbols)
    binding = lookup_primitive(field.type)
    return PrimitiveResolution(target_type=binding.target_type, doc_type=binding.doc_type)


def qualified_target_type(root_namespace: str, origin_file: str, identifier: str) -> str:
    """Return the file-qualified C++ type of a class generated for another file."""
    return f"{root_namespace}::{file_namespace_segment(origin_file)}::{identifier}"


def _resolve_message_reference(
    field: FieldDescriptorProto,
    current_file: str,
    symbols: SymbolTable,
    root_namespace: str,
) -> TypeResolution:
    full_name = normalize_reference(field.type_name)
    if is_well_known_name(full_name):
        return _resolve_well_known(full_name)

    if symbols.is_map_entry(full_name):
        key_field, value_field = symbols.map_entry_fields(full_name)
        return MapResolution(
            entry_name=full_name,
            key=resolve_field_type(
                key_field, current_file, symbols, root_namespace=root_namespace
            ),
            value=resolve_field_type(
                value_field, current_file, symbols, root_namespace=root_namespace
            ),
        )

    origin_file = symbols.declaring_file(full_name)
    if origin_file is None:
        raise UnresolvedTypeReferenceError(full_name, current_file, kind="message")

    identifier = symbols.identifier(full_name)
    if origin_file == current_file:
        target_type = identifier
    else:
        target_type = qualified_target_type(root_namespace, origin_file, identifier)
    _LOGGER.debug("resolved %s in %s to %s", full_name, current_file, target_type)
    return CustomObjectResolution(
        target_type=target_type,
        class_name=identifier,
        full_name=full_name,
        origin_file=origin_file,
    )


def _resolve_well_known(full_name: str) -> TypeResolution:
    name = short_name(full_name)
    binding = lookup_well_known(name)
    if binding is None:
        _LOGGER.debug("unlisted well-known type %s bound as custom object", full_name)
        return CustomObjectResolution(
            target_type=f"{BUILTIN_NAMESPACE}::{name}",
            class_name=name,
            full_name=full_name,
            origin_file=BUILTIN_NAMESPACE,
        )
    return WellKnownResolution(
        name=binding.name,
        target_type=binding.target_type,
        doc_type=binding.doc_type,
        note=binding.note,
    )


def _resolve_enum_reference(
    field: FieldDescriptorProto, current_file: str, symbols: SymbolTable
) -> EnumResolution:
    full_name = normalize_reference(field.type_name)
    origin_file = symbols.declaring_file(full_name)
    if origin_file is None:
        raise UnresolvedTypeReferenceError(full_name, current_file, kind="enum")
    return EnumResolution(
        enum_name=symbols.identifier(full_name),
        full_name=full_name,
        origin_file=origin_file,
    )
