"""Whole-set symbol discovery."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from google.protobuf.descriptor_pb2 import DescriptorProto, FileDescriptorProto

from gdproto.resolution_errors import IdentifierCollisionError

from .naming import flatten_identifier, qualify
from .symbol_models import SymbolTable

_LOGGER = logging.getLogger(__name__)


@dataclass
class _SymbolCollector:
    """Mutable accumulator used while walking one descriptor set."""

    declared_names: dict[str, list[str]]
    flattened_names: dict[str, str]
    message_descriptors: dict[str, DescriptorProto]
    owners: dict[tuple[str, str], str]


def build_symbol_table(files: Iterable[FileDescriptorProto]) -> SymbolTable:
    """Collect every message and enum declared by the input files."""
    collector = _SymbolCollector(
        declared_names={}, flattened_names={}, message_descriptors={}, owners={}
    )
    packages: dict[str, str] = {}

    for file in files:
        packages[file.name] = file.package
        names = collector.declared_names.setdefault(file.name, [])
        for message in file.message_type:
            _collect_message(
                message, prefix=file.package, file=file, names=names, collector=collector
            )
        for enum in file.enum_type:
            _register(qualify(file.package, enum.name), file=file, names=names, collector=collector)

    return SymbolTable(
        declared_names=MappingProxyType(
            {path: tuple(names) for path, names in collector.declared_names.items()}
        ),
        flattened_names=MappingProxyType(dict(collector.flattened_names)),
        message_descriptors=MappingProxyType(dict(collector.message_descriptors)),
        packages=MappingProxyType(packages),
    )


def _collect_message(
    message: DescriptorProto,
    *,
    prefix: str,
    file: FileDescriptorProto,
    names: list[str],
    collector: _SymbolCollector,
) -> None:
    full_name = qualify(prefix, message.name)
    _register(full_name, file=file, names=names, collector=collector)
    collector.message_descriptors[full_name] = message
    for nested in message.nested_type:
        _collect_message(nested, prefix=full_name, file=file, names=names, collector=collector)
    for enum in message.enum_type:
        _register(qualify(full_name, enum.name), file=file, names=names, collector=collector)


def _register(
    full_name: str, *, file: FileDescriptorProto, names: list[str], collector: _SymbolCollector
) -> None:
    _LOGGER.debug("found declaration %s in %s", full_name, file.name)
    identifier = flatten_identifier(full_name, file.package)
    owner = collector.owners.setdefault((file.name, identifier), full_name)
    if owner != full_name:
        raise IdentifierCollisionError(file.name, identifier, owner, full_name)
    names.append(full_name)
    collector.flattened_names[full_name] = identifier
