"""Whole descriptor set resolution use case."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from google.protobuf.descriptor_pb2 import FileDescriptorProto

from gdproto.message_extraction import SchemaFile, extract_schema_file
from gdproto.symbol_tables import SymbolTable, build_symbol_table
from gdproto.type_resolution import DEFAULT_ROOT_NAMESPACE

from .resolution_contracts import ResolvedSchemaSet

_LOGGER = logging.getLogger(__name__)


def resolve_schema_set(
    files: Sequence[FileDescriptorProto],
    *,
    root_namespace: str = DEFAULT_ROOT_NAMESPACE,
    workers: int = 1,
) -> ResolvedSchemaSet:
    """Resolve every file of a descriptor set.

    The symbol table is built once before any field is resolved. Files may be
    extracted concurrently; the output keeps input order. The first error
    aborts the run.
    """
    if workers < 1:
        raise ValueError("workers must be at least 1.")

    symbols = build_symbol_table(files)
    _LOGGER.debug("symbol table holds %d declarations", len(symbols.flattened_names))

    if workers == 1 or len(files) < 2:
        resolved = [_extract(file, symbols, root_namespace) for file in files]
    else:
        with ThreadPoolExecutor(max_workers=workers) as executor:
            resolved = list(
                executor.map(lambda file: _extract(file, symbols, root_namespace), files)
            )

    return ResolvedSchemaSet(files=tuple(resolved), root_namespace=root_namespace)


def _extract(file: FileDescriptorProto, symbols: SymbolTable, root_namespace: str) -> SchemaFile:
    _LOGGER.info("processing file %s", file.name)
    return extract_schema_file(file, symbols, root_namespace=root_namespace)
