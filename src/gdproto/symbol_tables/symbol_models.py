"""Symbol table entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from google.protobuf.descriptor_pb2 import DescriptorProto, FieldDescriptorProto

_MAP_KEY_NUMBER = 1
_MAP_VALUE_NUMBER = 2


@dataclass(frozen=True)
class SymbolTable:
    """Read-only lookup tables built once over a whole descriptor set."""

    declared_names: Mapping[str, tuple[str, ...]]
    flattened_names: Mapping[str, str]
    message_descriptors: Mapping[str, DescriptorProto]
    packages: Mapping[str, str]

    def declaring_file(self, full_name: str) -> str | None:
        """Return the first file (in input order) that declares a fully-qualified name."""
        for file_path, names in self.declared_names.items():
            if full_name in names:
                return file_path
        return None

    def identifier(self, full_name: str) -> str:
        """Return the flattened identifier of a declared message or enum."""
        return self.flattened_names[full_name]

    def is_map_entry(self, full_name: str) -> bool:
        """Return True when the named message is a synthetic map entry."""
        descriptor = self.message_descriptors.get(full_name)
        if descriptor is None or not descriptor.options.map_entry:
            return False
        numbers = {field.number for field in descriptor.field}
        return {_MAP_KEY_NUMBER, _MAP_VALUE_NUMBER} <= numbers

    def map_entry_fields(
        self, full_name: str
    ) -> tuple[FieldDescriptorProto, FieldDescriptorProto]:
        """Return the (key, value) field descriptors of a map entry message."""
        descriptor = self.message_descriptors[full_name]
        by_number = {field.number: field for field in descriptor.field}
        return by_number[_MAP_KEY_NUMBER], by_number[_MAP_VALUE_NUMBER]
