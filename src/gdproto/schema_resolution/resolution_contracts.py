"""Schema set resolution entities."""

from __future__ import annotations

from dataclasses import dataclass

from gdproto.message_extraction import SchemaFile


@dataclass(frozen=True)
class ResolvedSchemaSet:
    """Output contract for one resolution run over a descriptor set."""

    files: tuple[SchemaFile, ...]
    root_namespace: str

    @property
    def message_count(self) -> int:
        return sum(len(file.messages) for file in self.files)

    def file(self, path: str) -> SchemaFile:
        """Return the resolved file with the given path."""
        for schema_file in self.files:
            if schema_file.path == path:
                return schema_file
        raise KeyError(path)

    def registration_classes(self) -> tuple[str, ...]:
        """Return every generated message class, namespace-qualified, in output order."""
        return tuple(
            f"{schema_file.namespace}::{message.name}"
            for schema_file in self.files
            for message in schema_file.messages
        )
