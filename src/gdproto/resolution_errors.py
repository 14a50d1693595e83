"""Errors that abort a schema resolution run."""

from __future__ import annotations

from google.protobuf.descriptor_pb2 import FieldDescriptorProto


class ResolutionError(Exception):
    """Base class for fatal schema resolution failures."""


class UnresolvedTypeReferenceError(ResolutionError):
    """Raised when a message or enum reference is declared by no input file."""

    def __init__(self, reference: str, referencing_file: str, *, kind: str = "message") -> None:
        self.reference = reference
        self.referencing_file = referencing_file
        self.kind = kind
        super().__init__(
            f"Could not find source file for {kind} type '{reference}' "
            f"referenced from {referencing_file}"
        )


class IdentifierCollisionError(ResolutionError):
    """Raised when two declarations of one file flatten to the same class identifier."""

    def __init__(self, file_path: str, identifier: str, first: str, second: str) -> None:
        self.file_path = file_path
        self.identifier = identifier
        self.first = first
        self.second = second
        super().__init__(
            f"Declarations '{first}' and '{second}' in {file_path} both map to "
            f"identifier '{identifier}'"
        )


class UnsupportedPrimitiveError(ResolutionError):
    """Raised when a scalar field kind has no primitive binding."""

    def __init__(self, kind: int) -> None:
        self.kind = kind
        super().__init__(f"Unknown or unsupported proto type: {_kind_label(kind)}")


class MalformedOneofIndexError(ResolutionError):
    """Raised when a field points at a oneof declaration that does not exist."""

    def __init__(self, message_name: str, field_name: str, index: int, declared: int) -> None:
        self.message_name = message_name
        self.field_name = field_name
        self.index = index
        self.declared = declared
        super().__init__(
            f"Field '{field_name}' of message '{message_name}' references oneof index "
            f"{index}, but only {declared} oneof declaration(s) exist"
        )


def _kind_label(kind: int) -> str:
    try:
        return FieldDescriptorProto.Type.Name(kind)
    except ValueError:
        return str(kind)
