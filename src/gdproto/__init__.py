"""Protobuf descriptor set resolution into engine binding models."""

from gdproto.resolution_errors import (
    IdentifierCollisionError,
    MalformedOneofIndexError,
    ResolutionError,
    UnresolvedTypeReferenceError,
    UnsupportedPrimitiveError,
)
from gdproto.schema_resolution import ResolvedSchemaSet, resolve_schema_set

__all__ = [
    "IdentifierCollisionError",
    "MalformedOneofIndexError",
    "ResolutionError",
    "ResolvedSchemaSet",
    "UnresolvedTypeReferenceError",
    "UnsupportedPrimitiveError",
    "resolve_schema_set",
]
