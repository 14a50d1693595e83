"""Static type binding tables."""

from .primitive_types import (
    ARRAY_DOC_TYPE,
    ARRAY_TARGET_TYPE,
    DICTIONARY_DOC_TYPE,
    DICTIONARY_TARGET_TYPE,
    ENUM_DOC_TYPE,
    ENUM_TARGET_TYPE,
    PRIMITIVE_BINDINGS,
    PrimitiveBinding,
    lookup_primitive,
)
from .variant_types import variant_type
from .well_known_types import (
    BUILTIN_NAMESPACE,
    WELL_KNOWN_BINDINGS,
    WELL_KNOWN_PACKAGE,
    WellKnownBinding,
    documentation_note,
    is_well_known_name,
    lookup_well_known,
)

__all__ = [
    "ARRAY_DOC_TYPE",
    "ARRAY_TARGET_TYPE",
    "BUILTIN_NAMESPACE",
    "DICTIONARY_DOC_TYPE",
    "DICTIONARY_TARGET_TYPE",
    "ENUM_DOC_TYPE",
    "ENUM_TARGET_TYPE",
    "PRIMITIVE_BINDINGS",
    "PrimitiveBinding",
    "WELL_KNOWN_BINDINGS",
    "WELL_KNOWN_PACKAGE",
    "WellKnownBinding",
    "documentation_note",
    "is_well_known_name",
    "lookup_primitive",
    "lookup_well_known",
    "variant_type",
]
