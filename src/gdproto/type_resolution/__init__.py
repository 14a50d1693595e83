"""Type resolution exports."""

from .resolution_models import (
    CustomObjectResolution,
    EnumResolution,
    MapResolution,
    PrimitiveResolution,
    TypeResolution,
    WellKnownResolution,
)
from .type_resolver import DEFAULT_ROOT_NAMESPACE, qualified_target_type, resolve_field_type

__all__ = [
    "CustomObjectResolution",
    "DEFAULT_ROOT_NAMESPACE",
    "EnumResolution",
    "MapResolution",
    "PrimitiveResolution",
    "TypeResolution",
    "WellKnownResolution",
    "qualified_target_type",
    "resolve_field_type",
]
