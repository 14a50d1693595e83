"""Type resolution results.

Each resolved field type is exactly one of the variants below. They share a
small read-only surface (``target_type``, ``doc_type``, ``is_custom``,
``is_enum``, ``is_map``, ``origin_file``) so callers that only render a type
do not need to branch on the variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from gdproto.type_tables import (
    BUILTIN_NAMESPACE,
    DICTIONARY_DOC_TYPE,
    DICTIONARY_TARGET_TYPE,
    ENUM_DOC_TYPE,
    ENUM_TARGET_TYPE,
)


@dataclass(frozen=True)
class PrimitiveResolution:
    """Scalar field bound to an engine primitive."""

    target_type: str
    doc_type: str

    is_custom: ClassVar[bool] = False
    is_enum: ClassVar[bool] = False
    is_map: ClassVar[bool] = False
    origin_file: ClassVar[str | None] = None


@dataclass(frozen=True)
class WellKnownResolution:
    """Builtin google.protobuf message bound through the well-known table."""

    name: str
    target_type: str
    doc_type: str
    note: str

    is_custom: ClassVar[bool] = False
    is_enum: ClassVar[bool] = False
    is_map: ClassVar[bool] = False
    origin_file: ClassVar[str | None] = BUILTIN_NAMESPACE


@dataclass(frozen=True)
class CustomObjectResolution:
    """Reference to a generated object class."""

    target_type: str
    class_name: str
    full_name: str
    origin_file: str

    is_custom: ClassVar[bool] = True
    is_enum: ClassVar[bool] = False
    is_map: ClassVar[bool] = False

    @property
    def doc_type(self) -> str:
        return self.class_name

    @property
    def is_builtin(self) -> bool:
        """Return True for unlisted google.protobuf types."""
        return self.origin_file == BUILTIN_NAMESPACE


@dataclass(frozen=True)
class EnumResolution:
    """Enum reference, always bound to a plain integer."""

    enum_name: str
    full_name: str
    origin_file: str

    target_type: ClassVar[str] = ENUM_TARGET_TYPE
    doc_type: ClassVar[str] = ENUM_DOC_TYPE
    is_custom: ClassVar[bool] = False
    is_enum: ClassVar[bool] = True
    is_map: ClassVar[bool] = False


@dataclass(frozen=True)
class MapResolution:
    """Field whose type is a synthetic map entry."""

    entry_name: str
    key: TypeResolution
    value: TypeResolution

    target_type: ClassVar[str] = DICTIONARY_TARGET_TYPE
    doc_type: ClassVar[str] = DICTIONARY_DOC_TYPE
    is_custom: ClassVar[bool] = False
    is_enum: ClassVar[bool] = False
    is_map: ClassVar[bool] = True
    origin_file: ClassVar[str | None] = None


TypeResolution = (
    PrimitiveResolution
    | WellKnownResolution
    | CustomObjectResolution
    | EnumResolution
    | MapResolution
)
