"""Symbol table exports."""

from .naming import (
    file_namespace_segment,
    flatten_identifier,
    normalize_reference,
    qualify,
    short_name,
    to_camel_case,
)
from .symbol_models import SymbolTable
from .symbol_table_builder import build_symbol_table

__all__ = [
    "SymbolTable",
    "build_symbol_table",
    "file_namespace_segment",
    "flatten_identifier",
    "normalize_reference",
    "qualify",
    "short_name",
    "to_camel_case",
]
