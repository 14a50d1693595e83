"""Schema set resolution exports."""

from .resolution_contracts import ResolvedSchemaSet
from .schema_set_resolver import resolve_schema_set

__all__ = ["ResolvedSchemaSet", "resolve_schema_set"]
