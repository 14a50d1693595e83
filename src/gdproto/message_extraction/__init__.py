"""Message extraction exports."""

from .binding_models import EnumType, FieldType, MapSide, MessageType, OneofGroup, SchemaFile
from .message_extractor import extract_schema_file
from .source_comments import SourceComments

__all__ = [
    "EnumType",
    "FieldType",
    "MapSide",
    "MessageType",
    "OneofGroup",
    "SchemaFile",
    "SourceComments",
    "extract_schema_file",
]
