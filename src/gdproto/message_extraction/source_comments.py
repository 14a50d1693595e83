"""Lookup of source comments by descriptor path."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from google.protobuf.descriptor_pb2 import FileDescriptorProto

# Field numbers used in descriptor paths.
FILE_MESSAGE_TYPES = 4
FILE_ENUM_TYPES = 5
MESSAGE_FIELDS = 2
MESSAGE_NESTED_TYPES = 3
MESSAGE_ENUM_TYPES = 4


@dataclass(frozen=True)
class SourceComments:
    """Comments of one file keyed by their exact declaration path."""

    by_path: Mapping[tuple[int, ...], str]

    @classmethod
    def from_file(cls, file: FileDescriptorProto) -> SourceComments:
        comments: dict[tuple[int, ...], str] = {}
        for location in file.source_code_info.location:
            key = tuple(location.path)
            if key in comments:
                continue
            text = location.leading_comments.strip() or location.trailing_comments.strip()
            comments[key] = text
        return cls(by_path=MappingProxyType(comments))

    def lookup(self, path: Sequence[int]) -> str:
        """Return the comment attached to ``path``, or an empty string."""
        return self.by_path.get(tuple(path), "")
