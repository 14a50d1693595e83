"""Binary descriptor set loading."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from pathlib import Path

from google.protobuf.descriptor_pb2 import FileDescriptorProto, FileDescriptorSet
from google.protobuf.message import DecodeError

DEFAULT_EXCLUDE_PREFIXES = ("google/protobuf/",)


class DescriptorSetError(Exception):
    """Raised when a descriptor set cannot be read or decoded."""


def load_descriptor_set(path: Path | str) -> tuple[FileDescriptorProto, ...]:
    """Read a serialized ``FileDescriptorSet`` and return its files in order."""
    descriptor_path = Path(path)
    if not descriptor_path.is_file():
        raise DescriptorSetError(f"Descriptor set not found: {descriptor_path}")

    descriptor_set = FileDescriptorSet()
    try:
        descriptor_set.ParseFromString(descriptor_path.read_bytes())
    except DecodeError as exc:
        raise DescriptorSetError(
            f"Could not decode descriptor set {descriptor_path}: {exc}"
        ) from exc
    return tuple(descriptor_set.file)


def filter_files(
    files: Iterable[FileDescriptorProto],
    exclude_prefixes: Sequence[str] = DEFAULT_EXCLUDE_PREFIXES,
) -> tuple[FileDescriptorProto, ...]:
    """Drop files whose path starts with one of the excluded prefixes."""
    return tuple(
        file
        for file in files
        if not any(file.name.startswith(prefix) for prefix in exclude_prefixes)
    )
