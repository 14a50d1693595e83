"""Descriptor loading exports."""

from .descriptor_set_reader import (
    DEFAULT_EXCLUDE_PREFIXES,
    DescriptorSetError,
    filter_files,
    load_descriptor_set,
)

__all__ = [
    "DEFAULT_EXCLUDE_PREFIXES",
    "DescriptorSetError",
    "filter_files",
    "load_descriptor_set",
]
