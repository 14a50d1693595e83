"""Dependency tracking exports."""

from .file_dependencies import (
    FileDependencyCollector,
    ForwardDeclaration,
    forward_declaration_for,
    header_path,
)

__all__ = [
    "FileDependencyCollector",
    "ForwardDeclaration",
    "forward_declaration_for",
    "header_path",
]
