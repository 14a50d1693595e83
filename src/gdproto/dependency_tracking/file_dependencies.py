"""Per-file dependency and forward-declaration accumulation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePosixPath

from gdproto.type_resolution import CustomObjectResolution, MapResolution, TypeResolution
from gdproto.type_tables import BUILTIN_NAMESPACE

_NAMESPACE_SEPARATOR = "::"


@dataclass(frozen=True)
class ForwardDeclaration:
    """Namespace and class of a type declared ahead of its full definition."""

    namespace: str
    class_name: str


def forward_declaration_for(target_type: str) -> ForwardDeclaration | None:
    """Split a qualified target type on its last namespace separator."""
    namespace, separator, class_name = target_type.rpartition(_NAMESPACE_SEPARATOR)
    if not separator:
        return None
    return ForwardDeclaration(namespace=namespace, class_name=class_name)


def header_path(file_path: str) -> str:
    """Return the generated header path for a schema file (``a/b.proto`` -> ``a/b.h``)."""
    return str(PurePosixPath(file_path).with_suffix(".h"))


class FileDependencyCollector:
    """Collects deduplicated dependency edges for one schema file."""

    def __init__(self, current_file: str) -> None:
        self.current_file = current_file
        self._dependencies: list[str] = []
        self._forward_declarations: list[ForwardDeclaration] = []

    @property
    def dependencies(self) -> tuple[str, ...]:
        return tuple(self._dependencies)

    @property
    def forward_declarations(self) -> tuple[ForwardDeclaration, ...]:
        return tuple(self._forward_declarations)

    def record(self, resolution: TypeResolution) -> bool:
        """Record what a resolved field needs from other files.

        Returns True when a new dependency or forward declaration was added.
        """
        if isinstance(resolution, MapResolution):
            return self.record(resolution.value)
        if not isinstance(resolution, CustomObjectResolution):
            return False
        origin_file = resolution.origin_file
        if origin_file in (self.current_file, BUILTIN_NAMESPACE):
            return False

        added = False
        if origin_file not in self._dependencies:
            self._dependencies.append(origin_file)
            added = True
        declaration = forward_declaration_for(resolution.target_type)
        if declaration is not None and declaration not in self._forward_declarations:
            self._forward_declarations.append(declaration)
            added = True
        return added
