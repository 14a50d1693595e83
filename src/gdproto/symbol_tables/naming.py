"""Name normalisation helpers shared by symbol building and resolution."""

from __future__ import annotations

from pathlib import PurePosixPath

_NESTING_SEPARATOR = "_"


def qualify(prefix: str, local_name: str) -> str:
    """Join a scope prefix and a local name into a fully-qualified name."""
    return f"{prefix}.{local_name}" if prefix else local_name


def normalize_reference(type_name: str) -> str:
    """Strip the leading dot descriptors put on absolute type references."""
    return type_name[1:] if type_name.startswith(".") else type_name


def short_name(full_name: str) -> str:
    """Return the last segment of a fully-qualified name."""
    return full_name.rsplit(".", 1)[-1]


def strip_package(full_name: str, package: str) -> str:
    """Return the nesting chain of a fully-qualified name without its package."""
    if package and full_name.startswith(f"{package}."):
        return full_name[len(package) + 1 :]
    return full_name


def to_camel_case(value: str) -> str:
    """Capitalise the first letter of every underscore-delimited segment and join them."""
    return "".join(
        segment[:1].upper() + segment[1:] for segment in value.split("_") if segment
    )


def flatten_identifier(full_name: str, package: str) -> str:
    """Derive a class identifier from a fully-qualified name.

    The package is dropped, every nesting level is camel-cased on its own and
    the levels are joined with underscores, so ``pkg.Outer.inner_msg`` becomes
    ``Outer_InnerMsg``. Camel-casing removes underscores inside a level, so a
    nested type never shares its identifier with a top-level one.
    """
    chain = strip_package(full_name, package)
    return _NESTING_SEPARATOR.join(to_camel_case(level) for level in chain.split("."))


def file_namespace_segment(file_path: str) -> str:
    """Return the per-file namespace segment: the base name without ``.proto``."""
    name = PurePosixPath(file_path).name
    return name[: -len(".proto")] if name.endswith(".proto") else name
