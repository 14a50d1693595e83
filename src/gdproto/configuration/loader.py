"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from gdproto.descriptor_loading import DEFAULT_EXCLUDE_PREFIXES
from gdproto.type_resolution import DEFAULT_ROOT_NAMESPACE

from .runtime_settings import Configuration, GenerationSettings, ResolutionSettings

DEFAULT_EXTENSION_NAME = "gdbufgen"

_CPP_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    descriptor_set = _parse_descriptor_set(parsed.get("descriptor_set"), path.parent)
    generation = _parse_generation_section(parsed.get("generation"))
    resolution = _parse_resolution_section(parsed.get("resolution"))

    return Configuration(
        path=path,
        descriptor_set=descriptor_set,
        generation=generation,
        resolution=resolution,
    )


def _parse_descriptor_set(value: Any, base_path: Path) -> Path:
    raw_path = _require_non_empty_string(value, "descriptor_set")
    descriptor_path = _resolve_path(base_path, raw_path)
    if not descriptor_path.exists():
        raise ConfigurationError(f"Descriptor set not found: {descriptor_path}")
    return descriptor_path


def _parse_generation_section(value: Any) -> GenerationSettings:
    section = _optional_mapping(value, "generation")
    extension_name = _require_identifier(
        section.get("extension_name", DEFAULT_EXTENSION_NAME), "generation.extension_name"
    )
    root_namespace = _require_identifier(
        section.get("root_namespace", DEFAULT_ROOT_NAMESPACE), "generation.root_namespace"
    )
    protobuf_version = _optional_string(
        section.get("protobuf_version"), "generation.protobuf_version"
    )
    exclude_prefixes = _normalize_string_sequence(
        section.get("exclude_prefixes", list(DEFAULT_EXCLUDE_PREFIXES)),
        "generation.exclude_prefixes",
    )
    return GenerationSettings(
        extension_name=extension_name,
        root_namespace=root_namespace,
        protobuf_version=protobuf_version or "",
        exclude_prefixes=exclude_prefixes,
    )


def _parse_resolution_section(value: Any) -> ResolutionSettings:
    section = _optional_mapping(value, "resolution")
    workers = _require_positive_int(section.get("workers", 1), "resolution.workers")
    return ResolutionSettings(workers=workers)


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_identifier(value: Any, field_name: str) -> str:
    identifier = _require_non_empty_string(value, field_name)
    if not _CPP_IDENTIFIER.match(identifier):
        raise ConfigurationError(f"{field_name} must be a valid C++ identifier.")
    return identifier


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
