"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationSettings:
    """Naming settings of the generated extension."""

    extension_name: str
    root_namespace: str
    protobuf_version: str
    exclude_prefixes: tuple[str, ...]


@dataclass(frozen=True)
class ResolutionSettings:
    """Resolution run tuning."""

    workers: int


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    descriptor_set: Path
    generation: GenerationSettings
    resolution: ResolutionSettings
