"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from gdproto.configuration.runtime_settings import Configuration
from gdproto.schema_resolution import ResolvedSchemaSet


@dataclass(frozen=True)
class RunRequest:
    """Input contract for executing one resolution run."""

    config_path: str
    output_path: str | None = None
    output_format: str = "yaml"


@dataclass(frozen=True)
class RunOutcome:
    """Output contract for one completed run."""

    configuration: Configuration
    resolved: ResolvedSchemaSet
    context: dict[str, Any]
    rendered: str
    output_path: Path | None
