"""Configured resolution run use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from gdproto.configuration import Configuration, ConfigurationError, load_configuration
from gdproto.descriptor_loading import DescriptorSetError, filter_files, load_descriptor_set
from gdproto.model_export import build_template_context, dump_template_context
from gdproto.resolution_errors import ResolutionError
from gdproto.schema_resolution import ResolvedSchemaSet, resolve_schema_set

from .run_contracts import RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when a resolution run cannot be completed."""


def load_and_resolve(config_path: str) -> tuple[Configuration, ResolvedSchemaSet]:
    """Load the configuration and descriptor set, then resolve every file."""
    try:
        configuration = load_configuration(config_path)
        files = filter_files(
            load_descriptor_set(configuration.descriptor_set),
            configuration.generation.exclude_prefixes,
        )
        resolved = resolve_schema_set(
            files,
            root_namespace=configuration.generation.root_namespace,
            workers=configuration.resolution.workers,
        )
    except (ConfigurationError, DescriptorSetError, ResolutionError) as exc:
        raise RunExecutionError(str(exc)) from exc
    _LOGGER.info(
        "resolved %d file(s) with %d message(s)", len(resolved.files), resolved.message_count
    )
    return configuration, resolved


def execute_resolution_run(request: RunRequest) -> RunOutcome:
    """Execute one configured resolution run and optionally write its template context."""
    configuration, resolved = load_and_resolve(request.config_path)
    context = build_template_context(
        resolved,
        extension_name=configuration.generation.extension_name,
        protobuf_version=configuration.generation.protobuf_version,
    )
    try:
        rendered = dump_template_context(context, request.output_format)
    except ValueError as exc:
        raise RunExecutionError(str(exc)) from exc

    output_path = None
    if request.output_path:
        output_path = Path(request.output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(rendered, encoding="utf-8")
        except OSError as exc:
            raise RunExecutionError(f"Could not write {output_path}: {exc}") from exc
        output_path = output_path.resolve()

    return RunOutcome(
        configuration=configuration,
        resolved=resolved,
        context=context,
        rendered=rendered,
        output_path=output_path,
    )
