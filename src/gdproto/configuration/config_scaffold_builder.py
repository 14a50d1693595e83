"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "gdproto.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Resolution configuration template for gdproto.
# Replace every <REQUIRED> placeholder before running resolve or inspect.
# Optional keys may be deleted; their defaults are shown.

# Binary FileDescriptorSet written by:
#   protoc --include_source_info --descriptor_set_out=<file> <protos>
# Relative paths are resolved against this file's directory.
descriptor_set: "<REQUIRED>"

generation:
  # Name of the generated extension.
  extension_name: gdbufgen
  # Root C++ namespace; every schema file gets a nested namespace below it.
  root_namespace: gdbuf
  protobuf_version: ""
  # Files whose path starts with one of these prefixes are not emitted.
  exclude_prefixes:
    - "google/protobuf/"

resolution:
  # Number of files resolved concurrently.
  workers: 1
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
