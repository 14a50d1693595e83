"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from gdproto.configuration import ConfigurationError, load_configuration
from gdproto.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Resolution configuration template" in scaffold
    assert "descriptor_set:" in scaffold
    assert "generation:" in scaffold
    assert "resolution:" in scaffold
    assert "<REQUIRED>" in scaffold
    assert "--include_source_info" in scaffold


def test_placeholder_configuration_is_valid_yaml_with_defaults() -> None:
    parsed = yaml.safe_load(build_placeholder_configuration())

    assert parsed["descriptor_set"] == "<REQUIRED>"
    assert parsed["generation"]["root_namespace"] == "gdbuf"
    assert parsed["generation"]["exclude_prefixes"] == ["google/protobuf/"]
    assert parsed["resolution"]["workers"] == 1


def test_unedited_placeholder_configuration_is_rejected(tmp_path: Path) -> None:
    output_path = write_placeholder_configuration(tmp_path / "gdproto.yaml")

    with pytest.raises(ConfigurationError, match="Descriptor set not found"):
        load_configuration(output_path)


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "gdproto.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "gdproto.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
