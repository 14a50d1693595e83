"""CLI orchestration integration tests."""

from __future__ import annotations

from pathlib import Path

import yaml
from click.testing import CliRunner
from gdproto.cli import cli
from google.protobuf import text_format
from google.protobuf.descriptor_pb2 import FileDescriptorSet

_DESCRIPTOR_SET = """
file {
  name: "a.proto"
  message_type { name: "Foo" field { name: "id" number: 1 type: TYPE_INT32 } }
}
file {
  name: "b.proto"
  dependency: "a.proto"
  message_type {
    name: "Bar"
    field { name: "f" number: 1 type: TYPE_MESSAGE type_name: ".Foo" }
    field { name: "m" number: 2 label: LABEL_REPEATED type: TYPE_MESSAGE
            type_name: ".Bar.MEntry" }
    nested_type {
      name: "MEntry"
      field { name: "key" number: 1 type: TYPE_STRING }
      field { name: "value" number: 2 type: TYPE_INT32 }
      options { map_entry: true }
    }
  }
  enum_type { name: "Side" value { name: "LEFT" number: 0 } }
}
"""


def _write_config(tmp_path: Path) -> Path:
    descriptor_set = text_format.Parse(_DESCRIPTOR_SET, FileDescriptorSet())
    (tmp_path / "schema.pb").write_bytes(descriptor_set.SerializeToString())
    config_path = tmp_path / "gdproto.yaml"
    config_path.write_text("descriptor_set: schema.pb\n", encoding="utf-8")
    return config_path


def test_generate_config_command_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "gdproto.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert result.output.strip() == str(output_path.resolve())
    assert "descriptor_set:" in output_path.read_text(encoding="utf-8")


def test_resolve_command_prints_yaml_context(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["resolve", "--config", str(config_path)])

    assert result.exit_code == 0
    context = yaml.safe_load(result.stdout)
    assert context["registration_classes"] == ["gdbuf::a::Foo", "gdbuf::b::Bar"]
    bar_fields = context["files"][1]["messages"][0]["fields"]
    assert bar_fields[0]["target_type"] == "gdbuf::a::Foo"
    assert bar_fields[1]["is_map"] is True
    assert bar_fields[1]["is_repeated"] is False


def test_resolve_command_writes_json_file(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)
    output_path = tmp_path / "context.json"

    result = runner.invoke(
        cli,
        [
            "resolve",
            "--config",
            str(config_path),
            "--output",
            str(output_path),
            "--format",
            "json",
        ],
    )

    assert result.exit_code == 0
    assert result.output.strip() == str(output_path.resolve())
    assert output_path.read_text(encoding="utf-8").startswith("{")


def test_inspect_command_summarises_each_file(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["inspect", "--config", str(config_path)])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "a.proto: 1 message(s), 0 enum(s); depends on: none",
        "b.proto: 1 message(s), 1 enum(s); depends on: a.proto",
    ]


def test_verbose_flag_is_accepted_before_the_command(tmp_path: Path) -> None:
    runner = CliRunner()
    config_path = _write_config(tmp_path)

    result = runner.invoke(cli, ["-v", "inspect", "--config", str(config_path)])

    assert result.exit_code == 0
    assert "b.proto" in result.output
