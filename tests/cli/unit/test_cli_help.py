"""CLI smoke tests."""

from click.testing import CliRunner
from gdproto.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate-config" in result.output
    assert "resolve" in result.output
    assert "inspect" in result.output
    assert "--verbose" in result.output


def test_resolve_help_lists_output_formats() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["resolve", "-h"])

    assert result.exit_code == 0
    assert "[yaml|json]" in result.output
