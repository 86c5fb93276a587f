"""CLI smoke tests."""

from click.testing import CliRunner
from telemetry_protos.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate" in result.output
    assert "list-schemas" in result.output


def test_generate_help_mentions_out_dir_fallback() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["generate", "--help"])

    assert result.exit_code == 0
    assert "$OUT_DIR" in result.output
