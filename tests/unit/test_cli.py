"""Unit tests for the `sentinel` command line interface."""

import pytest
from typer.testing import CliRunner

from sentinel.cli import app
from sentinel.core.constants import MIGRATIONS_SOURCE

runner = CliRunner()


@pytest.mark.unit
class TestPublishCommand:
    """Test `sentinel publish`."""

    def test_publishes_migrations(self, tmp_path):
        result = runner.invoke(app, ["publish", "--destination", str(tmp_path)])

        assert result.exit_code == 0
        published = sorted(p.name for p in tmp_path.iterdir())
        assert published == sorted(
            p.name for p in MIGRATIONS_SOURCE.iterdir() if p.suffix == ".py"
        )
        assert "Published [" in result.output

    def test_second_run_publishes_nothing(self, tmp_path):
        runner.invoke(app, ["publish", "-d", str(tmp_path)])

        result = runner.invoke(app, ["publish", "-d", str(tmp_path)])

        assert result.exit_code == 0
        assert "Nothing to publish for tag [migrations]." in result.output

    def test_force_republishes(self, tmp_path):
        runner.invoke(app, ["publish", "-d", str(tmp_path)])

        result = runner.invoke(app, ["publish", "-d", str(tmp_path), "--force"])

        assert result.exit_code == 0
        assert "Published [" in result.output

    def test_unknown_tag_fails(self, tmp_path):
        result = runner.invoke(app, ["publish", "--tag", "views", "-d", str(tmp_path)])

        assert result.exit_code == 1
        assert "error:" in result.output

    def test_destination_file_fails(self, tmp_path):
        target = tmp_path / "file.txt"
        target.write_text("x")

        result = runner.invoke(app, ["publish", "-d", str(target)])

        assert result.exit_code == 1
        assert "Destination is not a directory" in result.output


@pytest.mark.unit
class TestDirectivesCommand:
    """Test `sentinel directives`."""

    def test_lists_bindings(self):
        result = runner.invoke(app, ["directives"])

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert [line.split() for line in lines] == [
            ["can", "endcan", "can"],
            ["canatleast", "endcanatleast", "can_at_least"],
            ["role", "endrole", "is_role"],
        ]

    def test_no_command_prints_help(self):
        result = runner.invoke(app, [])

        assert "publish" in result.output
