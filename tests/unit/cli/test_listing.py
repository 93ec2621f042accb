"""Unit tests for the list command."""

from collections.abc import Callable
from pathlib import Path
from unittest.mock import patch

from statusctl.cli.main import app
from typer.testing import CliRunner

runner = CliRunner()


class TestListCommand:
    """Tests for statusctl list."""

    def test_echoes_raw_entries(self, write_config: Callable[..., Path]) -> None:
        """Entries are shown exactly as configured, without scanning."""
        config_path = write_config(["~/src", "/work"], ["./relative", "~/src"])

        with patch("statusctl.scanner.inspector.run_command") as mock_run:
            result = runner.invoke(app, ["--config", str(config_path), "list"])

        assert result.exit_code == 0
        assert result.stdout == (
            "\ncollections:\n"
            "  ~/src\n"
            "  /work\n"
            "\nrepositories:\n"
            "  ./relative\n"
            "  ~/src\n"
            "\n"
        )
        mock_run.assert_not_called()

    def test_empty_config(self, write_config: Callable[..., Path]) -> None:
        """An empty config lists only the headers."""
        config_path = write_config()

        result = runner.invoke(app, ["--config", str(config_path), "list"])

        assert result.stdout == "\ncollections:\n\nrepositories:\n\n"

    def test_bootstraps_missing_config(self, tmp_path: Path) -> None:
        """A missing config is created and the command exits cleanly."""
        config_path = tmp_path / "config.toml"

        result = runner.invoke(app, ["--config", str(config_path), "list"])

        assert result.exit_code == 0
        assert config_path.exists()
        assert "Created empty config" in result.stdout
