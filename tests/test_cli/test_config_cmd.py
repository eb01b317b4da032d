"""Tests for the colocount config-template command."""

from pathlib import Path

from click.testing import CliRunner

from colocount.cli.main import cli
from colocount.core.config import AnalysisSettings


class TestConfigTemplate:
    def test_writes_loadable_template(self, runner: CliRunner, tmp_path: Path):
        out = tmp_path / "settings.yaml"
        result = runner.invoke(cli, ["config-template", str(out)])
        assert result.exit_code == 0, result.output
        settings = AnalysisSettings.from_yaml(out)
        assert settings.channel_names == ("GFP", "DAPI", "none")
        assert settings.threshold_method == "otsu"

    def test_overwrite_protection(self, runner: CliRunner, tmp_path: Path):
        out = tmp_path / "settings.yaml"
        out.write_text("x: 1\n")
        result = runner.invoke(cli, ["config-template", str(out)])
        assert result.exit_code == 1
        assert "already exists" in result.output
        result = runner.invoke(cli, ["config-template", str(out), "--overwrite"])
        assert result.exit_code == 0
