"""Tests for the grade-eval CLI commands: evaluate, strategies, init."""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from grade_eval.cli import app
from grade_eval.cli_utils import EXIT_CONFIG_ERROR, EXIT_ERROR, EXIT_SUCCESS
from grade_eval.core.config import CONFIG_FILENAME

runner = CliRunner()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty project directory (no config file)."""
    return tmp_path


# =============================================================================
# evaluate
# =============================================================================


class TestEvaluateCommand:
    """Tests for grade-eval evaluate."""

    def test_help_output(self) -> None:
        """--help lists the score options."""
        result = runner.invoke(app, ["evaluate", "--help"])

        assert result.exit_code == 0
        assert "--p1" in result.output
        assert "--strategy" in result.output

    def test_both_strategies(self, project_dir: Path) -> None:
        """Default run prints one line per strategy."""
        result = runner.invoke(
            app, ["evaluate", "--p1", "7", "--p2", "3", "--project", str(project_dir)]
        )

        assert result.exit_code == EXIT_SUCCESS
        assert "[arithmetic] P1: 7.00 P2: 3.00 Average: 5.00 Status: Failed" in result.output
        assert "[geometric] P1: 7.00 P2: 3.00" in result.output

    def test_single_strategy(self, project_dir: Path) -> None:
        """--strategy restricts evaluation."""
        result = runner.invoke(
            app,
            ["evaluate", "-a", "9", "-b", "9", "-S", "geometric", "-p", str(project_dir)],
        )

        assert result.exit_code == EXIT_SUCCESS
        assert "Average: 9.00 Status: Approved" in result.output
        assert "arithmetic" not in result.output

    def test_subject_shown(self, project_dir: Path) -> None:
        """Subject name is printed above the results."""
        result = runner.invoke(
            app,
            ["evaluate", "-a", "8", "-b", "6", "-s", "Calculus", "-p", str(project_dir)],
        )

        assert result.exit_code == EXIT_SUCCESS
        assert "Subject: Calculus" in result.output

    def test_json_output(self, project_dir: Path) -> None:
        """--json prints the report as JSON."""
        result = runner.invoke(
            app,
            ["evaluate", "-a", "8", "-b", "2", "--json", "-s", "Math", "-p", str(project_dir)],
        )

        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(result.stdout)
        assert data["subject"] == "Math"
        geometric = data["evaluations"][1]
        assert geometric["strategy"] == "geometric"
        assert geometric["aggregate"] == pytest.approx(4.0)
        assert geometric["passed"] is False

    def test_verbose_table(self, project_dir: Path) -> None:
        """--verbose renders a table."""
        result = runner.invoke(
            app, ["evaluate", "-a", "9", "-b", "9", "-v", "-p", str(project_dir)]
        )

        assert result.exit_code == EXIT_SUCCESS
        assert "Threshold" in result.output
        assert "Approved" in result.output

    def test_interactive_prompts(self, project_dir: Path) -> None:
        """Missing scores are prompted for."""
        result = runner.invoke(
            app,
            ["evaluate", "-p", str(project_dir)],
            input="Biology\n7\n3\n",
        )

        assert result.exit_code == EXIT_SUCCESS
        assert "P1 score" in result.output
        assert "Subject: Biology" in result.output
        assert "Average: 5.00 Status: Failed" in result.output

    def test_non_finite_score(self, project_dir: Path) -> None:
        """nan is rejected with exit code 1."""
        result = runner.invoke(
            app, ["evaluate", "-a", "nan", "-b", "3", "-p", str(project_dir)]
        )

        assert result.exit_code == EXIT_ERROR
        assert "finite" in result.output

    def test_unknown_strategy(self, project_dir: Path) -> None:
        """Unknown strategies exit with code 1."""
        result = runner.invoke(
            app, ["evaluate", "-a", "7", "-b", "3", "-S", "harmonic", "-p", str(project_dir)]
        )

        assert result.exit_code == EXIT_ERROR
        assert "Unknown strategy" in result.output

    def test_config_thresholds_applied(self, project_dir: Path) -> None:
        """Project config overrides thresholds."""
        (project_dir / CONFIG_FILENAME).write_text("thresholds:\n  geometric: 3.0\n")

        result = runner.invoke(
            app,
            ["evaluate", "-a", "8", "-b", "2", "-S", "geometric", "-p", str(project_dir)],
        )

        assert result.exit_code == EXIT_SUCCESS
        assert "Status: Approved" in result.output

    def test_config_bounds_applied(self, project_dir: Path) -> None:
        """Scores outside configured bounds are rejected."""
        (project_dir / CONFIG_FILENAME).write_text("bounds:\n  minimum: 0\n  maximum: 10\n")

        result = runner.invoke(
            app, ["evaluate", "-a", "12", "-b", "3", "-p", str(project_dir)]
        )

        assert result.exit_code == EXIT_ERROR
        assert "outside allowed range" in result.output

    def test_invalid_config(self, project_dir: Path) -> None:
        """Broken config exits with EXIT_CONFIG_ERROR."""
        (project_dir / CONFIG_FILENAME).write_text("precision: [1\n")

        result = runner.invoke(
            app, ["evaluate", "-a", "7", "-b", "3", "-p", str(project_dir)]
        )

        assert result.exit_code == EXIT_CONFIG_ERROR

    def test_missing_explicit_config(self, project_dir: Path) -> None:
        """--config pointing nowhere exits with EXIT_CONFIG_ERROR."""
        result = runner.invoke(
            app,
            ["evaluate", "-a", "7", "-b", "3", "-c", str(project_dir / "missing.yaml")],
        )

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "not found" in result.output

    def test_non_utf8_config(self, project_dir: Path) -> None:
        """Undecodable config bytes exit with EXIT_CONFIG_ERROR."""
        (project_dir / CONFIG_FILENAME).write_bytes(b"precision: 2\n# \xff\xfe bad\n")

        result = runner.invoke(
            app, ["evaluate", "-a", "7", "-b", "3", "-p", str(project_dir)]
        )

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "UTF-8" in result.output

    def test_unknown_strategy_in_config(self, project_dir: Path) -> None:
        """A config naming an unregistered strategy is a config error."""
        (project_dir / CONFIG_FILENAME).write_text("strategies: [harmonic]\n")

        result = runner.invoke(
            app, ["evaluate", "-a", "7", "-b", "3", "-p", str(project_dir)]
        )

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "harmonic" in result.output

    def test_json_with_prompts_keeps_stdout_clean(self, project_dir: Path) -> None:
        """Prompts go to stderr in JSON mode so stdout parses as JSON."""
        result = runner.invoke(
            app,
            ["evaluate", "--json", "-p", str(project_dir)],
            input="Chemistry\n9\n9\n",
        )

        assert result.exit_code == EXIT_SUCCESS
        data = json.loads(result.stdout)
        assert data["subject"] == "Chemistry"
        assert data["evaluations"][1]["passed"] is True
        assert "P1 score" not in result.stdout


# =============================================================================
# strategies
# =============================================================================


class TestStrategiesCommand:
    """Tests for grade-eval strategies."""

    def test_lists_builtins(self, project_dir: Path) -> None:
        """Both built-in strategies are listed with thresholds."""
        result = runner.invoke(app, ["strategies", "-p", str(project_dir)])

        assert result.exit_code == EXIT_SUCCESS
        assert "arithmetic" in result.output
        assert "geometric" in result.output
        assert "> 5" in result.output
        assert "> 7" in result.output

    def test_shows_overridden_threshold(self, project_dir: Path) -> None:
        """Thresholds from config are displayed."""
        (project_dir / CONFIG_FILENAME).write_text("thresholds:\n  geometric: 6.5\n")

        result = runner.invoke(app, ["strategies", "-p", str(project_dir)])

        assert result.exit_code == EXIT_SUCCESS
        assert "> 6.5" in result.output

    def test_unknown_strategy_in_config(self, project_dir: Path) -> None:
        """A bad strategy name in config is reported, not ignored."""
        (project_dir / CONFIG_FILENAME).write_text("thresholds:\n  harmonic: 4.0\n")

        result = runner.invoke(app, ["strategies", "-p", str(project_dir)])

        assert result.exit_code == EXIT_CONFIG_ERROR
        assert "harmonic" in result.output


# =============================================================================
# init
# =============================================================================


class TestInitCommand:
    """Tests for grade-eval init."""

    def test_creates_config(self, project_dir: Path) -> None:
        """init writes grade-eval.yaml."""
        result = runner.invoke(app, ["init", "-p", str(project_dir)])

        assert result.exit_code == EXIT_SUCCESS
        assert (project_dir / CONFIG_FILENAME).is_file()

    def test_dry_run_writes_nothing(self, project_dir: Path) -> None:
        """--dry-run only previews."""
        result = runner.invoke(app, ["init", "-p", str(project_dir), "--dry-run"])

        assert result.exit_code == EXIT_SUCCESS
        assert "Dry run" in result.output
        assert not (project_dir / CONFIG_FILENAME).exists()

    def test_existing_config_kept(self, project_dir: Path) -> None:
        """Existing config is not overwritten without --force."""
        config_path = project_dir / CONFIG_FILENAME
        config_path.write_text("precision: 4\n")

        result = runner.invoke(app, ["init", "-p", str(project_dir)])

        assert result.exit_code == EXIT_SUCCESS
        assert config_path.read_text() == "precision: 4\n"
        assert "--force" in result.output

    def test_force_overwrites(self, project_dir: Path) -> None:
        """--force replaces existing config."""
        config_path = project_dir / CONFIG_FILENAME
        config_path.write_text("precision: 4\n")

        result = runner.invoke(app, ["init", "-p", str(project_dir), "--force"])

        assert result.exit_code == EXIT_SUCCESS
        assert config_path.read_text().startswith("# grade-eval configuration")

    def test_missing_directory(self, tmp_path: Path) -> None:
        """Nonexistent project directory exits with code 1."""
        result = runner.invoke(app, ["init", "-p", str(tmp_path / "nope")])

        assert result.exit_code == EXIT_ERROR
        assert "does not exist" in result.output
