"""Tests for the command-line interface."""

import pytest
from typer.testing import CliRunner

from consensus_panel import cli
from consensus_panel.cli import app
from consensus_panel.config import get_settings


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fresh_settings():
    """Re-read settings from the environment for the duration of a test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def recorded_panels(monkeypatch):
    """Record the arguments every command builds its panels with."""
    calls = []
    original = cli.painting_panel

    def recording(panelist_count, traits_per_panelist, **kwargs):
        calls.append((panelist_count, traits_per_panelist))
        return original(panelist_count, traits_per_panelist, **kwargs)

    monkeypatch.setattr(cli, "painting_panel", recording)
    return calls


class TestDemoCommand:
    """Tests for the demo command."""

    def test_demo_runs(self, runner):
        """Test a seeded demo run."""
        result = runner.invoke(app, ["demo", "--seed", "1", "--panelists", "5"])
        assert result.exit_code == 0
        assert "Verdict" in result.output
        assert "Opinion" in result.output

    def test_demo_rejects_bad_painting(self, runner):
        """Test that invalid painting features exit with an error."""
        result = runner.invoke(app, ["demo", "--colorfulness", "2"])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_demo_rejects_empty_panel(self, runner):
        """Test that a zero-sized panel exits with an error."""
        result = runner.invoke(app, ["demo", "--panelists", "0"])
        assert result.exit_code == 1

    def test_demo_uses_configured_traits(
        self, runner, monkeypatch, fresh_settings, recorded_panels
    ):
        """Test that traits per panelist falls back to configuration."""
        monkeypatch.setenv("CONSENSUS_TRAITS_PER_PANELIST", "1")
        monkeypatch.setenv("CONSENSUS_PANELIST_COUNT", "4")
        result = runner.invoke(app, ["demo", "--seed", "1"])
        assert result.exit_code == 0
        assert recorded_panels == [(4, 1)]

    def test_demo_option_overrides_configuration(
        self, runner, monkeypatch, fresh_settings, recorded_panels
    ):
        """Test that --traits wins over the configured value."""
        monkeypatch.setenv("CONSENSUS_TRAITS_PER_PANELIST", "1")
        result = runner.invoke(app, ["demo", "--seed", "1", "-n", "3", "--traits", "2"])
        assert result.exit_code == 0
        assert recorded_panels == [(3, 2)]


class TestConvergenceCommand:
    """Tests for the convergence command."""

    def test_convergence_runs(self, runner):
        """Test a small seeded convergence table."""
        result = runner.invoke(
            app, ["convergence", "--sizes", "1,10", "--rounds", "5", "--seed", "3"]
        )
        assert result.exit_code == 0
        assert "Opinion spread" in result.output

    def test_convergence_rejects_bad_sizes(self, runner):
        """Test that non-numeric sizes exit with an error."""
        result = runner.invoke(app, ["convergence", "--sizes", "a,b"])
        assert result.exit_code == 1

    def test_convergence_uses_configured_traits(
        self, runner, monkeypatch, fresh_settings, recorded_panels
    ):
        """Test that every panel size gets the configured traits per panelist."""
        monkeypatch.setenv("CONSENSUS_TRAITS_PER_PANELIST", "2")
        result = runner.invoke(
            app, ["convergence", "--sizes", "1,6", "--rounds", "3", "--seed", "2"]
        )
        assert result.exit_code == 0
        assert recorded_panels == [(1, 2), (6, 2)]
