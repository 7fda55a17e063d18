"""Fixtures for CLI tests."""

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner():
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def config_path(tmp_path, monkeypatch):
    """Point the CLI at an isolated config file."""
    path = tmp_path / "config.yaml"
    monkeypatch.setenv("MEDIAMOD_CONFIG", str(path))
    return path
