"""Fixtures for F4 tests - CLI."""

import pytest
from typer.testing import CliRunner


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run commands from an empty working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
