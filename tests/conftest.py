"""Shared pytest fixtures for gqlscalars tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no gqlscalars.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")``.
    """
    monkeypatch.delenv("GQLSCALARS_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)

