"""Shared pytest fixtures for typefmt tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run in an empty temp directory with no config overrides.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` so a stray
    ``typefmt.toml`` or ``TYPEFMT_*`` variable never leaks into a test.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TYPEFMT_CONFIG", raising=False)
    monkeypatch.delenv("TYPEFMT_NAMES__DEFAULT_STYLE", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None, None, None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg_level = logging.getLogger("typefmt").level
    yield
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("typefmt").setLevel(pkg_level)
