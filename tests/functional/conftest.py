"""Fixtures for functional CLI tests."""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest
from click.testing import CliRunner, Result

from recordcheck.entrypoints.cli.main import recordcheck

# pylint: disable=redefined-outer-name


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the root logger configuration done by the CLI callback."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def runner(tmp_path, monkeypatch) -> CliRunner:
    """CliRunner whose flight recorder writes under `tmp_path`."""
    monkeypatch.setenv("RECORDCHECK_LOG_PATH", str(tmp_path / "latest.log"))
    return CliRunner()


@pytest.fixture
def invoke(runner) -> Callable[..., Result]:
    """Invoke the `recordcheck` CLI with the given arguments."""

    def _invoke(*args: str, stdin: str | None = None) -> Result:
        return runner.invoke(recordcheck, list(args), input=stdin)

    return _invoke
