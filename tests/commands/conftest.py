"""Helpers for invoking the CLI against a temporary task file."""

from __future__ import annotations

import pytest
from typer.testing import CliRunner

from taskman_cli.main import app


@pytest.fixture()
def runner():
    return CliRunner()


@pytest.fixture()
def invoke(runner, task_file):
    """Run ``taskman --file <tmp task file> <args...>``."""

    def _invoke(*args: str):
        return runner.invoke(app, ["--file", str(task_file), *args])

    return _invoke
