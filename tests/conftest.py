"""Shared pytest fixtures for create-clean-arch tests."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Generator, Sequence
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from create_clean_arch.config.settings import ScaffoldSettings
from create_clean_arch.domain.errors import ExternalToolFailure


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host CREATE_CLEAN_ARCH_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("CREATE_CLEAN_ARCH_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """configure_logging() replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("create_clean_arch")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> ScaffoldSettings:
    """Settings whose parent directory is the test's tmp_path."""
    return ScaffoldSettings.from_cli(parent_dir=tmp_path)


class RecordingRunner:
    """ToolRunner stand-in that records calls and can fail a given step."""

    def __init__(self, fail_step: str | None = None, returncode: int = 1) -> None:
        self.calls: list[tuple[str, list[str], Path]] = []
        self.fail_step = fail_step
        self.returncode = returncode

    def run(self, step: str, argv: Sequence[str], cwd: Path) -> None:
        self.calls.append((step, list(argv), cwd))
        if step == self.fail_step:
            msg = f"{step}: '{' '.join(argv)}' exited with status {self.returncode}"
            raise ExternalToolFailure(step, msg, returncode=self.returncode)

    @property
    def steps(self) -> list[str]:
        return [step for step, _argv, _cwd in self.calls]


@pytest.fixture
def runner() -> RecordingRunner:
    """A ToolRunner stand-in where every step succeeds."""
    return RecordingRunner()


@pytest.fixture
def failing_runner() -> RecordingRunner:
    """A ToolRunner stand-in whose install step exits 1."""
    return RecordingRunner(fail_step="install")


@pytest.fixture
def fake_tools() -> Generator[list[list[str]]]:
    """Patch subprocess.run for the CLI: every command succeeds.

    Yields the list of argv lists that were run.
    """
    calls: list[list[str]] = []

    def _run(argv: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        calls.append(argv)
        return subprocess.CompletedProcess(argv, 0)

    with patch("create_clean_arch.infrastructure.tools.subprocess.run", side_effect=_run):
        yield calls


@pytest.fixture
def failing_install() -> Generator[list[list[str]]]:
    """Patch subprocess.run for the CLI: ``npm install`` exits 1."""
    calls: list[list[str]] = []

    def _run(argv: list[str], **kwargs: Any) -> subprocess.CompletedProcess[str]:
        calls.append(argv)
        if argv[0] == "npm":
            raise subprocess.CalledProcessError(1, argv)
        return subprocess.CompletedProcess(argv, 0)

    with patch("create_clean_arch.infrastructure.tools.subprocess.run", side_effect=_run):
        yield calls
