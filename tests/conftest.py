# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Shared pytest fixtures for podmen tests."""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from podmen import args as args_module
from podmen import inspector, provisioner
from podmen.errors import CommandError


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip host tests unless PODMEN_INTEGRATION=1."""
    if os.environ.get("PODMEN_INTEGRATION") == "1":
        return
    skip = pytest.mark.skip(reason="set PODMEN_INTEGRATION=1 to run host tests")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip)


class RecordingRunner:
    """Stand-in for run_command that records argv lists.

    Any argv containing a token listed in ``fail_on`` raises
    CommandError, as a failing child process would.
    """

    def __init__(self) -> None:
        self.calls: list[list[str]] = []
        self.fail_on: set[str] = set()

    def __call__(self, argv: Sequence[str]) -> None:
        argv = list(argv)
        self.calls.append(argv)
        if self.fail_on.intersection(argv):
            raise CommandError(
                argv,
                f"Command {argv!r} returned non-zero exit status 1.",
                1,
            )


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Typer CLI test runner."""
    return CliRunner()


@pytest.fixture
def recorder(monkeypatch: pytest.MonkeyPatch) -> RecordingRunner:
    """A RecordingRunner installed in place of the real process launcher."""
    runner = RecordingRunner()
    monkeypatch.setattr(provisioner, "run_command", runner)
    monkeypatch.setattr(inspector, "run_command", runner)
    return runner


@pytest.fixture
def default_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config path into tmp_path (file not created)."""
    path = tmp_path / "home" / ".config" / "podmen.conf"
    monkeypatch.setattr(args_module, "default_config_path", lambda: path)
    return path


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[..., Path]:
    """Write a config document and return its path."""
    def _write(data: Any, name: str = "podmen.conf") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write
