# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Exceptions raised by podmen operations."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path


class PodmenError(Exception):
    """Base error; ``str(e)`` is the message shown to the user."""


class ConfigError(PodmenError):
    """The configuration file could not be used."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class ConfigNotFoundError(ConfigError):
    """The configuration file does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"Config file not found: {path}", path)


class ConfigParseError(ConfigError):
    """The configuration file is not valid JSON."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Failed to parse config file {path}: {reason}", path)
        self.reason = reason


class CommandError(PodmenError):
    """An external command failed to launch or exited non-zero."""

    def __init__(
        self,
        argv: Sequence[str],
        message: str,
        returncode: int | None = None,
    ):
        super().__init__(message)
        self.argv = list(argv)
        self.returncode = returncode


class ProvisioningError(PodmenError):
    """Creating or configuring a service account failed."""

    def __init__(self, username: str, reason: str):
        super().__init__(f"Failed to add user {username}: {reason}")
        self.username = username
        self.reason = reason
