# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Command-line parsing."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .config import default_config_path

CONFIG_OPTIONS = ("-c", "--config")

USAGE = """\
Usage: podmen [options] <command> [arguments]

Commands:
  adduser <name>    Add a new user without login privileges and enable linger
  ps                Show podman containers for all configured users

Options:
  -c, --config <path>    Specify config file path (default: ~/.config/podmen.conf)

Examples:
  podmen adduser web
  podmen ps
  podmen --config /etc/podmen.conf ps
"""


@dataclass
class Invocation:
    """Parsed state of one podmen run."""

    config_path: Path
    command: str | None = None
    params: list[str] = field(default_factory=lambda: list[str]())


def parse_args(
    argv: Sequence[str],
    default_path: Callable[[], Path] | None = None,
) -> Invocation:
    """Split *argv* (without the program name) into an :class:`Invocation`.

    ``-c``/``--config`` is recognised anywhere and takes the next token
    as the config path.  The first other token is the command and every
    token after it is a parameter, dashes or not.
    """
    inv = Invocation(config_path=(default_path or default_config_path)())

    tokens = iter(argv)
    for arg in tokens:
        if arg in CONFIG_OPTIONS:
            value = next(tokens, None)
            if value is not None:
                inv.config_path = Path(value)
        elif inv.command is None:
            inv.command = arg
        else:
            inv.params.append(arg)

    return inv
