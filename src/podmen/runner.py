# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Blocking launcher for external commands.

Commands are always passed as an argument list, never through a
shell.  The child inherits stdin, stdout and stderr, and there is no
timeout: a hung child blocks the caller.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable, Sequence

from .errors import CommandError

logger = logging.getLogger(__name__)

Runner = Callable[[Sequence[str]], None]


def run_command(argv: Sequence[str]) -> None:
    """Run *argv* to completion.

    Raises:
        CommandError: the command could not be started or exited non-zero.
    """
    logger.debug("Running %s", argv)
    try:
        subprocess.run(list(argv), check=True)
    except subprocess.CalledProcessError as e:
        logger.debug("%s exited with status %d", argv[0], e.returncode)
        raise CommandError(argv, str(e), e.returncode) from e
    except (OSError, ValueError) as e:
        # ValueError: argv that cannot be passed to exec, e.g. a NUL byte.
        logger.debug("Could not start %s: %s", argv[0], e)
        raise CommandError(argv, str(e)) from e


def sudo(*args: str) -> list[str]:
    """Build a privileged command line."""
    return ["sudo", *args]


def sudo_as(user: str, *args: str) -> list[str]:
    """Build a command line that runs as *user*."""
    return ["sudo", "-u", user, *args]
