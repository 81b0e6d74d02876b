# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Console output helpers.

Normal lines go to stdout, errors to stderr.  Markup,
emoji and highlighting are disabled: usernames and child error text
are printed exactly as given.
"""

from __future__ import annotations

from rich.console import Console


def _console(stderr: bool = False) -> Console:
    return Console(
        stderr=stderr,
        markup=False,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )


class Output:
    """Styled printing for CLI commands."""

    def __init__(self) -> None:
        self.console = _console()
        self.err_console = _console(stderr=True)

    def info(self, msg: str = "") -> None:
        self.console.print(msg)

    def header(self, msg: str) -> None:
        self.console.print()
        self.console.print(msg, style="bold cyan")

    def success(self, msg: str) -> None:
        self.console.print(msg, style="green")

    def error(self, msg: str) -> None:
        self.err_console.print(msg, style="bold red")


out = Output()
