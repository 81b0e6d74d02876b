# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Context dataclasses passed through pipeline steps."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .output import Output
from .runner import Runner


@dataclass
class ProvisionContext:
    """Context passed through the account provisioning steps.

    Each step runs one privileged command for ``username`` through
    ``runner``.  A step that fails raises and the remaining steps are
    skipped.
    """

    username: str
    runner: Runner
    progress: Output | None = None

    def run(self, argv: Sequence[str]) -> None:
        self.runner(argv)

    def info(self, msg: str) -> None:
        if self.progress:
            self.progress.info(msg)
