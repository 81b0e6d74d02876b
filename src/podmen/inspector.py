# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Listing of podman containers for every configured user."""

from __future__ import annotations

import logging
from pathlib import Path

from .config import load_config
from .errors import CommandError
from .output import Output, out
from .runner import Runner, run_command, sudo_as
from .users import get_users

logger = logging.getLogger(__name__)


def podman_ps(
    config_path: str | Path,
    runner: Runner | None = None,
    output: Output = out,
) -> None:
    """Run ``podman ps`` as each configured user.

    A failure for one user is reported and the loop moves on to the
    next; it never aborts the listing.
    """
    run = runner or run_command
    users = get_users(load_config(config_path))

    if not users:
        output.info("No users found in config")
        return

    for user in users:
        username = user["name"]
        output.header(f"=== Containers for user: {username} ===")
        try:
            run(sudo_as(username, "podman", "ps"))
        except CommandError as e:
            logger.debug("podman ps failed for %r", username, exc_info=True)
            output.error(f"Failed to run podman ps for user {username}: {e}")
