# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Service account provisioning."""

from __future__ import annotations

import logging

from .contexts import ProvisionContext
from .errors import CommandError, ProvisioningError
from .output import Output, out
from .provision import provision_pipeline
from .runner import Runner, run_command

logger = logging.getLogger(__name__)


def add_user(
    username: str,
    runner: Runner | None = None,
    progress: Output | None = out,
) -> None:
    """Create *username* as a nologin system account with linger enabled.

    The steps of :data:`provision_pipeline` run in order and stop at the
    first failure.  Nothing is rolled back.

    Raises:
        ProvisioningError: a step's command failed.
    """
    ctx = ProvisionContext(
        username=username,
        runner=runner or run_command,
        progress=progress,
    )
    logger.debug("Provisioning %r with %r", username, provision_pipeline)
    try:
        provision_pipeline.run(ctx)
    except CommandError as e:
        raise ProvisioningError(username, str(e)) from e

    if progress:
        progress.success(f"User {username} added successfully")
