# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Provisioning step: enable loginctl linger for the new account."""

from ..contexts import ProvisionContext
from ..runner import sudo
from . import provision_pipeline


@provision_pipeline.step(order=200)
def enable_linger(ctx: ProvisionContext) -> None:
    """Keep the user's systemd services running without a login session."""
    ctx.info(f"Enabling linger for user: {ctx.username}")
    ctx.run(sudo("loginctl", "enable-linger", ctx.username))
