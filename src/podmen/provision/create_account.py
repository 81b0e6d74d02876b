# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Provisioning step: create a system account that cannot log in."""

from ..contexts import ProvisionContext
from ..runner import sudo
from . import provision_pipeline

NOLOGIN_SHELL = "/usr/sbin/nologin"


@provision_pipeline.step(order=100)
def create_account(ctx: ProvisionContext) -> None:
    """Create ``ctx.username`` as a system user with a nologin shell."""
    ctx.info(f"Adding user: {ctx.username}")
    ctx.run(sudo("useradd", "-r", "-s", NOLOGIN_SHELL, ctx.username))
