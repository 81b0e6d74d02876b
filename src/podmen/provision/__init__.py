# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Provisioning pipeline: steps run to set up a service account.

Importing this package registers all steps with the pipeline.
"""

from ..contexts import ProvisionContext
from ..pipeline import Pipeline

provision_pipeline = Pipeline[ProvisionContext]("provision")

# Import step modules so their decorators register with the pipeline.
from . import create_account as _  # noqa: F401, E402
from . import enable_linger as _  # noqa: F401, E402
