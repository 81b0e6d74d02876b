# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""podmen - service accounts and their podman containers."""

__version__ = "0.1.0"
