# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Entry point for ``python -m podmen``."""

from .main import cli

if __name__ == "__main__":
    cli()
