# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Projection of the configuration into user records."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

UserRecord = dict[str, Any]


def get_users(config: Any) -> list[UserRecord]:
    """Return one record per configured user, in file order.

    Each record is the user's attributes plus ``name`` set to the key;
    ``name`` overrides a ``name`` attribute.  When ``users`` is missing
    or is not a JSON object (null, a list, a scalar) the result is empty.
    """
    if not isinstance(config, Mapping):
        return []
    users = config.get("users")
    if not isinstance(users, Mapping):
        return []

    records: list[UserRecord] = []
    for username, data in users.items():
        extra = dict(data) if isinstance(data, Mapping) else {}
        records.append({**extra, "name": username})
    return records
