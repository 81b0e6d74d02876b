# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Loading of the podmen configuration file.

The file is a JSON document::

    { "users": { "web": {}, "db": { "uid": 1201 } } }

It is read fresh on every invocation and never written back.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .errors import ConfigNotFoundError, ConfigParseError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "podmen.conf"


def default_config_path() -> Path:
    """Return ``~/.config/podmen.conf`` for the invoking user."""
    return Path.home() / ".config" / CONFIG_FILENAME


def load_config(path: str | Path) -> Any:
    """Read and parse the configuration file at *path*.

    Raises:
        ConfigNotFoundError: *path* does not exist.
        ConfigParseError: the file is not valid JSON.

    Other read failures (permissions, a directory, undecodable bytes)
    are not caught.
    """
    path = Path(path)
    logger.debug("Loading config from %s", path)
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigNotFoundError(path) from None

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigParseError(path, str(e)) from e
