# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""Decorators for CLI commands."""

from functools import wraps
from typing import Callable, TypeVar

import typer

from .errors import PodmenError
from .output import out

R = TypeVar("R")


def handle_errors(func: Callable[..., R]) -> Callable[..., R]:
    """Decorator that reports PodmenError and exits with status 1."""
    @wraps(func)
    def wrapper(*args: object, **kwargs: object) -> R:
        try:
            return func(*args, **kwargs)
        except PodmenError as e:
            out.error(str(e))
            raise typer.Exit(1)
    return wrapper
