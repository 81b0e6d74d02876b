#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2026 KDE Community
#
# SPDX-License-Identifier: GPL-3.0-or-later

"""
podmen CLI - Main entry point.

Usage:
    podmen [-c|--config PATH] COMMAND [ARGS]...

Provisions nologin service accounts and lists the podman containers
each configured account is running.
"""

import logging
import os

import typer

from .args import USAGE, Invocation, parse_args
from .decorators import handle_errors
from .inspector import podman_ps
from .output import out
from .provisioner import add_user

logger = logging.getLogger(__name__)


# Tokens are handed to parse_args untouched: no help option, and
# unknown options are kept as arguments.
app = typer.Typer(
    name="podmen",
    help="Manage podman service users and their containers",
    add_completion=False,
    pretty_exceptions_show_locals=False,
)


def usage() -> None:
    """Print usage text to stdout."""
    out.info(USAGE)


def usage_error(msg: str | None = None) -> typer.Exit:
    """Report a usage problem and return the exit to raise."""
    if msg:
        out.error(msg)
    usage()
    return typer.Exit(1)


@handle_errors
def dispatch(inv: Invocation) -> None:
    """Route a parsed invocation to its command."""
    logger.debug("Dispatching %s", inv)

    if inv.command is None:
        raise usage_error()

    if inv.command == "adduser":
        if not inv.params:
            raise usage_error("Error: username required for adduser command")
        add_user(inv.params[0])
    elif inv.command == "ps":
        podman_ps(inv.config_path)
    else:
        raise usage_error(f"Unknown command: {inv.command}")


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
    add_help_option=False,
)
def main(ctx: typer.Context) -> None:
    """Add service users or list their containers."""
    dispatch(parse_args(ctx.args))


def configure_logging() -> None:
    """Send diagnostics to stderr at the level named by PODMEN_LOG_LEVEL."""
    name = os.environ.get("PODMEN_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(name)s: %(levelname)s: %(message)s",
    )


def cli() -> None:
    """CLI entry point for setuptools."""
    configure_logging()
    app(prog_name="podmen")


if __name__ == "__main__":
    cli()
