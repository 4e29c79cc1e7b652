# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""iniblocks CLI -- inspect INI files block by block.

The CLI is split into per-command modules under this package.  The ``cli``
click group and shared helpers (``console``, ``common_options``,
``_load_document``) live here so every command module can import them.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from iniblocks import __version__
from iniblocks.config import load_config
from iniblocks.document import Document, load
from iniblocks.errors import IniLoadError, IniParseError

try:
    import yaml
    HAS_YAML = True
except ImportError:
    HAS_YAML = False

DEFAULT_FILE = "conf.ini"

console = Console(stderr=True)


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_time=False, show_path=False)],
        force=True,
    )


def _load_document(ctx: click.Context) -> Document:
    """Load and parse the command's INI file, turning library errors into CLI errors."""
    path = ctx.obj["file"]
    cfg = ctx.obj["config"]
    try:
        doc = load(path, normalize_crlf=ctx.obj["normalize_crlf"], encoding=cfg.encoding)
        doc.parse(strict=ctx.obj["strict"])
    except IniLoadError as e:
        raise click.ClickException(str(e))
    except IniParseError as e:
        raise click.ClickException(f"{path}: {e}")
    return doc


def common_options(f: object) -> object:
    """Add --file to a command."""
    @functools.wraps(f)
    @click.option(
        "--file", "-f", "file", default=DEFAULT_FILE, show_default=True,
        type=click.Path(dir_okay=False, path_type=Path),
        help="INI file to read.",
    )
    @click.pass_context
    def wrapper(ctx: click.Context, file: Path, *args: object, **kwargs: object) -> object:
        ctx.obj["file"] = file
        return f(ctx, *args, **kwargs)
    return wrapper


# ---------------------------------------------------------------------------
# Top-level click group
# ---------------------------------------------------------------------------

@click.group()
@click.option(
    "--config", "config_path", default=None,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Path to .iniblocks.toml (default: searched upward from the current directory).",
)
@click.option(
    "--crlf/--no-crlf", "normalize_crlf", default=None,
    help="Convert CRLF line endings to LF before parsing (default: from config, else off).",
)
@click.option(
    "--strict/--lenient", "strict", default=None,
    help="Fail on, or skip, lines in a block that are not key=value pairs (default: from config, else strict).",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output.")
@click.version_option(__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Path | None,
    normalize_crlf: bool | None,
    strict: bool | None,
    verbose: bool,
) -> None:
    """Read INI files into named blocks of key-value pairs."""
    _setup_logging(verbose)
    try:
        cfg = load_config(config_path)
    except ValueError as e:
        raise click.UsageError(f"Invalid config file: {e}")
    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg
    ctx.obj["normalize_crlf"] = normalize_crlf if normalize_crlf is not None else cfg.normalize_crlf
    ctx.obj["strict"] = strict if strict is not None else cfg.strict
    ctx.obj["verbose"] = verbose


# ---------------------------------------------------------------------------
# Register all command modules (import triggers @cli.command registration)
# ---------------------------------------------------------------------------

from iniblocks.cli import (  # noqa: E402, F401
    inspect_cmd,
    get_cmd,
    export_cmd,
)
