# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``iniblocks export`` command."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from iniblocks.cli import HAS_YAML, _load_document, cli, common_options, console

if HAS_YAML:
    import yaml


@cli.command("export")
@click.argument("block")
@click.option(
    "--format", "fmt",
    type=click.Choice(["dotenv", "json", "yaml"]),
    default="dotenv",
    help="Output format: dotenv (default, KEY=value), json, yaml.",
)
@click.option(
    "--output", "-o",
    type=click.Path(exists=False),
    default=None,
    help="Output file path (default: stdout).",
)
@common_options
def export(ctx: click.Context, block: str, fmt: str, output: str | None) -> None:
    """Export the key-value pairs of BLOCK to stdout or a file."""
    doc = _load_document(ctx)
    pairs = doc.get_block_data(block)
    if pairs is None:
        raise click.ClickException(f"Block '{block}' not found.")
    if fmt == "yaml" and not HAS_YAML:
        raise click.ClickException("PyYAML is not installed. Install with: pip install iniblocks[yaml]")

    if output:
        path = Path(output)
        with path.open("w") as f:
            if fmt == "json":
                f.write(json.dumps(pairs, indent=2))
                f.write("\n")
            elif fmt == "yaml":
                yaml.dump(pairs, f, default_flow_style=False, sort_keys=False)
            else:
                for line in _format_dotenv_lines(pairs):
                    f.write(line + "\n")
        console.print(f"[green]Exported {len(pairs)} key(s) from {escape(f'[{block}]')} to {escape(output)}[/green]")
    else:
        out = Console(file=sys.stdout, highlight=False, markup=False, emoji=False, soft_wrap=True)
        if fmt == "json":
            out.print(json.dumps(pairs, indent=2))
        elif fmt == "yaml":
            yaml.dump(pairs, sys.stdout, default_flow_style=False, sort_keys=False)
        else:
            for line in _format_dotenv_lines(pairs):
                out.print(line)


def _format_env_value(value: str) -> str:
    """Format a value for .env: quote if needed."""
    if not value:
        return '""'
    if '"' in value or " " in value or "=" in value or "#" in value:
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return value


def _format_dotenv_lines(pairs: dict[str, str]) -> list[str]:
    return [f"{k}={_format_env_value(v)}" for k, v in pairs.items()]
