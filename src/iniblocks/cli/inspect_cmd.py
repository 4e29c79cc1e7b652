# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``iniblocks check``, ``iniblocks strip`` and ``iniblocks blocks`` commands."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from iniblocks.cli import _load_document, cli, common_options, console


@cli.command()
@common_options
def check(ctx: click.Context) -> None:
    """Parse the file and report the first error, if any."""
    doc = _load_document(ctx)
    console.print(f"[green]OK: {escape(str(ctx.obj['file']))} has {len(doc.blocks)} block(s)[/green]")


@cli.command()
@common_options
def strip(ctx: click.Context) -> None:
    """Print the file with all comments removed."""
    doc = _load_document(ctx)
    click.echo(doc.stripped, nl=False)


@cli.command()
@common_options
def blocks(ctx: click.Context) -> None:
    """List the blocks in the file and how many keys each holds."""
    doc = _load_document(ctx)
    if not doc.blocks:
        console.print("[yellow]No blocks found.[/yellow]")
        return
    table = Table(title=f"Blocks in {escape(str(ctx.obj['file']))}")
    table.add_column("Block", style="cyan")
    table.add_column("Keys", style="white", justify="right")
    for name, block in doc.blocks.items():
        table.add_row(escape(name), str(len(block.data)))
    console.print(table)
