# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""``iniblocks get`` command."""

from __future__ import annotations

import click

from iniblocks.cli import _load_document, cli, common_options


@cli.command()
@click.argument("block")
@click.argument("key", required=False)
@common_options
def get(ctx: click.Context, block: str, key: str | None) -> None:
    """Print the value of KEY in BLOCK, or every key=value pair of BLOCK."""
    doc = _load_document(ctx)
    data = doc.get_block_data(block)
    if data is None:
        raise click.ClickException(f"Block '{block}' not found.")
    if key is None:
        for k, v in data.items():
            click.echo(f"{k}={v}")
        return
    if key not in data:
        raise click.ClickException(f"Key '{key}' not found in block '{block}'.")
    click.echo(data[key])
