# Copyright (c) 2026 Ramin Firoozye
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Entry point for the iniblocks CLI (run via ``iniblocks`` or ``python -m iniblocks``)."""

from __future__ import annotations

from iniblocks.cli import cli


def main() -> None:
    """Run the CLI."""
    cli()


if __name__ == "__main__":
    main()
